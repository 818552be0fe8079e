"""Custom exception classes for romconv error handling.

This module defines the exception hierarchy for numeral conversion:
- FormatError: Text that is not a base-10 integer
- RangeError: Arabic values outside 1-4000
- InvalidSymbolError: Roman text containing an unmatched symbol
- ClassificationError: Input that is neither Arabic nor Roman
- OutputError: Output file open/write failures

All exceptions inherit from RomconvError for consistent error handling.
"""

from typing import Any


class RomconvError(Exception):
    """Base exception for all romconv errors.

    Provides a common base class for all custom exceptions, enabling
    catch-all error handling at the CLI boundary.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error description
            context: Optional dictionary of contextual information (input text,
                    offending values, file paths, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        if not self.context:
            return self.message

        context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} [{context_str}]"


class FormatError(RomconvError):
    """Exception raised when text cannot be parsed as a base-10 integer.

    Context typically includes:
        - text: The text that failed to parse
    """

    def __init__(self, message: str, text: str | None = None, **extra_context: Any) -> None:
        context: dict[str, Any] = {}
        if text is not None:
            context["text"] = text
        context.update(extra_context)

        super().__init__(message, context)


class RangeError(RomconvError):
    """Exception raised when an Arabic value falls outside the supported range.

    Context typically includes:
        - value: The offending value
        - minimum: Smallest supported value
        - maximum: Largest supported value
    """

    def __init__(
        self,
        message: str,
        value: int | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
        **extra_context: Any,
    ) -> None:
        """Initialize range error with bound details.

        Args:
            message: Human-readable error description
            value: The value that was out of range
            minimum: Lower bound of the supported range
            maximum: Upper bound of the supported range
            **extra_context: Additional context information
        """
        context: dict[str, Any] = {}
        if value is not None:
            context["value"] = value
        if minimum is not None:
            context["minimum"] = minimum
        if maximum is not None:
            context["maximum"] = maximum
        context.update(extra_context)

        super().__init__(message, context)


class InvalidSymbolError(RomconvError):
    """Exception raised when Roman decoding meets a character it cannot match.

    The classifier normally rejects such input first, so this mostly guards
    direct callers of the decoder.

    Context typically includes:
        - text: The full Roman text being decoded
        - symbol: The unmatched character
        - position: Index of the unmatched character
    """

    def __init__(
        self,
        message: str,
        text: str | None = None,
        symbol: str | None = None,
        position: int | None = None,
        **extra_context: Any,
    ) -> None:
        context: dict[str, Any] = {}
        if text is not None:
            context["text"] = text
        if symbol is not None:
            context["symbol"] = symbol
        if position is not None:
            context["position"] = position
        context.update(extra_context)

        super().__init__(message, context)


class ClassificationError(RomconvError):
    """Exception raised when input is neither an Arabic nor a Roman numeral."""

    def __init__(self, message: str, text: str | None = None, **extra_context: Any) -> None:
        context: dict[str, Any] = {}
        if text is not None:
            context["text"] = text
        context.update(extra_context)

        super().__init__(message, context)


class OutputError(RomconvError):
    """Exception raised when writing conversion output to a file fails.

    Context typically includes:
        - output_path: Path of the output file
        - mode: File mode ("truncate" or "append")
        - reason: Underlying OS error message
    """

    def __init__(
        self,
        message: str,
        output_path: str | None = None,
        mode: str | None = None,
        reason: str | None = None,
        **extra_context: Any,
    ) -> None:
        """Initialize output error with file details.

        Args:
            message: Human-readable error description
            output_path: Path where the output file should be written
            mode: Write mode that was requested
            reason: Specific reason for the failure
            **extra_context: Additional context information
        """
        context: dict[str, Any] = {}
        if output_path is not None:
            context["output_path"] = output_path
        if mode is not None:
            context["mode"] = mode
        if reason is not None:
            context["reason"] = reason
        context.update(extra_context)

        super().__init__(message, context)
