"""Exit code constants for CLI commands.

This module defines standard exit codes for different error conditions,
following Unix conventions where 0 indicates success and non-zero values
indicate different types of failures.

Exit codes:
    0: SUCCESS - Operation completed successfully
    1: UNEXPECTED_ERROR - Unexpected/unhandled exception
    2: FORMAT_ERROR - Input text is not a valid integer
    3: RANGE_ERROR - Arabic value or range bound outside 1-4000
    4: SYMBOL_ERROR - Roman text contains an invalid symbol
    5: CLASSIFICATION_ERROR - Input is neither Arabic nor Roman
    6: OUTPUT_ERROR - Output file opening/writing failure
    7: CONFIG_ERROR - Configuration file or argument error
"""


class ExitCode:
    """Standard exit codes for CLI commands.
    
    These exit codes enable scripts to handle different failure types
    appropriately. All codes follow Unix conventions.
    
    Example:
        >>> from romconv.cli.exit_codes import ExitCode
        >>> import sys
        >>> 
        >>> try:
        ...     # ... conversion ...
        ...     sys.exit(ExitCode.SUCCESS)
        ... except RangeError:
        ...     sys.exit(ExitCode.RANGE_ERROR)
    """
    
    SUCCESS = 0
    """Operation completed successfully."""
    
    UNEXPECTED_ERROR = 1
    """Unexpected or unhandled exception occurred."""
    
    FORMAT_ERROR = 2
    """Input text could not be parsed as an integer."""
    
    RANGE_ERROR = 3
    """Arabic value or range bound outside the supported range."""
    
    SYMBOL_ERROR = 4
    """Roman text contained a symbol that could not be decoded."""
    
    CLASSIFICATION_ERROR = 5
    """Input matched neither the Arabic nor the Roman pattern."""
    
    OUTPUT_ERROR = 6
    """Output file could not be opened or written."""
    
    CONFIG_ERROR = 7
    """Configuration file or argument error."""
