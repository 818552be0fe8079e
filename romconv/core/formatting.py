"""Conversion options, result formatting, and range generation.

This module sits between the numeral core and the CLI. It carries the
presentation options explicitly (no process-wide flags) and turns computed
values into display lines:
- ConversionOptions: additive/simple switches for one run
- format_value: Build the display line for a single conversion
- convert_value: Classify input text and produce its display line
- generate_range: Lazily produce display lines for an inclusive Arabic range
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from romconv.core.exceptions import ClassificationError, RangeError
from romconv.core.numerals import (
    MAX_VALUE,
    MIN_VALUE,
    NotationMode,
    NumeralType,
    arabic_to_roman,
    classify,
    parse_arabic,
    roman_to_arabic,
    validate_arabic,
)

logger = logging.getLogger(__name__)

ADDITIVE_SUFFIX = "\t (add)"
NOT_APPLICABLE = "NA"


@dataclass(frozen=True)
class ConversionOptions:
    """Presentation options for a conversion run.

    Attributes:
        additive: Produce Roman output without subtractive pairs.
        simple: Emit only the converted value instead of "<input> = <output>".

    Example:
        >>> options = ConversionOptions(additive=True)
        >>> options.mode
        <NotationMode.ADDITIVE: 'additive'>
    """

    additive: bool = False
    simple: bool = False

    @property
    def mode(self) -> NotationMode:
        """Notation mode implied by the additive switch."""
        return NotationMode.ADDITIVE if self.additive else NotationMode.SUBTRACTIVE


def format_value(
    arabic: int,
    roman: str,
    target: NumeralType,
    options: ConversionOptions,
) -> str:
    """Format a computed conversion for display.

    Args:
        arabic: Arabic value of the conversion
        roman: Roman text of the conversion
        target: Numeral type that was produced (ROMAN for Arabic -> Roman,
               ARABIC for Roman -> Arabic)
        options: Presentation options

    Returns:
        The display line. Simple mode yields only the converted value; verbose
        mode yields "<input> = <output>", with "\\t (add)" appended to additive
        Arabic -> Roman lines. Any other target yields "NA".

    Example:
        >>> format_value(1965, "MCMLXV", NumeralType.ROMAN, ConversionOptions())
        '1965 = MCMLXV'
        >>> format_value(1965, "MCMLXV", NumeralType.ARABIC, ConversionOptions())
        'MCMLXV = 1965'
    """
    if target is NumeralType.ROMAN:
        if options.simple:
            return roman
        line = f"{arabic} = {roman}"
        if options.additive:
            line += ADDITIVE_SUFFIX
        return line

    if target is NumeralType.ARABIC:
        if options.simple:
            return str(arabic)
        return f"{roman} = {arabic}"

    return NOT_APPLICABLE


def convert_value(text: str, options: ConversionOptions) -> str:
    """Classify a single input and return its formatted conversion.

    Input is stripped and uppercased before classification, so "mcmlxv" is
    accepted as Roman.

    Args:
        text: Arabic or Roman numeral text
        options: Presentation options

    Returns:
        Formatted display line

    Raises:
        FormatError: If Arabic text cannot be parsed
        RangeError: If the Arabic value is outside [1, 4000]
        InvalidSymbolError: If Roman text contains an unmatched symbol
        ClassificationError: If the text is neither Arabic nor Roman
    """
    value = text.strip().upper()
    numeral_type = classify(value)
    logger.debug("Classified %r as %s", value, numeral_type.value)

    if numeral_type is NumeralType.ARABIC:
        arabic = parse_arabic(value)
        return format_value(arabic, arabic_to_roman(arabic, options.mode), NumeralType.ROMAN, options)

    if numeral_type is NumeralType.ROMAN:
        return format_value(roman_to_arabic(value), value, NumeralType.ARABIC, options)

    raise ClassificationError(
        f"{value} is not defined and is neither roman or arabic",
        text=value,
    )


def generate_range(start: int, end: int, options: ConversionOptions) -> Iterator[str]:
    """Produce formatted Arabic -> Roman lines for every value in [start, end].

    Bounds are checked when this function is called, before any line is
    produced; the lines themselves are generated lazily in ascending order.

    Args:
        start: First Arabic value (inclusive)
        end: Last Arabic value (inclusive)
        options: Presentation options

    Returns:
        Iterator of display lines

    Raises:
        RangeError: If either bound is outside [1, 4000] or start > end

    Example:
        >>> list(generate_range(100, 102, ConversionOptions()))
        ['100 = C', '101 = CI', '102 = CII']
    """
    validate_arabic(start)
    validate_arabic(end)
    if start > end:
        raise RangeError(
            f"range start {start} is greater than range end {end}",
            minimum=MIN_VALUE,
            maximum=MAX_VALUE,
            start=start,
            end=end,
        )

    logger.debug("Generating Arabic range %d to %d", start, end)
    return _iter_range(start, end, options)


def _iter_range(start: int, end: int, options: ConversionOptions) -> Iterator[str]:
    for value in range(start, end + 1):
        yield format_value(value, arabic_to_roman(value, options.mode), NumeralType.ROMAN, options)
