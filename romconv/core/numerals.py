"""Numeral classification and Arabic <-> Roman conversion.

This module holds the symbol tables and the pure functions that make up the
conversion core:
- classify: Decide whether text is an Arabic numeral, a Roman numeral, or neither
- parse_arabic / validate_arabic: Turn text into a value in the supported range
- roman_to_arabic: Greedy left-to-right decoding of Roman text
- arabic_to_roman: Largest-symbol-first encoding in subtractive or additive notation

Supported range:
    - MIN_VALUE (1) to MAX_VALUE (4000, rendered "MMMM")
"""

import re
from enum import Enum

from romconv.core.exceptions import FormatError, InvalidSymbolError, RangeError

MIN_VALUE = 1
MAX_VALUE = 4000

# Value -> symbol pairs, ordered by descending value
SYMBOL_TABLE: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

# Single-symbol entries only; subtractive pairs are never emitted
ADDITIVE_TABLE: tuple[tuple[int, str], ...] = tuple(
    (value, symbol) for value, symbol in SYMBOL_TABLE if len(symbol) == 1
)

_SYMBOL_VALUES: dict[str, int] = {symbol: value for value, symbol in SYMBOL_TABLE}

ARABIC_PATTERN = re.compile(r"^[1-9][0-9]*$")
ROMAN_PATTERN = re.compile(r"^[IVXLCDM]+$")


class NumeralType(Enum):
    """Kind of numeral a piece of text represents."""

    ARABIC = "arabic"
    ROMAN = "roman"
    UNDEFINED = "undefined"


class NotationMode(Enum):
    """Notation used when producing Roman output.

    SUBTRACTIVE uses the pair symbols (IV, IX, XL, XC, CD, CM); ADDITIVE
    repeats single symbols instead (IIII, VIIII, XXXX, ...).
    """

    SUBTRACTIVE = "subtractive"
    ADDITIVE = "additive"


def get_symbol_table(mode: NotationMode = NotationMode.SUBTRACTIVE) -> tuple[tuple[int, str], ...]:
    """Return the symbol table used for the given notation mode.

    Args:
        mode: Notation mode selecting the table variant

    Returns:
        Tuple of (value, symbol) pairs in descending value order.

    Example:
        >>> get_symbol_table(NotationMode.ADDITIVE)[:2]
        ((1000, 'M'), (500, 'D'))
    """
    if mode is NotationMode.ADDITIVE:
        return ADDITIVE_TABLE
    return SYMBOL_TABLE


def classify(text: str) -> NumeralType:
    """Determine whether text is an Arabic numeral, a Roman numeral, or neither.

    Only the character set is checked for Roman text; ordering and repetition
    are not. Callers are expected to uppercase input beforehand, so lowercase
    Roman text classifies as UNDEFINED.

    Args:
        text: Candidate numeral text

    Returns:
        NumeralType.ARABIC, NumeralType.ROMAN or NumeralType.UNDEFINED

    Example:
        >>> classify("1965")
        <NumeralType.ARABIC: 'arabic'>
        >>> classify("MCMLXV")
        <NumeralType.ROMAN: 'roman'>
        >>> classify("abc123")
        <NumeralType.UNDEFINED: 'undefined'>
    """
    if ARABIC_PATTERN.match(text):
        return NumeralType.ARABIC

    if ROMAN_PATTERN.match(text):
        return NumeralType.ROMAN

    return NumeralType.UNDEFINED


def validate_arabic(value: int) -> None:
    """Check that a value lies within the supported Arabic range.

    Args:
        value: Integer to check

    Raises:
        RangeError: If value is greater than 4000 or less than 1
    """
    if value > MAX_VALUE:
        raise RangeError(
            f"{value} is greater than {MAX_VALUE}",
            value=value,
            minimum=MIN_VALUE,
            maximum=MAX_VALUE,
        )

    if value < MIN_VALUE:
        raise RangeError(
            f"{value} is less than {MIN_VALUE}",
            value=value,
            minimum=MIN_VALUE,
            maximum=MAX_VALUE,
        )


def parse_arabic(text: str) -> int:
    """Parse base-10 text into a validated Arabic value.

    Args:
        text: Decimal digits, e.g. "1965"

    Returns:
        Integer value in [1, 4000]

    Raises:
        FormatError: If text is not a base-10 integer
        RangeError: If the parsed value is outside [1, 4000]
    """
    try:
        value = int(text, 10)
    except ValueError as e:
        raise FormatError(f"{text} cannot be converted to an int", text=text) from e

    validate_arabic(value)
    return value


def roman_to_arabic(text: str) -> int:
    """Convert Roman numeral text to its Arabic value.

    Scans left to right. At each position the two-character chunk is tried
    against the subtractive pairs first, then the single character. Matched
    chunks are summed; no canonical-form rules are enforced, so "IIII" decodes
    to 4 and "VV" to 10.

    Args:
        text: Uppercase Roman numeral text

    Returns:
        Sum of the matched symbol values

    Raises:
        InvalidSymbolError: If a character matches no symbol

    Example:
        >>> roman_to_arabic("MCMLXV")
        1965
        >>> roman_to_arabic("MDCCCCLXV")
        1965
    """
    total = 0
    i = 0

    while i < len(text):
        pair = text[i:i + 2]
        if len(pair) == 2 and pair in _SYMBOL_VALUES:
            total += _SYMBOL_VALUES[pair]
            i += 2
            continue

        symbol = text[i]
        if symbol not in _SYMBOL_VALUES:
            raise InvalidSymbolError(
                f"{text} contains an invalid Roman symbol",
                text=text,
                symbol=symbol,
                position=i,
            )

        total += _SYMBOL_VALUES[symbol]
        i += 1

    return total


def arabic_to_roman(value: int, mode: NotationMode = NotationMode.SUBTRACTIVE) -> str:
    """Convert an Arabic value to Roman numeral text.

    Repeatedly takes the largest table entry not exceeding the remaining value,
    appends its symbol and subtracts its value until nothing remains.

    Args:
        value: Integer in [1, 4000]
        mode: Notation mode; ADDITIVE never emits subtractive pairs

    Returns:
        Roman numeral text

    Raises:
        RangeError: If value is outside [1, 4000]

    Example:
        >>> arabic_to_roman(1965)
        'MCMLXV'
        >>> arabic_to_roman(1965, NotationMode.ADDITIVE)
        'MDCCCCLXV'
    """
    validate_arabic(value)

    table = get_symbol_table(mode)
    parts: list[str] = []
    remaining = value

    while remaining > 0:
        entry_value, symbol = next(
            (v, s) for v, s in table if v <= remaining
        )
        parts.append(symbol)
        remaining -= entry_value

    return "".join(parts)
