"""Shared test fixtures and Hypothesis strategies for romconv tests."""

from hypothesis import strategies as st
from hypothesis.strategies import composite

from romconv.core.numerals import MAX_VALUE, MIN_VALUE, NotationMode


def arabic_values() -> st.SearchStrategy[int]:
    """Integers inside the supported Arabic range."""
    return st.integers(min_value=MIN_VALUE, max_value=MAX_VALUE)


def out_of_range_values() -> st.SearchStrategy[int]:
    """Integers just outside, or far outside, the supported Arabic range."""
    return st.one_of(
        st.integers(max_value=MIN_VALUE - 1),
        st.integers(min_value=MAX_VALUE + 1),
    )


def notation_modes() -> st.SearchStrategy[NotationMode]:
    return st.sampled_from(list(NotationMode))


@composite
def roman_symbol_text(draw: st.DrawFn) -> str:
    """Generate Roman-alphabet text, canonical or not.

    Decoding is permissive, so any string over the seven symbols should
    classify as Roman and decode without error.

    Example:
        >>> from hypothesis import given
        >>> @given(roman_symbol_text())
        ... def test_decodes(text):
        ...     assert roman_to_arabic(text) > 0
    """
    return draw(st.text(alphabet="IVXLCDM", min_size=1, max_size=12))


@composite
def undefined_text(draw: st.DrawFn) -> str:
    """Generate text that is neither an Arabic nor a Roman numeral.

    Every generated string contains at least one character outside both the
    digit and the Roman alphabets, or is a zero-prefixed number.
    """
    kind = draw(st.sampled_from(["foreign_char", "leading_zero", "mixed"]))

    if kind == "leading_zero":
        return "0" + draw(st.text(alphabet="0123456789", max_size=5))

    if kind == "mixed":
        return draw(st.text(alphabet="0123456789", min_size=1, max_size=4)) + draw(
            st.text(alphabet="IVXLCDM", min_size=1, max_size=4)
        )

    foreign = draw(
        st.characters(
            categories=("Lu", "Ll", "Nd", "Po", "Zs"),
            exclude_characters="0123456789IVXLCDM",
        )
    )
    prefix = draw(st.text(alphabet="IVXLCDM123", max_size=4))
    return prefix + foreign
