"""Tests for unicode to LaTeX transliteration."""

import pytest

from dblpbib.fixers.unicode import UNICODE_TO_LATEX, UnmappedCharacterError, transliterate


@pytest.mark.unit
def test_ascii_passes_through():
    assert transliterate("Core Boosting in {SAT}-Based") == "Core Boosting in {SAT}-Based"


@pytest.mark.unit
def test_accented_letters_are_braced():
    assert transliterate("Järvisalo") == r'J{\"a}rvisalo'
    assert transliterate("João") == r"Jo{\~a}o"
    assert transliterate("Inês") == r"In{\^e}s"
    assert transliterate("Ćirić") == r"{\'C}iri{\'c}"


@pytest.mark.unit
def test_typographic_characters():
    assert transliterate("a–b") == r"a{\textendash}b"
    assert transliterate("x\u00a0y") == "x{~}y"


@pytest.mark.unit
def test_unmapped_character_raises():
    with pytest.raises(UnmappedCharacterError) as exc_info:
        transliterate("snow ☃ man")
    assert exc_info.value.char == "☃"
    assert exc_info.value.text == "snow ☃ man"
    assert "U+2603" in str(exc_info.value)


@pytest.mark.unit
def test_escape_quotes_is_opt_in():
    assert transliterate('say "hi"') == 'say "hi"'
    assert transliterate('say "hi"', escape_quotes=True) == "say {''}hi{''}"


@pytest.mark.unit
def test_table_is_read_only_and_non_ascii():
    with pytest.raises(TypeError):
        UNICODE_TO_LATEX[0x41] = "A"  # type: ignore[index]
    assert all(code > 0x7F for code in UNICODE_TO_LATEX)


@pytest.mark.unit
def test_escape_quotes_keeps_umlaut_accents():
    once = transliterate('"Järvisalo"', escape_quotes=True)
    assert once == r"{''}J{\"a}rvisalo{''}"
    assert transliterate(once, escape_quotes=True) == once
