"""Tests for the string level fixers."""

import pytest

from dblpbib.fixers.strings import (
    escape_latex,
    fix_acronyms,
    fix_dashes,
    fix_date_range,
    fix_page_range,
    is_acronym,
    strip_author_number,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("SAT is an Acronym", "{SAT} is an Acronym"),
        ("Another Acronym is MaxSAT", "Another Acronym is {MaxSAT}"),
        ("With SAT and MaxSAT we have two acronyms", "With {SAT} and {MaxSAT} we have two acronyms"),
        ("Some people write Max-SAT", "Some people write {Max-SAT}"),
        ("MaxSAT-based bi-objective optimization", "{MaxSAT}-based bi-objective optimization"),
        (
            "Using Small MUSes to Explain How to Solve Pen and Paper Puzzles.",
            "Using Small {MUSes} to Explain How to Solve Pen and Paper Puzzles.",
        ),
        ("Thirty-First should not be an acronym", "Thirty-First should not be an acronym"),
        ("big-M should be an acronym", "{big-M} should be an acronym"),
        ("SAT-Based and MaxSAT-Based are special exceptions", "{SAT}-Based and {MaxSAT}-Based are special exceptions"),
    ],
)
def test_fix_acronyms(text, expected):
    assert fix_acronyms(text) == expected


@pytest.mark.unit
def test_fix_acronyms_is_idempotent():
    text = "Core Boosting in SAT-Based Multi-objective Optimization with big-M and MaxSAT"
    once = fix_acronyms(text)
    assert fix_acronyms(once) == once


@pytest.mark.unit
def test_fix_acronyms_leaves_latex_commands_alone():
    assert fix_acronyms(r"\textDEF and \ensuremath{<}") == r"\textDEF and \ensuremath{<}"


@pytest.mark.unit
def test_is_acronym_edge_cases():
    assert is_acronym("SAT")
    assert is_acronym("iPhone")
    assert not is_acronym("Thirty-First")
    assert not is_acronym("word")
    assert not is_acronym("Word")
    assert not is_acronym("")


@pytest.mark.unit
def test_strip_author_number():
    assert strip_author_number("João Marques-Silva 0001") == "João Marques-Silva"
    assert strip_author_number("Christoph Jabs") == "Christoph Jabs"
    # Only a trailing four digit suffix is a disambiguation number
    assert strip_author_number("Agent 007") == "Agent 007"


@pytest.mark.unit
def test_page_range():
    assert fix_page_range("1223-1269") == "1223--1269"
    assert fix_page_range("1223--1269") == "1223--1269"
    assert fix_page_range("12") == "12"


@pytest.mark.unit
def test_date_range():
    assert fix_date_range("Uppsala, Sweden, May 28-31, 2024") == "Uppsala, Sweden, May 28--31, 2024"
    assert fix_date_range("April 30 - May 2, 2024") == "April 30 -- May 2, 2024"
    assert fix_date_range("Part 2 - Something") == "Part 2 - Something"


@pytest.mark.unit
def test_date_range_is_idempotent():
    once = fix_date_range("April 30 - May 2, 2024")
    assert fix_date_range(once) == once


@pytest.mark.unit
def test_dashes():
    assert fix_dashes("Handbook of Satisfiability - Second Edition") == "Handbook of Satisfiability--Second Edition"
    assert fix_dashes("Multi-objective") == "Multi-objective"


@pytest.mark.unit
def test_escape_latex():
    assert escape_latex("100% & more") == r"100\% \& more"
    assert escape_latex("a_b #1 $x$") == r"a\_b \#1 \$x\$"
    assert escape_latex("x < y > z") == r"x \ensuremath{<} y \ensuremath{>} z"
    assert escape_latex("{a}") == r"\{a\}"
    assert escape_latex("a\\b") == r"a\textbackslash{}b"
    assert escape_latex("~^") == r"\textasciitilde{}\textasciicircum{}"


@pytest.mark.unit
@pytest.mark.parametrize("text", ["100% & more", "{a} < b", "a\\b ~ c^d", "x_1 # y"])
def test_escape_latex_is_idempotent(text):
    once = escape_latex(text)
    assert escape_latex(once) == once


@pytest.mark.unit
def test_escape_latex_keeps_upstream_escapes():
    assert escape_latex(r"50\% of \_x") == r"50\% of \_x"
    assert escape_latex(r"\alpha \{") == r"\textbackslash{}alpha \{"
