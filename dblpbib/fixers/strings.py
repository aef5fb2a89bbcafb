"""String level fixers.

Each function takes a string and returns the fixed string. All of them are
idempotent: applying one twice gives the same result as applying it once.
"""

from __future__ import annotations

import re

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# DBLP disambiguates homonymous authors with a 4 digit suffix ("Jo Doe 0001").
AUTHOR_NUM_PATTERN = re.compile(r" \d{4}$")
RANGE_PATTERN = re.compile(r"(?<=\d)-(?=\d)")
DATE_RANGE_PATTERN = re.compile(
    r"(?<=\d)-(?=\d)|(?<=\d\s)-(?=\s(?:" + "|".join(MONTHS) + r"))"
)
WORD_PATTERN = re.compile(r"[\w-]+")

EN_DASH = "--"
SPACED_HYPHEN = " - "
BASED_SUFFIXES = ("based", "Based")

LATEX_ESCAPES = {
    "#": r"\#",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "<": r"\ensuremath{<}",
    ">": r"\ensuremath{>}",
    "\\": r"\textbackslash{}",
    "^": r"\textasciicircum{}",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
}

# Group 1 matches sequences this module already produced so that escaping
# twice leaves them alone; group 2 matches a raw reserved character.
# Upstream text that already spells one of these sequences (`\%`, `\_`) is
# indistinguishable from our own output and keeps its backslash. Any other
# backslash becomes `\textbackslash{}`.
_ESCAPE_PATTERN = re.compile(
    r"(\\(?:[#$%&_{}]|textbackslash\{\}|textasciicircum\{\}|textasciitilde\{\}|ensuremath\{[<>]\}))"
    r"|([#$%&<>\\^_{}~])"
)


def strip_author_number(name: str) -> str:
    """Drop DBLP's disambiguation suffix: `João Marques-Silva 0001` -> `João Marques-Silva`."""
    return AUTHOR_NUM_PATTERN.sub("", name)


def escape_latex(text: str) -> str:
    """Escape the characters LaTeX reserves."""

    def repl(m: re.Match) -> str:
        if m.group(1):
            return m.group(1)
        return LATEX_ESCAPES[m.group(2)]

    return _ESCAPE_PATTERN.sub(repl, text)


def fix_page_range(pages: str) -> str:
    """`1223-1269` -> `1223--1269`."""
    return RANGE_PATTERN.sub(EN_DASH, pages)


def fix_date_range(text: str) -> str:
    """Like `fix_page_range`, but also handles `30 - May 1` style ranges."""
    return DATE_RANGE_PATTERN.sub(EN_DASH, text)


def fix_dashes(text: str) -> str:
    """Replace spaced hyphens (`Title - Subtitle`) by an unspaced dash."""
    return text.replace(SPACED_HYPHEN, EN_DASH)


def is_acronym(word: str) -> bool:
    """Decide whether a word must keep its capitalization.

    Acronym cases:
    1. more than one uppercase letter that does not directly follow a hyphen
       (`SAT`, `MaxSAT`, `Max-SAT`, but not `Thirty-First`);
    2. starts lowercase but contains an uppercase letter (`big-M`).
    """
    if not word:
        return False
    first_upper = word[0].isupper()
    n_upper = 0
    any_upper = False
    for idx, char in enumerate(word):
        if not char.isupper():
            continue
        any_upper = True
        if idx == 0 or word[idx - 1] != "-":
            n_upper += 1
    return n_upper > 1 or (not first_upper and any_upper)


def fix_acronyms(text: str) -> str:
    """Wrap acronyms in braces so BibTeX styles do not lowercase them.

    `MaxSAT-based bi-objective optimization` ->
    `{MaxSAT}-based bi-objective optimization`
    """

    def repl(m: re.Match) -> str:
        word = m.group(0)
        start, end = m.span()
        before = text[start - 1] if start > 0 else ""
        after = text[end] if end < len(text) else ""
        # LaTeX command names, already protected words and their suffixes
        if before in ("\\", "}") or (before == "{" and after == "}"):
            return word
        if not is_acronym(word):
            return word
        head, sep, tail = word.rpartition("-")
        if sep and head and tail in BASED_SUFFIXES:
            return f"{{{head}}}-{tail}"
        return f"{{{word}}}"

    return WORD_PATTERN.sub(repl, text)
