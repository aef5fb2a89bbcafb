"""Fixers package.

Normalization of DBLP records into clean BibTeX-ready text.
"""

from .names import DEFAULT_PARTICLES, reorder_name
from .pipeline import FixupOptions, fixup
from .records import expand_booktitle
from .strings import (
    escape_latex,
    fix_acronyms,
    fix_dashes,
    fix_date_range,
    fix_page_range,
    strip_author_number,
)
from .unicode import UNICODE_TO_LATEX, UnmappedCharacterError, transliterate

__all__ = [
    "DEFAULT_PARTICLES",
    "reorder_name",

    "FixupOptions",
    "fixup",
    "expand_booktitle",

    "escape_latex",
    "fix_acronyms",
    "fix_dashes",
    "fix_date_range",
    "fix_page_range",
    "strip_author_number",

    "UNICODE_TO_LATEX",
    "UnmappedCharacterError",
    "transliterate",
]
