"""Fixup pipeline.

Runs the record fixers in a fixed order. The order matters: escaping must run
before acronym wrapping (whose braces must not be escaped) and transliteration
must run last among the text fixers (its output contains LaTeX commands).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from loguru import logger

from dblpbib.dblp.record import Record
from dblpbib.fixers import records
from dblpbib.fixers.names import DEFAULT_PARTICLES


@dataclass(frozen=True)
class FixupOptions:
    """Switches controlling how records are fixed up."""

    # Keep unicode characters instead of converting them to LaTeX
    unicode: bool = False
    # Keep every external link (DOI and URL) instead of a single one
    all_externals: bool = False
    # Emit crossref style entries for inproceedings/incollections
    crossref: bool = False
    # Replace abbreviated article journals by the full stream title
    expand_journals: bool = True
    # Transliterate `"` as `''`
    escape_quotes: bool = False
    name_particles: FrozenSet[str] = DEFAULT_PARTICLES


def fixup(record: Record, options: FixupOptions | None = None) -> Record:
    """Apply all fixers to `record` in place and return it."""
    options = options or FixupOptions()

    records.author_num(record)
    records.escape_latex(record)
    records.page_range(record)
    records.names(record, options.name_particles)
    records.acronyms(record)
    records.weird_urls(record)
    records.date_ranges(record)
    records.dashes(record)
    records.manually_correct(record)
    if not options.unicode:
        records.unicode(record, escape_quotes=options.escape_quotes)
    if not options.all_externals:
        records.single_external(record)

    logger.debug(f"Fixed up `{record.key}`")
    return record
