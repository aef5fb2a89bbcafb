"""BibTeX formatter.

Renders records as BibTeX entries with a fixed field order per record type:

    @inproceedings{DBLP:conf/cpaior/JabsBJ24,
      author       = {Jabs, Christoph and Berg, Jeremias},
      title        = {Core Boosting in {SAT}-Based Multi-objective Optimization},
      ...
    }

Values are written verbatim; run the fixers first to get LaTeX-safe text.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from dblpbib.config import DBLP_KEY_PREFIX
from dblpbib.dblp.record import (
    Article,
    Book,
    CrossrefKey,
    Doi,
    External,
    InCollection,
    InProceedings,
    Proceedings,
    Record,
    ResolvedCrossref,
    Url,
)

KEY_WIDTH = 12

Field = Tuple[str, str]


def _people(fields: List[Field], name: str, people: List[str]) -> None:
    if people:
        fields.append((name, " and ".join(people)))


def _optional(fields: List[Field], name: str, value: Optional[str]) -> None:
    if value is not None:
        fields.append((name, value))


def _externals(fields: List[Field], external: Iterable[External]) -> None:
    for ext in external:
        if isinstance(ext, Doi):
            fields.append(("doi", ext.value))
        elif isinstance(ext, Url):
            fields.append(("url", ext.value))
        else:
            raise TypeError(f"unsupported external link: {ext!r}")


def _crossref(fields: List[Field], crossref) -> None:
    if isinstance(crossref, CrossrefKey):
        fields.append(("crossref", f"{DBLP_KEY_PREFIX}{crossref.key}"))
    elif isinstance(crossref, ResolvedCrossref):
        _people(fields, "editor", crossref.editor)
        _optional(fields, "series", crossref.series)
        _optional(fields, "volume", crossref.volume)
        _optional(fields, "publisher", crossref.publisher)
    else:
        raise TypeError(f"unsupported crossref: {crossref!r}")


def entry_fields(record: Record) -> Tuple[str, List[Field]]:
    """Return the BibTeX entry type and the ordered fields of a record."""
    fields: List[Field] = []

    if isinstance(record, Article):
        _people(fields, "author", record.author)
        fields.append(("title", record.title))
        fields.append(("journal", record.journal))
        fields.append(("year", str(record.year)))
        _optional(fields, "pages", record.pages)
        _optional(fields, "volume", record.volume)
        _externals(fields, record.external)
        return "article", fields

    if isinstance(record, Proceedings):
        _people(fields, "editor", record.editor)
        fields.append(("title", record.title))
        fields.append(("year", str(record.year)))
        _optional(fields, "series", record.series)
        _optional(fields, "volume", record.volume)
        _optional(fields, "publisher", record.publisher)
        fields.extend(("isbn", isbn) for isbn in record.isbn)
        _externals(fields, record.external)
        return "proceedings", fields

    if isinstance(record, (InProceedings, InCollection)):
        _people(fields, "author", record.author)
        fields.append(("title", record.title))
        fields.append(("booktitle", record.booktitle))
        fields.append(("year", str(record.year)))
        _optional(fields, "pages", record.pages)
        _externals(fields, record.external)
        _crossref(fields, record.crossref)
        return ("inproceedings" if isinstance(record, InProceedings) else "incollection"), fields

    if isinstance(record, Book):
        _people(fields, "author", record.author)
        _people(fields, "editor", record.editor)
        fields.append(("title", record.title))
        _optional(fields, "publisher", record.publisher)
        fields.append(("year", str(record.year)))
        _optional(fields, "series", record.series)
        _optional(fields, "volume", record.volume)
        fields.extend(("isbn", isbn) for isbn in record.isbn)
        _externals(fields, record.external)
        return "book", fields

    raise TypeError(f"unsupported record type: {type(record).__name__}")


def to_bibtex(record: Record, *, trailing_comma: bool = True) -> str:
    """Render one record as a BibTeX entry.

    Args:
        record: The (fixed up) record.
        trailing_comma: Whether the last field keeps its comma.
    """
    entry_type, fields = entry_fields(record)

    lines = [f"@{entry_type}{{{DBLP_KEY_PREFIX}{record.key},"]
    for idx, (name, value) in enumerate(fields):
        comma = "," if trailing_comma or idx + 1 < len(fields) else ""
        lines.append(f"  {name:<{KEY_WIDTH}} = {{{value}}}{comma}")
    lines.append("}")
    return "\n".join(lines)


def render_bibliography(records: Iterable[Record], *, trailing_comma: bool = True) -> str:
    """Render records as BibTeX entries separated by blank lines."""
    return "\n\n".join(to_bibtex(rec, trailing_comma=trailing_comma) for rec in records)
