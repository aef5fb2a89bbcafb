"""Record level fixers.

Each fixer mutates a record in place. Dispatch is by record variant through
the field tables below; an object that is not one of the five record variants
raises `TypeError`.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from dblpbib.dblp.record import (
    Article,
    Book,
    CrossrefKey,
    Doi,
    InCollection,
    InProceedings,
    Proceedings,
    RECORD_TYPES,
    Record,
    ResolvedCrossref,
    Url,
)
from dblpbib.fixers import strings
from dblpbib.fixers.names import reorder_name
from dblpbib.fixers.unicode import UnmappedCharacterError, transliterate


# Person lists per variant (resolved crossref editors are handled separately)
PEOPLE_FIELDS: Dict[type, Tuple[str, ...]] = {
    Article: ("author",),
    Proceedings: ("editor",),
    InProceedings: ("author",),
    Book: ("author", "editor"),
    InCollection: ("author",),
}

# Free text fields that go through escaping and transliteration
TEXT_FIELDS: Dict[type, Tuple[str, ...]] = {
    Article: ("title", "journal"),
    Proceedings: ("title", "series", "publisher"),
    InProceedings: ("title", "booktitle"),
    Book: ("title", "series", "publisher"),
    InCollection: ("title", "booktitle"),
}

VENUE_FIELD: Dict[type, Optional[str]] = {
    Article: "journal",
    Proceedings: None,
    InProceedings: "booktitle",
    Book: None,
    InCollection: "booktitle",
}

WEIRD_URL_PREFIXES = (
    "https://www.wikidata.org",
    "https://ojs.aaai.org",
)

# Known mistakes in DBLP metadata: key -> {field: corrected value}
MANUAL_CORRECTIONS: Mapping[str, Mapping[str, str]] = {
    # Introduced in the metadata during final editing
    "conf/tacas/JabsBBJ25": {
        "title": "Certifying Pareto Optimality in Multi-objective Maximum Satisfiability",
    },
}


def _lookup(table: Mapping[type, object], record: Record):
    try:
        return table[type(record)]
    except KeyError:
        raise TypeError(f"unsupported record type: {type(record).__name__}")


def _ensure_record(record: Record) -> None:
    if not isinstance(record, RECORD_TYPES):
        raise TypeError(f"unsupported record type: {type(record).__name__}")


def _resolved_crossref(record: Record) -> Optional[ResolvedCrossref]:
    if isinstance(record, (InProceedings, InCollection)) and isinstance(record.crossref, ResolvedCrossref):
        return record.crossref
    return None


def _map_people(record: Record, fix: Callable[[str], str]) -> None:
    for name in _lookup(PEOPLE_FIELDS, record):
        setattr(record, name, [fix(person) for person in getattr(record, name)])
    resolved = _resolved_crossref(record)
    if resolved is not None:
        resolved.editor = [fix(person) for person in resolved.editor]


def _map_strings(record: Record, fix: Callable[[str], str]) -> None:
    _map_people(record, fix)
    for name in _lookup(TEXT_FIELDS, record):
        value = getattr(record, name)
        if value is not None:
            setattr(record, name, fix(value))
    resolved = _resolved_crossref(record)
    if resolved is not None:
        if resolved.series is not None:
            resolved.series = fix(resolved.series)
        if resolved.publisher is not None:
            resolved.publisher = fix(resolved.publisher)


def author_num(record: Record) -> None:
    _map_people(record, strings.strip_author_number)


def escape_latex(record: Record) -> None:
    _map_strings(record, strings.escape_latex)


def unicode(record: Record, *, escape_quotes: bool = False) -> None:
    try:
        _map_strings(record, lambda value: transliterate(value, escape_quotes=escape_quotes))
    except UnmappedCharacterError as e:
        raise UnmappedCharacterError(e.char, e.text, key=record.key) from e


def names(record: Record, particles: Optional[Iterable[str]] = None) -> None:
    _map_people(record, lambda name: reorder_name(name, particles))


def page_range(record: Record) -> None:
    if isinstance(record, (Article, InProceedings, InCollection)):
        if record.pages is not None:
            record.pages = strings.fix_page_range(record.pages)
    else:
        _ensure_record(record)


def acronyms(record: Record) -> None:
    _ensure_record(record)
    record.title = strings.fix_acronyms(record.title)
    if isinstance(record, (InProceedings, InCollection)):
        record.booktitle = strings.fix_acronyms(record.booktitle)


def weird_urls(record: Record) -> None:
    _ensure_record(record)
    record.external = [
        ext
        for ext in record.external
        if not (isinstance(ext, Url) and ext.value.startswith(WEIRD_URL_PREFIXES))
    ]


def date_ranges(record: Record) -> None:
    if isinstance(record, InProceedings):
        record.booktitle = strings.fix_date_range(record.booktitle)
    elif isinstance(record, Proceedings):
        record.title = strings.fix_date_range(record.title)
    else:
        _ensure_record(record)


def dashes(record: Record) -> None:
    venue = _lookup(VENUE_FIELD, record)
    record.title = strings.fix_dashes(record.title)
    if venue is not None:
        setattr(record, venue, strings.fix_dashes(getattr(record, venue)))


def manually_correct(record: Record) -> None:
    """Apply hard-coded corrections for known DBLP data errors."""
    _ensure_record(record)
    for name, value in MANUAL_CORRECTIONS.get(record.key, {}).items():
        setattr(record, name, value)


def single_external(record: Record) -> None:
    """Keep only one external link: the first DOI, else the first link."""
    _ensure_record(record)
    if not record.external:
        return
    chosen = next((ext for ext in record.external if isinstance(ext, Doi)), record.external[0])
    record.external = [chosen]


def expand_booktitle(record: Record, crossref: Record) -> None:
    """Use the full title of the crossref target as booktitle of a paper."""
    if not isinstance(record, (InProceedings, InCollection)) or not isinstance(record.crossref, CrossrefKey):
        raise ValueError(f"`{record.key}` is not a paper with an unresolved crossref")
    record.booktitle = crossref.title
