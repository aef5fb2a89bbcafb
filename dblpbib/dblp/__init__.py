"""DBLP package.

Async access to DBLP records and the record model they decode into.
"""

from .client import (
    DblpClient,
    DblpError,
    DblpTransportError,
    MalformedRecordError,
    UnknownKeyError,
    strip_key_prefix,
)

from .record import (
    Article,
    Book,
    CrossrefKey,
    Doi,
    InCollection,
    InProceedings,
    Proceedings,
    Record,
    ResolvedCrossref,
    Url,
    crossref_key,
    fetch_record,
    parse_record_xml,
)

from .stream import journal_title, parse_stream_title

__all__ = [
    "DblpClient",
    "DblpError",
    "DblpTransportError",
    "MalformedRecordError",
    "UnknownKeyError",
    "strip_key_prefix",

    "Article",
    "Book",
    "CrossrefKey",
    "Doi",
    "InCollection",
    "InProceedings",
    "Proceedings",
    "Record",
    "ResolvedCrossref",
    "Url",
    "crossref_key",
    "fetch_record",
    "parse_record_xml",

    "journal_title",
    "parse_stream_title",
]
