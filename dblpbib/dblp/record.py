"""DBLP records.

A record is one of five variants (`Article`, `Proceedings`, `InProceedings`,
`Book`, `InCollection`). The set is closed: every consumer dispatches on the
concrete class and treats anything else as a programming error.

This module decodes the XML returned by `https://dblp.org/rec/<key>.xml` and
assembles records, including the optional second fetch for crossref targets
and the journal title expansion for articles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union
from xml.etree import ElementTree as ET

from loguru import logger

from dblpbib.dblp.client import (
    DblpClient,
    MalformedRecordError,
    UnknownKeyError,
    strip_key_prefix,
)
from dblpbib.dblp.stream import journal_title


DOI_RESOLVER_PREFIX = "https://doi.org/"


@dataclass(frozen=True)
class Url:
    value: str


@dataclass(frozen=True)
class Doi:
    """A DOI with the resolver prefix stripped."""

    value: str


External = Union[Url, Doi]


def external_from_link(link: str) -> External:
    """Classify an `<ee>` link as DOI or plain URL."""
    if link.startswith(DOI_RESOLVER_PREFIX):
        return Doi(link[len(DOI_RESOLVER_PREFIX) :])
    return Url(link)


@dataclass(frozen=True)
class CrossrefKey:
    """Unresolved reference to the parent proceedings/book."""

    key: str


@dataclass
class ResolvedCrossref:
    """Fields copied from the parent proceedings/book."""

    editor: List[str] = field(default_factory=list)
    publisher: Optional[str] = None
    series: Optional[str] = None
    volume: Optional[str] = None


Crossref = Union[CrossrefKey, ResolvedCrossref]


class _CrossrefMixin:
    """Crossref handling shared by `InProceedings` and `InCollection`."""

    crossref: Crossref

    def crossref_key(self) -> Optional[str]:
        if isinstance(self.crossref, CrossrefKey):
            return self.crossref.key
        return None

    def set_resolved_crossref(self, resolved: ResolvedCrossref) -> None:
        """Move the crossref from key to resolved payload (only once)."""
        if not isinstance(self.crossref, CrossrefKey):
            raise ValueError(f"crossref of `{self.key}` is already resolved")
        self.crossref = resolved


@dataclass
class Article:
    key: str
    author: List[str]
    title: str
    journal: str
    year: int
    pages: Optional[str] = None
    volume: Optional[str] = None
    external: List[External] = field(default_factory=list)


@dataclass
class Proceedings:
    key: str
    editor: List[str]
    title: str
    year: int
    series: Optional[str] = None
    volume: Optional[str] = None
    publisher: Optional[str] = None
    isbn: List[str] = field(default_factory=list)
    external: List[External] = field(default_factory=list)


@dataclass
class InProceedings(_CrossrefMixin):
    key: str
    author: List[str]
    title: str
    booktitle: str
    year: int
    crossref: Crossref
    pages: Optional[str] = None
    external: List[External] = field(default_factory=list)


@dataclass
class Book:
    key: str
    author: List[str]
    editor: List[str]
    title: str
    year: int
    publisher: Optional[str] = None
    series: Optional[str] = None
    volume: Optional[str] = None
    isbn: List[str] = field(default_factory=list)
    external: List[External] = field(default_factory=list)


@dataclass
class InCollection(_CrossrefMixin):
    key: str
    author: List[str]
    title: str
    booktitle: str
    year: int
    crossref: Crossref
    pages: Optional[str] = None
    external: List[External] = field(default_factory=list)


Record = Union[Article, Proceedings, InProceedings, Book, InCollection]

RECORD_TYPES = (Article, Proceedings, InProceedings, Book, InCollection)


def crossref_key(record: Record) -> Optional[str]:
    """Return the unresolved crossref key of a record, if it has one."""
    if isinstance(record, (InProceedings, InCollection)):
        return record.crossref_key()
    if isinstance(record, (Article, Proceedings, Book)):
        return None
    raise TypeError(f"unsupported record type: {type(record).__name__}")


# ---------- XML decoding ----------


def _text(el: ET.Element) -> str:
    return "".join(el.itertext()).strip()


class _Fields:
    """Child elements of a record element, grouped by tag."""

    def __init__(self, key: str, element: ET.Element):
        self.key = key
        self.kind = element.tag
        self._values: dict[str, List[str]] = {}
        for child in element:
            self._values.setdefault(child.tag, []).append(_text(child))

    def all(self, tag: str) -> List[str]:
        return list(self._values.get(tag, []))

    def optional(self, tag: str) -> Optional[str]:
        values = self._values.get(tag)
        return values[0] if values else None

    def required(self, tag: str) -> str:
        value = self.optional(tag)
        if value is None:
            raise MalformedRecordError(f"DBLP {self.kind} `{self.key}` has no <{tag}>")
        return value

    def year(self) -> int:
        raw = self.required("year")
        try:
            return int(raw)
        except ValueError:
            raise MalformedRecordError(f"DBLP {self.kind} `{self.key}` has invalid year {raw!r}")

    def externals(self) -> List[External]:
        return [external_from_link(link) for link in self.all("ee") if link]


def _record_element(key: str, text: str) -> ET.Element:
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as e:
        raise MalformedRecordError(f"Failed to parse DBLP XML for `{key}`: {e}")

    if root.tag != "dblp":
        return root
    children = list(root)
    if len(children) != 1:
        raise MalformedRecordError(
            f"DBLP XML for `{key}` must hold exactly one record, found {len(children)}"
        )
    return children[0]


def parse_record_xml(text: str, *, key: str) -> Record:
    """Decode a DBLP record document into the matching variant.

    Args:
        text: The XML document as returned by the record endpoint.
        key: The key the document was requested with (without `DBLP:`).

    Raises:
        MalformedRecordError: unparsable XML, unknown variant or a missing
            required field.
    """
    element = _record_element(key, text)
    f = _Fields(key, element)

    if f.kind == "article":
        return Article(
            key=key,
            author=f.all("author"),
            title=f.required("title"),
            journal=f.required("journal"),
            year=f.year(),
            pages=f.optional("pages"),
            volume=f.optional("volume"),
            external=f.externals(),
        )
    if f.kind == "proceedings":
        return Proceedings(
            key=key,
            editor=f.all("editor"),
            title=f.required("title"),
            year=f.year(),
            series=f.optional("series"),
            volume=f.optional("volume"),
            publisher=f.optional("publisher"),
            isbn=f.all("isbn"),
            external=f.externals(),
        )
    if f.kind == "inproceedings":
        return InProceedings(
            key=key,
            author=f.all("author"),
            title=f.required("title"),
            booktitle=f.required("booktitle"),
            year=f.year(),
            pages=f.optional("pages"),
            external=f.externals(),
            crossref=CrossrefKey(f.required("crossref")),
        )
    if f.kind == "book":
        return Book(
            key=key,
            author=f.all("author"),
            editor=f.all("editor"),
            title=f.required("title"),
            publisher=f.optional("publisher"),
            year=f.year(),
            series=f.optional("series"),
            volume=f.optional("volume"),
            isbn=f.all("isbn"),
            external=f.externals(),
        )
    if f.kind == "incollection":
        return InCollection(
            key=key,
            author=f.all("author"),
            title=f.required("title"),
            booktitle=f.required("booktitle"),
            year=f.year(),
            pages=f.optional("pages"),
            external=f.externals(),
            crossref=CrossrefKey(f.required("crossref")),
        )

    raise MalformedRecordError(f"DBLP record `{key}` has unsupported type <{f.kind}>")


# ---------- Fetching ----------


def journal_code(key: str) -> str:
    """Return the stream code of an article key (`journals/jair/X` -> `jair`)."""
    parts = strip_key_prefix(key).split("/")
    if len(parts) < 3 or not parts[1]:
        raise MalformedRecordError(f"Cannot derive journal stream from key `{key}`")
    return parts[1]


async def resolve_crossref_inline(client: DblpClient, record: Union[InProceedings, InCollection]) -> None:
    """Fetch the crossref target of a paper and copy its fields into it.

    The booktitle of the paper is replaced by the full title of the target.
    A target that DBLP reports as unknown means DBLP's own data is
    inconsistent, so it is reported as `MalformedRecordError` rather than
    `UnknownKeyError`.
    """
    target_key = record.crossref_key()
    if target_key is None:
        return

    try:
        text = await client.get_record_xml(target_key)
    except UnknownKeyError as e:
        raise MalformedRecordError(
            f"crossref `{target_key}` of `{record.key}` is unknown to DBLP"
        ) from e
    target = parse_record_xml(text, key=target_key)

    expected = Proceedings if isinstance(record, InProceedings) else Book
    if not isinstance(target, expected):
        raise MalformedRecordError(
            f"crossref `{target_key}` of `{record.key}` is a {type(target).__name__}, "
            f"expected {expected.__name__}"
        )

    record.booktitle = target.title
    record.set_resolved_crossref(
        ResolvedCrossref(
            editor=list(target.editor),
            publisher=target.publisher,
            series=target.series,
            volume=target.volume,
        )
    )


async def fetch_record(
    client: DblpClient,
    key: str,
    *,
    resolve_crossref: bool = True,
    expand_journal: bool = True,
) -> Record:
    """Fetch and assemble a record.

    Args:
        client: DBLP client.
        key: Citekey, with or without the `DBLP:` prefix.
        resolve_crossref: Fetch the crossref target of papers and inline its
            editor, publisher, series and volume.
        expand_journal: Replace abbreviated article journals by the full
            stream title.

    Raises:
        UnknownKeyError: DBLP does not know `key`.
        DblpTransportError: network failure or unexpected HTTP status.
        MalformedRecordError: inconsistent or undecodable upstream data.
    """
    key = strip_key_prefix(key)
    record = parse_record_xml(await client.get_record_xml(key), key=key)

    if isinstance(record, Article):
        if expand_journal:
            record.journal = await journal_title(client, journal_code(key))
    elif isinstance(record, (InProceedings, InCollection)):
        if resolve_crossref:
            await resolve_crossref_inline(client, record)

    logger.debug(f"Fetched DBLP {type(record).__name__} `{key}`")
    return record
