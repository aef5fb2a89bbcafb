"""Batch resolution of DBLP keys.

Fetches many keys concurrently with a bounded number of requests in flight.
Unknown keys are collected and reported; any other failure aborts the whole
batch. In crossref mode the crossref targets of all fetched papers are
fetched as a second batch, skipping targets that were already requested as
primary keys, whether they resolved or not.
"""

from __future__ import annotations

import asyncio
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from loguru import logger

from dblpbib.config import RESOLVER
from dblpbib.dblp.client import (
    DblpClient,
    MalformedRecordError,
    UnknownKeyError,
    strip_key_prefix,
)
from dblpbib.dblp.record import Record, crossref_key, fetch_record
from dblpbib.fixers.pipeline import FixupOptions, fixup
from dblpbib.fixers.records import expand_booktitle


@dataclass(frozen=True)
class Resolved:
    """A key that was fetched and fixed up."""

    record: Record

    @property
    def key(self) -> str:
        return self.record.key


@dataclass(frozen=True)
class Unknown:
    """A key DBLP does not know."""

    key: str


Outcome = Union[Resolved, Unknown]


@dataclass
class BatchResult:
    """Result of resolving a set of citation keys.

    `records` holds the primary records sorted by key, `crossrefs` the
    crossref targets sorted by key (only filled in crossref mode) and
    `unknown` the keys DBLP does not know, primary keys first.
    """

    records: List[Record] = field(default_factory=list)
    crossrefs: List[Record] = field(default_factory=list)
    unknown: List[str] = field(default_factory=list)

    def ordered(self) -> List[Record]:
        """Records in output order: primary records, then crossref targets."""
        return [*self.records, *self.crossrefs]


async def fetch_one(client: DblpClient, key: str, options: FixupOptions) -> Outcome:
    """Fetch and fix up one key, mapping an unknown key to `Unknown`."""
    key = strip_key_prefix(key)
    try:
        record = await fetch_record(
            client,
            key,
            resolve_crossref=not options.crossref,
            expand_journal=options.expand_journals,
        )
    except UnknownKeyError:
        logger.warning(f"DBLP key `{key}` is unknown")
        return Unknown(key)
    return Resolved(fixup(record, options))


async def fetch_batch(
    client: DblpClient,
    keys: Sequence[str],
    options: FixupOptions,
    concurrency: int = RESOLVER.CONCURRENT_REQUESTS,
) -> List[Outcome]:
    """Resolve `keys` concurrently.

    Returns one outcome per key, in the order of `keys`. At most
    `concurrency` keys are in flight at any time. The first failure other
    than an unknown key cancels the remaining work and is re-raised.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")
    if not keys:
        return []

    semaphore = asyncio.Semaphore(concurrency)

    async def limited(key: str) -> Outcome:
        async with semaphore:
            return await fetch_one(client, key, options)

    tasks = [asyncio.create_task(limited(key)) for key in keys]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def _index(keys: Sequence[str], key: str) -> Optional[int]:
    idx = bisect_left(keys, key)
    if idx < len(keys) and keys[idx] == key:
        return idx
    return None


def split_known_crossrefs(
    records: List[Record],
    crossref_keys: Iterable[str],
    unknown: Sequence[str] = (),
) -> Tuple[List[Record], List[Record], List[str]]:
    """Separate crossref targets that were already requested as primary keys.

    `records` and `unknown` must be sorted by key. Returns the remaining
    primary records, the records that are crossref targets and the crossref
    keys that still need fetching. Keys in `unknown` are never fetched again.
    """
    keys = [rec.key for rec in records]
    known = set()
    missing = []
    for key in crossref_keys:
        idx = _index(keys, key)
        if idx is not None:
            known.add(idx)
        elif _index(unknown, key) is None:
            missing.append(key)

    remaining = [rec for idx, rec in enumerate(records) if idx not in known]
    targets = [records[idx] for idx in sorted(known)]
    return remaining, targets, missing


def _split(outcomes: Iterable[Outcome]) -> Tuple[List[Record], List[str]]:
    records = []
    unknown = []
    for outcome in outcomes:
        if isinstance(outcome, Resolved):
            records.append(outcome.record)
        else:
            unknown.append(outcome.key)
    return records, unknown


async def resolve_keys(
    client: DblpClient,
    keys: Iterable[str],
    options: Optional[FixupOptions] = None,
    concurrency: int = RESOLVER.CONCURRENT_REQUESTS,
) -> BatchResult:
    """Resolve a set of citation keys into fixed up records.

    Keys may carry the `DBLP:` prefix; duplicates are fetched once.

    Raises:
        DblpTransportError: a request failed; the batch is aborted.
        MalformedRecordError: DBLP returned inconsistent data.
        UnmappedCharacterError: a record contains an untransliterable
            character.
    """
    options = options or FixupOptions()
    wanted = sorted({strip_key_prefix(key) for key in keys})
    logger.info(f"Fetching {len(wanted)} DBLP records")

    records, unknown = _split(await fetch_batch(client, wanted, options, concurrency))
    result = BatchResult(records=records, unknown=unknown)
    if not options.crossref:
        return result

    crossref_keys = sorted({key for key in map(crossref_key, records) if key is not None})
    result.records, known, missing = split_known_crossrefs(records, crossref_keys, unknown)
    if missing:
        logger.info(f"Fetching {len(missing)} crossref records")
    fetched, unknown_crossrefs = _split(await fetch_batch(client, missing, options, concurrency))

    result.crossrefs = sorted([*known, *fetched], key=lambda rec: rec.key)
    result.unknown.extend(unknown_crossrefs)

    target_keys = [rec.key for rec in result.crossrefs]
    for record in result.records:
        target_key = crossref_key(record)
        if target_key is None:
            continue
        idx = _index(target_keys, target_key)
        if idx is None:
            logger.warning(f"Crossref `{target_key}` of `{record.key}` is unknown, keeping booktitle")
            continue
        expand_booktitle(record, result.crossrefs[idx])

    return result


async def resolve_key(
    client: DblpClient,
    key: str,
    options: Optional[FixupOptions] = None,
) -> List[Record]:
    """Resolve a single key.

    Returns the record, followed by its crossref target in crossref mode.

    Raises:
        UnknownKeyError: DBLP does not know `key`.
        MalformedRecordError: the crossref target is unknown or invalid.
    """
    options = options or FixupOptions()
    record = await fetch_record(
        client,
        key,
        resolve_crossref=not options.crossref,
        expand_journal=options.expand_journals,
    )
    fixup(record, options)

    target_key = crossref_key(record)
    if target_key is None:
        return [record]

    try:
        target = await fetch_record(client, target_key, expand_journal=False)
    except UnknownKeyError as e:
        raise MalformedRecordError(
            f"crossref `{target_key}` of `{record.key}` is unknown to DBLP"
        ) from e
    fixup(target, options)
    expand_booktitle(record, target)
    return [record, target]
