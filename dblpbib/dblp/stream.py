"""DBLP journal streams.

Article records only carry an abbreviated journal name. The full title is
resolved from `https://dblp.org/streams/journals/<code>.xml`.
"""

from __future__ import annotations

from xml.etree import ElementTree as ET

from dblpbib.dblp.client import DblpClient, MalformedRecordError


def parse_stream_title(text: str, *, code: str) -> str:
    """Extract the journal title from a stream document.

    The title can be split across several text fragments (for example around
    markup); fragments are trimmed and joined with single spaces.
    """
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as e:
        raise MalformedRecordError(f"Failed to parse DBLP stream XML for `{code}`: {e}")

    journal = root if root.tag == "journal" else root.find("journal")
    title = journal.find("title") if journal is not None else None
    if title is None:
        raise MalformedRecordError(f"DBLP stream `{code}` has no journal title")

    parts = [part.strip() for part in title.itertext()]
    return " ".join(part for part in parts if part)


async def journal_title(client: DblpClient, code: str) -> str:
    """Fetch the full title of the journal stream `code`."""
    text = await client.get_stream_xml(code)
    return parse_stream_title(text, code=code)
