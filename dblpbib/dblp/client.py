"""DBLP HTTP client.

This module provides a small async client for the DBLP record and stream
endpoints. It only knows about URLs and status codes; decoding the returned
XML into records is handled by `dblpbib.dblp.record` and
`dblpbib.dblp.stream`.
"""

from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import quote

import httpx
from loguru import logger

from dblpbib.config import DBLP_KEY_PREFIX, DEFAULT_SERVER, TIMEOUTS, DblpServerConfig


RECORD_BASE = "/rec/"
STREAM_BASE = "/streams/journals/"


class DblpError(RuntimeError):
    pass


class UnknownKeyError(DblpError):
    """DBLP does not know the requested key (HTTP 404)."""

    def __init__(self, key: str):
        super().__init__(f"DBLP key `{key}` is unknown")
        self.key = key


class DblpTransportError(DblpError):
    """The request failed or DBLP answered with an unexpected status."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class MalformedRecordError(DblpError):
    """DBLP returned data that is inconsistent or cannot be decoded."""


def strip_key_prefix(key: str) -> str:
    """Remove the `DBLP:` namespace marker from a citekey, if present."""
    if key.startswith(DBLP_KEY_PREFIX):
        return key[len(DBLP_KEY_PREFIX) :]
    return key


class DblpClient:
    """Async client for DBLP.

    Usage:
        async with DblpClient() as client:
            xml = await client.get_record_xml("DBLP:conf/cpaior/JabsBJ24")

    A pre-built `httpx.AsyncClient` can be injected (for example one using a
    `httpx.MockTransport` in tests); in that case the caller owns it.
    """

    def __init__(
        self,
        config: Optional[DblpServerConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or DEFAULT_SERVER
        self._timeout = httpx.Timeout(TIMEOUTS.REQUEST, connect=TIMEOUTS.CONNECT)
        self._client = http_client
        self._owns_client = http_client is None

    def _headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/xml",
        }

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout, headers=self._headers())
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "DblpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def record_url(self, key: str) -> str:
        key = strip_key_prefix(key)
        return f"{self.config.domain}{RECORD_BASE}{quote(key, safe='/')}.xml"

    def stream_url(self, code: str) -> str:
        return f"{self.config.domain}{STREAM_BASE}{quote(code, safe='')}.xml"

    async def _get_text(self, url: str, *, missing: str) -> str:
        client = self._get_client()
        logger.debug(f"DBLP GET {url}")
        try:
            resp = await client.get(url)
        except httpx.HTTPError as e:
            raise DblpTransportError(f"DBLP request for `{missing}` failed: {e}", url=url) from e

        if resp.status_code == 404:
            raise UnknownKeyError(missing)
        if not resp.is_success:
            raise DblpTransportError(
                f"DBLP returned HTTP {resp.status_code} for `{missing}`",
                url=url,
                status_code=resp.status_code,
            )
        return resp.text

    async def get_record_xml(self, key: str) -> str:
        """Fetch the XML document of a single record.

        Raises:
            UnknownKeyError: DBLP answered 404.
            DblpTransportError: any other failure.
        """
        return await self._get_text(self.record_url(key), missing=strip_key_prefix(key))

    async def get_stream_xml(self, code: str) -> str:
        """Fetch the XML document describing a journal stream."""
        return await self._get_text(self.stream_url(code), missing=f"streams/journals/{code}")
