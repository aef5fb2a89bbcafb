"""Shared fixtures: canned DBLP documents served through httpx.MockTransport."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

import httpx
import pytest

from dblp_samples import DBLP_DOCUMENTS
from dblpbib.dblp.client import DblpClient


class FakeDblp:
    """Serves canned documents and records every requested path."""

    def __init__(self, documents: Dict[str, str], errors: Optional[Dict[str, int]] = None):
        self.documents = dict(documents)
        self.errors = dict(errors or {})
        self.requests: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append(path)
        if path in self.errors:
            return httpx.Response(self.errors[path], request=request)
        if path in self.documents:
            return httpx.Response(200, text=self.documents[path], request=request)
        return httpx.Response(404, request=request)

    def client(self) -> DblpClient:
        transport = httpx.MockTransport(self.handler)
        return DblpClient(http_client=httpx.AsyncClient(transport=transport))


@pytest.fixture
def fake_dblp() -> FakeDblp:
    return FakeDblp(DBLP_DOCUMENTS)


@pytest.fixture
def make_fake_dblp() -> Callable[..., FakeDblp]:
    def _make(documents: Optional[Dict[str, str]] = None, errors: Optional[Dict[str, int]] = None) -> FakeDblp:
        return FakeDblp(DBLP_DOCUMENTS if documents is None else documents, errors)

    return _make


@pytest.fixture
def dblp_documents() -> Dict[str, str]:
    return dict(DBLP_DOCUMENTS)
