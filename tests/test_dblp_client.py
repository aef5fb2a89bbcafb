"""Tests for the DBLP HTTP client."""

import httpx
import pytest

from dblpbib.config import DBLP_TRIER, DblpServerConfig
from dblpbib.dblp.client import (
    DblpClient,
    DblpError,
    DblpTransportError,
    UnknownKeyError,
    strip_key_prefix,
)


@pytest.mark.unit
def test_strip_key_prefix():
    assert strip_key_prefix("DBLP:conf/cpaior/JabsBJ24") == "conf/cpaior/JabsBJ24"
    assert strip_key_prefix("conf/cpaior/JabsBJ24") == "conf/cpaior/JabsBJ24"


@pytest.mark.unit
def test_urls_follow_server_config():
    client = DblpClient(DblpServerConfig(domain="https://dblp.example"))
    assert client.record_url("DBLP:conf/cpaior/2024-2") == "https://dblp.example/rec/conf/cpaior/2024-2.xml"
    assert client.stream_url("jair") == "https://dblp.example/streams/journals/jair.xml"


@pytest.mark.unit
def test_server_selection():
    assert DblpServerConfig.for_args(trier=True).domain == DBLP_TRIER
    assert DblpServerConfig.for_args(trier=True, domain="https://mirror.example/").domain == "https://mirror.example"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_record_request_uses_configured_domain():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        return httpx.Response(200, text="<dblp/>", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler), headers={"User-Agent": "test"}) as http:
        client = DblpClient(DblpServerConfig(domain="https://dblp.example"), http_client=http)
        assert await client.get_record_xml("DBLP:journals/jair/JabsBNJ24") == "<dblp/>"
        await client.close()
        # An injected client belongs to the caller
        assert not http.is_closed

    assert seen["url"] == "https://dblp.example/rec/journals/jair/JabsBNJ24.xml"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_404_is_unknown_key(fake_dblp):
    with pytest.raises(UnknownKeyError) as exc_info:
        await fake_dblp.client().get_record_xml("DBLP:conf/nope/X")
    assert exc_info.value.key == "conf/nope/X"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_server_error_is_transport_error(make_fake_dblp):
    fake = make_fake_dblp(errors={"/rec/conf/cpaior/JabsBJ24.xml": 503})

    with pytest.raises(DblpTransportError) as exc_info:
        await fake.client().get_record_xml("conf/cpaior/JabsBJ24")

    assert exc_info.value.status_code == 503
    assert exc_info.value.url.endswith("/rec/conf/cpaior/JabsBJ24.xml")
    assert "conf/cpaior/JabsBJ24" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_network_error_is_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = DblpClient(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    with pytest.raises(DblpTransportError) as exc_info:
        await client.get_record_xml("conf/cpaior/JabsBJ24")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value, DblpError)
