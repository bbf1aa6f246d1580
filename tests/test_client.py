"""
Tests for the one-command-per-session CDP client.

Run with: pytest tests/test_client.py -v
"""
import asyncio
import json

import pytest

from cdp_cookies.cdp.client import CDPClient, decode_response
from cdp_cookies.cdp.transport import open_session
from cdp_cookies.core.errors import ProtocolError
from cdp_cookies.core.models import CookieMethod
from tests.fake_browser import cookie_dict, cookies_payload, fake_devtools, recorder, responder


# =============================================================================
# Response decoding
# =============================================================================

class TestDecodeResponse:
    def test_valid(self):
        response = decode_response('{"id": 1, "result": {"cookies": []}}')
        assert response.id == 1
        assert response.result == {"cookies": []}

    def test_id_not_checked(self):
        """Test that a response with another id is accepted."""
        assert decode_response('{"id": 7, "result": {}}').id == 7

    def test_not_json(self):
        with pytest.raises(ProtocolError, match="not valid JSON") as exc_info:
            decode_response("{oops", method="Network.getAllCookies")
        assert exc_info.value.method == "Network.getAllCookies"
        assert exc_info.value.stage == "protocol"

    def test_not_an_object(self):
        with pytest.raises(ProtocolError, match="not a JSON object"):
            decode_response("[1, 2]")

    def test_missing_result(self):
        with pytest.raises(ProtocolError, match="no result"):
            decode_response('{"id": 1}')

    def test_result_not_an_object(self):
        with pytest.raises(ProtocolError, match="no result"):
            decode_response('{"id": 1, "result": []}')

    def test_deeply_nested(self):
        """Test that nesting past the parser's recursion limit is a protocol error."""
        raw = '{"id": 1, "result": {"cookies": ' + "[" * 200000 + "]" * 200000 + "}}"
        with pytest.raises(ProtocolError, match="not valid JSON"):
            decode_response(raw)

    def test_bad_id(self):
        with pytest.raises(ProtocolError, match="id"):
            decode_response('{"id": "1", "result": {}}')

    def test_cdp_error(self):
        """Test that a CDP error object is surfaced with its code."""
        raw = '{"id": 1, "error": {"code": -32601, "message": "\'Network.nope\' wasn\'t found"}}'
        with pytest.raises(ProtocolError) as exc_info:
            decode_response(raw)
        assert exc_info.value.code == -32601
        assert exc_info.value.cdp_error["message"] == "'Network.nope' wasn't found"


# =============================================================================
# Commands over a session
# =============================================================================

class TestCDPClient:
    @pytest.mark.asyncio
    async def test_get_all_cookies(self):
        received = []
        payload = cookies_payload([cookie_dict("sid")])
        async with fake_devtools(responder(payload, received)) as url:
            async with open_session(url, timeout=2.0) as session:
                response = await CDPClient(session).get_all_cookies()

        assert json.loads(received[0]) == {"id": 1, "method": "Network.getAllCookies"}
        assert response.raw == payload
        assert [c.name for c in response.cookies] == ["sid"]

    @pytest.mark.asyncio
    async def test_malformed_response(self):
        received = []
        async with fake_devtools(responder("not json", received)) as url:
            async with open_session(url, timeout=2.0) as session:
                with pytest.raises(ProtocolError):
                    await CDPClient(session).get_all_cookies()

    @pytest.mark.asyncio
    async def test_clear_does_not_wait(self):
        """Test that clearing returns once sent, with nothing ever answered."""
        queue = asyncio.Queue()
        async with fake_devtools(recorder(queue)) as url:
            async with open_session(url, timeout=2.0) as session:
                sent = await CDPClient(session, target_id="T1").clear_browser_cookies()
            message = await asyncio.wait_for(queue.get(), timeout=2.0)

        assert sent.method is CookieMethod.CLEAR_BROWSER_COOKIES
        assert sent.target_id == "T1"
        assert json.loads(message) == {"id": 1, "method": "Network.clearBrowserCookies"}
        assert sent.message == message

    @pytest.mark.asyncio
    async def test_set_cookies_splices_text(self):
        """Test that the cookie text lands in params unchanged."""
        raw_cookies = '[ {"name":"a",  "value":"b"} ]\n'
        queue = asyncio.Queue()
        async with fake_devtools(recorder(queue)) as url:
            async with open_session(url, timeout=2.0) as session:
                await CDPClient(session).set_cookies(raw_cookies)
            message = await asyncio.wait_for(queue.get(), timeout=2.0)

        assert raw_cookies in message
        decoded = json.loads(message)
        assert decoded["id"] == 1
        assert decoded["method"] == "Network.setCookies"
        assert decoded["params"] == {"cookies": [{"name": "a", "value": "b"}]}

    @pytest.mark.asyncio
    async def test_set_cookies_does_not_validate(self):
        """Test that malformed cookie text is still sent."""
        queue = asyncio.Queue()
        async with fake_devtools(recorder(queue)) as url:
            async with open_session(url, timeout=2.0) as session:
                await CDPClient(session).set_cookies("{not json")
            message = await asyncio.wait_for(queue.get(), timeout=2.0)
        assert message.endswith('"params": {"cookies": {not json}}')
