"""
CDP Client - Runs one command per session over a Session transport.
"""
import json
import logging
from typing import Any, Dict, Optional

from cdp_cookies.cdp.transport import Session
from cdp_cookies.core.errors import ProtocolError
from cdp_cookies.core.models import Command, CommandSent, CookieMethod, Response

logger = logging.getLogger("cdp_cookies")


def setup_logging(level: int = logging.INFO, debug: bool = False):
    """Configure logging for cdp_cookies. Logs go to stderr."""
    if debug:
        level = logging.DEBUG

    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def decode_response(raw: str, method: Optional[str] = None) -> Response:
    """
    Decode a CDP response message.

    Raises:
        ProtocolError: If ``raw`` is not a JSON object with a ``result``
            object, or if it carries a CDP ``error``.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ProtocolError(f"Response is not valid JSON: {e}", method=method) from e

    if not isinstance(data, dict):
        raise ProtocolError("Response is not a JSON object", method=method)

    if "error" in data:
        error_data = data["error"] if isinstance(data["error"], dict) else {"message": str(data["error"])}
        error_code = error_data.get("code")
        error_message = error_data.get("message", "Unknown CDP error")
        logger.error(
            f"CDP protocol error: {error_message}",
            extra={"error_code": error_code, "error_data": error_data, "message_id": data.get("id")}
        )
        raise ProtocolError(
            f"CDP Error: {error_message}",
            code=error_code,
            cdp_error=error_data,
            method=method,
        )

    message_id = data.get("id", 0)
    if isinstance(message_id, bool) or not isinstance(message_id, int):
        raise ProtocolError("Response id is not an integer", method=method)

    result = data.get("result")
    if not isinstance(result, dict):
        raise ProtocolError("Response has no result object", method=method)

    return Response(id=message_id, result=result, raw=raw)


class CDPClient:
    """
    Chrome DevTools Protocol client bound to one open Session.

    Each session is used for a single command. Commands always carry id 1
    and the response id is not checked; supporting several in-flight
    commands would need an id counter and a table of pending commands.
    """

    def __init__(self, session: Session, target_id: Optional[str] = None):
        self.session = session
        self.target_id = target_id

    async def execute(self, method: CookieMethod, params: Optional[Dict[str, Any]] = None) -> Response:
        """Send a command and wait for the one response to it."""
        command = Command(method=method, params=params)
        logger.debug(
            f"CDP command: {method.value}",
            extra={"method": method.value, "target_id": self.target_id, "message_id": command.id}
        )
        await self.session.send(json.dumps(command.to_dict()))
        raw = await self.session.receive()
        return decode_response(raw, method=method.value)

    async def _send_text(self, method: CookieMethod, message: str) -> CommandSent:
        await self.session.send(message)
        logger.info(
            f"Sent {method.value} without waiting for a response",
            extra={"method": method.value, "target_id": self.target_id}
        )
        return CommandSent(method=method, message=message, target_id=self.target_id)

    async def send_only(self, method: CookieMethod, params: Optional[Dict[str, Any]] = None) -> CommandSent:
        """Send a command and return as soon as it is written."""
        command = Command(method=method, params=params)
        return await self._send_text(method, json.dumps(command.to_dict()))

    async def send_raw_params(self, method: CookieMethod, name: str, raw_json: str) -> CommandSent:
        """
        Send a command whose ``params[name]`` is the JSON text ``raw_json``.

        The text is spliced into the message unparsed; the caller is
        responsible for it being valid JSON.
        """
        command = Command(method=method)
        head = json.dumps(command.to_dict())[:-1]
        message = f"{head}, \"params\": {{{json.dumps(name)}: {raw_json}}}}}"
        return await self._send_text(method, message)

    async def get_all_cookies(self) -> Response:
        return await self.execute(CookieMethod.GET_ALL_COOKIES)

    async def clear_browser_cookies(self) -> CommandSent:
        return await self.send_only(CookieMethod.CLEAR_BROWSER_COOKIES)

    async def set_cookies(self, raw_cookies: str) -> CommandSent:
        return await self.send_raw_params(CookieMethod.SET_COOKIES, "cookies", raw_cookies)
