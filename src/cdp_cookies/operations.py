"""
Operations - The four things this tool does against a running browser.

Each operation performs one full cycle and then releases everything:

    discover targets -> pick the first -> open a session -> one command -> close

Usage:
    tool = CookieTool(ToolConfig(port=9222))
    print(await tool.dump_cookies("modified", "example.com"))
    await tool.clear_cookies()
    await tool.load_cookies("cookies.json")
"""
from __future__ import annotations

import logging
import time
from typing import List, Optional, Union

import httpx

from cdp_cookies.cdp.client import CDPClient
from cdp_cookies.cdp.discovery import discover, select_target
from cdp_cookies.cdp.transport import open_session
from cdp_cookies.config import ToolConfig
from cdp_cookies.core.errors import CookieFileError
from cdp_cookies.core.models import CommandSent, OutputFormat, Target
from cdp_cookies.core.transcoder import render_targets, transcode

logger = logging.getLogger("cdp_cookies")


def read_cookie_file(path: str) -> str:
    """
    Read a cookie file as text, unmodified.

    Raises:
        CookieFileError: If the file cannot be read or is not UTF-8.
    """
    try:
        with open(path, "rb") as f:
            content = f.read()
    except OSError as e:
        raise CookieFileError(f"Failed to read cookie file {path}: {e}", path=path) from e
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CookieFileError(f"Cookie file {path} is not valid UTF-8", path=path) from e


class CookieTool:
    """
    Reads, clears and injects cookies through a browser's debug port.

    Always operates on the first target the browser lists.
    """

    def __init__(self, config: Optional[ToolConfig] = None,
                 http_transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            config: Connection settings. Uses defaults if not provided.
            http_transport: Optional httpx transport used for discovery.
        """
        self.config = config or ToolConfig()
        self._http_transport = http_transport

    async def discover(self) -> List[Target]:
        return await discover(
            self.config.host,
            self.config.port,
            timeout=self.config.discovery_timeout,
            transport=self._http_transport,
        )

    def _open_session(self, target: Target):
        return open_session(
            target.web_socket_debugger_url,
            timeout=self.config.connect_timeout,
            max_message_size=self.config.max_message_size,
            read_timeout=self.config.read_timeout,
        )

    async def list_targets(self, term: Optional[str] = None) -> str:
        """Render the discovered targets whose title or url contains ``term``."""
        targets = await self.discover()
        return render_targets(targets, term)

    async def dump_cookies(
        self,
        fmt: Union[OutputFormat, str] = OutputFormat.HUMAN,
        term: Optional[str] = None,
    ) -> str:
        """Fetch every cookie in the browser and render it in ``fmt``."""
        target = select_target(await self.discover())
        start_time = time.monotonic()
        async with self._open_session(target) as session:
            client = CDPClient(session, target_id=target.id)
            response = await client.get_all_cookies()
        duration = time.monotonic() - start_time
        logger.debug(
            f"Fetched cookies in {duration:.3f}s",
            extra={"target_id": target.id, "duration_ms": duration * 1000}
        )
        return transcode(response, fmt, term)

    async def clear_cookies(self) -> CommandSent:
        """Ask the browser to clear all cookies. The outcome is not checked."""
        target = select_target(await self.discover())
        async with self._open_session(target) as session:
            return await CDPClient(session, target_id=target.id).clear_browser_cookies()

    async def load_cookies(self, path: str) -> CommandSent:
        """
        Inject the cookies in ``path`` into the browser.

        The file must hold a JSON array of cookies in the CDP ``CookieParam``
        shape. It is passed through as-is; the browser, not this tool, rejects
        malformed content, and that rejection is not observed.
        """
        content = read_cookie_file(path)
        target = select_target(await self.discover())
        async with self._open_session(target) as session:
            return await CDPClient(session, target_id=target.id).set_cookies(content)
