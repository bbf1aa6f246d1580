"""
CDP Cookies - Read, clear and inject browser cookies over the Chrome DevTools Protocol.

Talks to a Chromium-based browser started with ``--remote-debugging-port``.
Every operation discovers the browser's targets, opens one WebSocket session
to the first of them, sends a single command and closes the session.

Usage:
    from cdp_cookies import CookieTool, ToolConfig

    tool = CookieTool(ToolConfig(port=9222))
    print(await tool.list_targets("mail"))
    print(await tool.dump_cookies("modified"))
    await tool.load_cookies("cookies.json")

Low-level access:
    targets = await discover("localhost", 9222)
    async with open_session(select_target(targets).web_socket_debugger_url) as session:
        response = await CDPClient(session).get_all_cookies()
"""
from cdp_cookies.config import ToolConfig
from cdp_cookies.operations import CookieTool, read_cookie_file
from cdp_cookies.cdp.client import CDPClient, decode_response, setup_logging
from cdp_cookies.cdp.discovery import discover, select_target
from cdp_cookies.cdp.transport import Session, connect_session, open_session
from cdp_cookies.core.models import (
    Command,
    CommandSent,
    Cookie,
    CookieMethod,
    DumpKind,
    OutputFormat,
    ReducedCookie,
    Response,
    Target,
)
from cdp_cookies.core.filtering import filter_cookies, filter_targets
from cdp_cookies.core.transcoder import render_targets, transcode
from cdp_cookies.core.errors import (
    CDPCookiesError,
    DiscoveryError,
    ConnectError,
    TransportError,
    ProtocolError,
    CookieFileError,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "CookieTool",
    "ToolConfig",
    "read_cookie_file",
    # Protocol client
    "CDPClient",
    "Session",
    "connect_session",
    "open_session",
    "discover",
    "select_target",
    "decode_response",
    "setup_logging",
    # Models
    "Command",
    "CommandSent",
    "Cookie",
    "CookieMethod",
    "DumpKind",
    "OutputFormat",
    "ReducedCookie",
    "Response",
    "Target",
    # Filtering and rendering
    "filter_cookies",
    "filter_targets",
    "render_targets",
    "transcode",
    # Errors
    "CDPCookiesError",
    "DiscoveryError",
    "ConnectError",
    "TransportError",
    "ProtocolError",
    "CookieFileError",
    # Version
    "__version__",
]
