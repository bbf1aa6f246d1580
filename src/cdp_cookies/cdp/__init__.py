"""
CDP Module - Target discovery, WebSocket session transport and command client.
"""
from cdp_cookies.cdp.client import CDPClient, decode_response, setup_logging
from cdp_cookies.cdp.discovery import discover, select_target
from cdp_cookies.cdp.transport import Session, connect_session, open_session

__all__ = [
    "CDPClient",
    "decode_response",
    "setup_logging",
    "discover",
    "select_target",
    "Session",
    "connect_session",
    "open_session",
]
