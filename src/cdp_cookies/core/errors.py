"""
CDP Cookies Error Taxonomy - Exception classes for each stage of an operation.

Every operation runs discovery -> connect -> command once. Each stage raises
its own exception type so the operator can tell which one failed; the
``stage`` attribute carries the same information as a plain label.
"""
from typing import Optional


class CDPCookiesError(Exception):
    """Base exception for all cdp_cookies errors."""

    stage = "unknown"

    def __init__(self, message: str, target_id: Optional[str] = None,
                 method: Optional[str] = None, **context):
        super().__init__(message)
        self.message = message
        self.target_id = target_id
        self.method = method
        self.context = context

    def __str__(self):
        parts = [self.message]
        if self.target_id:
            parts.append(f"target_id={self.target_id}")
        if self.method:
            parts.append(f"method={self.method}")
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"context=({context_str})")
        return " | ".join(parts)


class DiscoveryError(CDPCookiesError):
    """Raised when the debug endpoint is unreachable or returns an unusable target list."""

    stage = "discovery"


class ConnectError(CDPCookiesError):
    """Raised when the WebSocket handshake times out or is refused."""

    stage = "connect"

    def __init__(self, message: str, timeout: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timeout = timeout


class TransportError(CDPCookiesError):
    """Raised when an established session fails (oversized message, dropped connection)."""

    stage = "transport"


class ProtocolError(CDPCookiesError):
    """Raised when a response is malformed or CDP returns an error object."""

    stage = "protocol"

    def __init__(self, message: str, code: Optional[int] = None,
                 cdp_error: Optional[dict] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.code = code
        self.cdp_error = cdp_error


class CookieFileError(CDPCookiesError):
    """Raised when the cookie file to load cannot be read."""

    stage = "load-file"

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
