"""
Core module - Data models, errors, filtering and transcoding.
"""
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
from cdp_cookies.core.errors import (
    CDPCookiesError,
    DiscoveryError,
    ConnectError,
    TransportError,
    ProtocolError,
    CookieFileError,
)
from cdp_cookies.core.filtering import filter_cookies, filter_entries, filter_targets
from cdp_cookies.core.transcoder import reduce_cookies, render_targets, transcode

__all__ = [
    "Command",
    "CommandSent",
    "Cookie",
    "CookieMethod",
    "DumpKind",
    "OutputFormat",
    "ReducedCookie",
    "Response",
    "Target",
    "CDPCookiesError",
    "DiscoveryError",
    "ConnectError",
    "TransportError",
    "ProtocolError",
    "CookieFileError",
    "filter_cookies",
    "filter_entries",
    "filter_targets",
    "reduce_cookies",
    "render_targets",
    "transcode",
]
