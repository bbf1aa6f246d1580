"""
Cookie Transcoder - Renders CDP cookie responses and target lists for output.

Three cookie formats are supported:

    raw       the response text exactly as received, unfiltered
    human     every native field of each cookie, one ``key: value`` per line
    modified  a JSON array of reduced cookies whose expiry is pushed ten
              years past the time of rendering
"""
from __future__ import annotations

import json
import time
from typing import Iterable, List, Optional, Union

from cdp_cookies.core.filtering import filter_cookies, filter_targets
from cdp_cookies.core.models import Cookie, OutputFormat, ReducedCookie, Response, Target


def _bool(value: bool) -> str:
    return "true" if value else "false"


def format_cookie(cookie: Cookie) -> str:
    lines = [
        f"name: {cookie.name}",
        f"value: {cookie.value}",
        f"domain: {cookie.domain}",
        f"path: {cookie.path}",
        f"expires: {cookie.expires:f}",
        f"size: {cookie.size}",
        f"httpOnly: {_bool(cookie.http_only)}",
        f"secure: {_bool(cookie.secure)}",
        f"session: {_bool(cookie.session)}",
        f"sameSite: {cookie.same_site}",
        f"priority: {cookie.priority}",
    ]
    return "\n".join(lines) + "\n"


def format_target(target: Target) -> str:
    lines = [
        f"Title: {target.title}",
        f"Type: {target.type}",
        f"URL: {target.url}",
        f"WebSocket Debugger URL: {target.web_socket_debugger_url}",
    ]
    return "\n".join(lines) + "\n"


def reduce_cookies(cookies: Iterable[Cookie], now: Optional[float] = None) -> List[ReducedCookie]:
    """
    Map cookies to the export shape.

    Args:
        cookies: Cookies to reduce (already filtered).
        now: Epoch seconds to count the ten-year lifetime from. Defaults to
            the current time, read once so every cookie gets the same expiry.
    """
    if now is None:
        now = time.time()
    return [cookie.reduce(now) for cookie in cookies]


def render_targets(targets: Iterable[Target], term: Optional[str] = None) -> str:
    """Render the targets whose title or url contains ``term``, blank-line separated."""
    return "\n".join(format_target(target) for target in filter_targets(targets, term))


def transcode(
    response: Response,
    fmt: Union[OutputFormat, str] = OutputFormat.HUMAN,
    term: Optional[str] = None,
    *,
    now: Optional[float] = None,
) -> str:
    """
    Render a ``Network.getAllCookies`` response.

    Args:
        response: The decoded response.
        fmt: Output format. Raw output ignores ``term``.
        term: Keep only cookies whose name or domain contains this substring.
        now: Reference time for the modified format's expiry.

    Returns:
        The rendered text, without a trailing newline for raw and modified.
    """
    fmt = OutputFormat(fmt)

    if fmt is OutputFormat.RAW:
        return response.raw

    cookies = filter_cookies(response.cookies, term)

    if fmt is OutputFormat.MODIFIED:
        reduced = reduce_cookies(cookies, now=now)
        return json.dumps([cookie.to_dict() for cookie in reduced], separators=(",", ":"))

    return "\n".join(format_cookie(cookie) for cookie in cookies)
