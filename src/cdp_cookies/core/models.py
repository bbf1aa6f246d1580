"""
CDP Cookies Models - Data classes for targets, cookies and protocol envelopes.

All of these are transient values: they live for one operation and are never
persisted between invocations.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from cdp_cookies.core.errors import ProtocolError

# 10 * 365 days, the lifetime stamped onto exported cookies
EXPORT_LIFETIME_SECONDS = 10 * 365 * 24 * 60 * 60


class CookieMethod(str, Enum):
    """The CDP methods this client sends."""
    GET_ALL_COOKIES = "Network.getAllCookies"
    CLEAR_BROWSER_COOKIES = "Network.clearBrowserCookies"
    SET_COOKIES = "Network.setCookies"


class OutputFormat(str, Enum):
    RAW = "raw"
    HUMAN = "human"
    MODIFIED = "modified"


class DumpKind(str, Enum):
    PAGES = "pages"
    COOKIES = "cookies"


def _string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Target:
    """A debuggable surface (tab, extension, worker) listed by ``/json``."""
    id: str
    title: str
    type: str
    url: str
    web_socket_debugger_url: str = ""
    favicon_url: str = ""
    devtools_frontend_url: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Target:
        """
        Build a Target from one entry of the discovery response.

        Missing fields become empty strings; non-string fields raise TypeError.
        """
        return cls(
            id=_string(data, "id"),
            title=_string(data, "title"),
            type=_string(data, "type"),
            url=_string(data, "url"),
            web_socket_debugger_url=_string(data, "webSocketDebuggerUrl"),
            favicon_url=_string(data, "faviconUrl"),
            devtools_frontend_url=_string(data, "devtoolsFrontendUrl"),
            description=_string(data, "description"),
        )

    @property
    def has_endpoint(self) -> bool:
        return bool(self.web_socket_debugger_url)


@dataclass(frozen=True)
class Cookie:
    """A cookie in the native CDP ``Network.Cookie`` shape."""
    name: str
    value: str
    domain: str
    path: str
    expires: float = 0.0
    size: int = 0
    http_only: bool = False
    secure: bool = False
    session: bool = False
    same_site: str = ""
    priority: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Cookie:
        expires = data.get("expires", 0.0)
        size = data.get("size", 0)
        if isinstance(expires, bool) or not isinstance(expires, (int, float)):
            raise TypeError("field 'expires' must be a number")
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError("field 'size' must be an integer")
        try:
            expires = float(expires)
        except OverflowError as e:
            raise TypeError("field 'expires' is out of range") from e
        return cls(
            name=_string(data, "name"),
            value=_string(data, "value"),
            domain=_string(data, "domain"),
            path=_string(data, "path"),
            expires=expires,
            size=size,
            http_only=bool(data.get("httpOnly", False)),
            secure=bool(data.get("secure", False)),
            session=bool(data.get("session", False)),
            same_site=_string(data, "sameSite"),
            priority=_string(data, "priority"),
        )

    def reduce(self, now: float) -> ReducedCookie:
        """Map to the export shape, expiring ten years after ``now``."""
        return ReducedCookie(
            name=self.name,
            value=self.value,
            domain=self.domain,
            path=self.path,
            expiration_date=int(now) + EXPORT_LIFETIME_SECONDS,
        )


@dataclass(frozen=True)
class ReducedCookie:
    """The minimal cookie shape used for moving cookies between browsers."""
    name: str
    value: str
    domain: str
    path: str
    expiration_date: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "domain": self.domain,
            "path": self.path,
            "expirationDate": self.expiration_date,
        }


@dataclass
class Command:
    """
    An outbound CDP command.

    The id is always 1: a session carries exactly one command before it is
    closed, so there is nothing to correlate against.
    """
    method: CookieMethod
    params: Optional[Dict[str, Any]] = None
    id: int = 1

    def to_dict(self) -> Dict[str, Any]:
        message: Dict[str, Any] = {"id": self.id, "method": self.method.value}
        if self.params is not None:
            message["params"] = self.params
        return message


@dataclass
class Response:
    """A decoded CDP response, with the text it was decoded from."""
    id: int
    result: Dict[str, Any]
    raw: str

    @property
    def cookies(self) -> List[Cookie]:
        """
        The ``cookies`` array of a ``Network.getAllCookies`` result.

        Raises:
            ProtocolError: If the array or one of its entries has the wrong shape.
        """
        entries = self.result.get("cookies")
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise ProtocolError(
                "Response 'cookies' field is not an array",
                method=CookieMethod.GET_ALL_COOKIES.value,
            )
        cookies = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ProtocolError(
                    f"Cookie entry {index} is not an object",
                    method=CookieMethod.GET_ALL_COOKIES.value,
                )
            try:
                cookies.append(Cookie.from_dict(entry))
            except TypeError as e:
                raise ProtocolError(
                    f"Cookie entry {index} is malformed: {e}",
                    method=CookieMethod.GET_ALL_COOKIES.value,
                ) from e
        return cookies


@dataclass
class CommandSent:
    """
    Outcome of a fire-and-forget command.

    Only records that the message was written to the session. Whether the
    browser applied it is never known.
    """
    method: CookieMethod
    message: str
    target_id: Optional[str] = None
