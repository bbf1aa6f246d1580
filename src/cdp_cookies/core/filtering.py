"""Substring filtering of targets and cookies."""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, TypeVar

from cdp_cookies.core.models import Cookie, Target

T = TypeVar("T")

TARGET_FIELDS = ("title", "url")
COOKIE_FIELDS = ("name", "domain")


def matches(entry: object, term: Optional[str], fields: Sequence[str]) -> bool:
    """True if ``term`` is empty or a case-sensitive substring of any of ``fields``."""
    if not term:
        return True
    return any(term in getattr(entry, name) for name in fields)


def filter_entries(entries: Iterable[T], term: Optional[str], fields: Sequence[str]) -> List[T]:
    """Keep the entries matching ``term``, preserving order."""
    return [entry for entry in entries if matches(entry, term, fields)]


def filter_targets(targets: Iterable[Target], term: Optional[str] = None) -> List[Target]:
    return filter_entries(targets, term, TARGET_FIELDS)


def filter_cookies(cookies: Iterable[Cookie], term: Optional[str] = None) -> List[Cookie]:
    return filter_entries(cookies, term, COOKIE_FIELDS)
