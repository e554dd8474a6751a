"""
Name-to-zone resolution backed by zoneinfo.

The resolver is the only place that talks to the time zone database. A
TimeZone asks it for a handle and then only compares the handle's kind and
name, so tests can swap in any object with a ``resolve`` method.
"""

import enum
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from typing import Dict, Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzfield.exceptions import ZoneNotFound

UTC_NAME = 'UTC'
LOCAL_NAME = 'Local'
# Names that resolve to the host zone. "localtime" is the zoneinfo entry
# for /etc/localtime on Debian-family systems.
LOCAL_ALIASES = (LOCAL_NAME, 'localtime')


class ZoneKind(enum.Enum):
    NAMED = 'named'
    UTC = 'utc'
    LOCAL = 'local'


@dataclass(frozen=True)
class ZoneHandle:
    """A resolved zone: its canonical name, what kind it is and its rules."""

    name: str
    kind: ZoneKind = ZoneKind.NAMED
    tzinfo: Optional[tzinfo] = field(default=None, compare=False, repr=False)

    @property
    def is_utc(self) -> bool:
        return self.kind is ZoneKind.UTC

    @property
    def is_local(self) -> bool:
        return self.kind is ZoneKind.LOCAL


UTC_HANDLE = ZoneHandle(UTC_NAME, ZoneKind.UTC, timezone.utc)
LOCAL_HANDLE = ZoneHandle(LOCAL_NAME, ZoneKind.LOCAL)


class Resolver(Protocol):
    def resolve(self, name: str) -> ZoneHandle:
        """Return the handle for ``name`` or raise ZoneNotFound."""
        ...


class ZoneInfoResolver:
    """Resolve IANA names with zoneinfo, memoizing handles per name."""

    def __init__(self):
        self._cache: Dict[str, ZoneHandle] = {}
        self._lock = threading.Lock()

    def resolve(self, name: str) -> ZoneHandle:
        with self._lock:
            cached = self._cache.get(name)
        if cached is not None:
            return cached

        handle = self._lookup(name)

        with self._lock:
            return self._cache.setdefault(name, handle)

    def _lookup(self, name: str) -> ZoneHandle:
        if name in ('', UTC_NAME):
            return UTC_HANDLE
        if name in LOCAL_ALIASES:
            return ZoneHandle(LOCAL_NAME, ZoneKind.LOCAL, datetime.now().astimezone().tzinfo)

        try:
            info = ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ZoneNotFound(name) from e

        return ZoneHandle(info.key, ZoneKind.NAMED, info)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()


_default_resolver: Resolver = ZoneInfoResolver()


def get_default_resolver() -> Resolver:
    """Resolver used when a caller does not pass one explicitly."""
    return _default_resolver


def set_default_resolver(resolver: Resolver) -> Resolver:
    """
    Replace the default resolver.

    Returns:
        The previously installed resolver, so callers can restore it.
    """
    global _default_resolver
    previous = _default_resolver
    _default_resolver = resolver
    return previous
