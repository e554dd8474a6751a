"""
TimeZone value type.

A TimeZone holds either nothing (meaning UTC) or a resolved IANA zone.
The host-local zone is never accepted. Every way of building a TimeZone
from outside data goes through ``_load`` and every way of rendering one
goes through ``name``.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import timezone, tzinfo
from typing import Any, Optional, Union

from tzfield.exceptions import MalformedEncoding, NullValueUnsupported, TimeZoneError, UnsupportedLocalZone
from tzfield.resolver import LOCAL_ALIASES, UTC_NAME, Resolver, ZoneHandle, get_default_resolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeZone:
    """
    A validated IANA time zone name, or UTC.

    ``TimeZone()`` is UTC, and loading "UTC" (or "") gives a value equal to
    it. Values are immutable: the ``decode_*`` and ``scan`` methods return
    the replacement value instead of changing the receiver, so a failed
    decode always leaves the original untouched.

    The constructor takes no arguments; named zones only come from a
    resolver through ``load`` and the decoders.
    """

    _handle: Optional[ZoneHandle] = field(default=None, init=False)

    @classmethod
    def _from_handle(cls, handle: ZoneHandle) -> 'TimeZone':
        if handle.is_local or handle.name in LOCAL_ALIASES:
            raise UnsupportedLocalZone()

        z = cls()
        if not (handle.is_utc or handle.name == UTC_NAME):
            object.__setattr__(z, '_handle', handle)
        return z

    @classmethod
    def load(cls, name: str, resolver: Optional[Resolver] = None) -> 'TimeZone':
        """
        Load a TimeZone from a zone name.

        Args:
            name: "UTC", "" or an IANA time zone database name
            resolver: Resolver to use instead of the default one

        Raises:
            ZoneNotFound: If the resolver does not know the name
            UnsupportedLocalZone: If the name resolves to the host-local zone
        """
        return _load(name, resolver)

    @property
    def name(self) -> str:
        """Canonical name; "UTC" when no zone is set."""
        if self._handle is None:
            return UTC_NAME
        return self._handle.name

    @property
    def handle(self) -> Optional[ZoneHandle]:
        """Resolved zone, or None for UTC."""
        return self._handle

    @property
    def tzinfo(self) -> tzinfo:
        """Zone rules usable with datetime; never None."""
        if self._handle is None or self._handle.tzinfo is None:
            return timezone.utc
        return self._handle.tzinfo

    @property
    def is_utc(self) -> bool:
        return self._handle is None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"TimeZone('{self.name}')"

    # Database column

    def scan(self, value: Any, resolver: Optional[Resolver] = None) -> 'TimeZone':
        """Load from a database cell. NULL is rejected."""
        if value is None:
            raise NullValueUnsupported()
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.decode_text(value, resolver)
        if not isinstance(value, str):
            value = str(value)
        return _load(value, resolver)

    def value(self) -> str:
        """Value to store in a text column."""
        return self.name

    # Text

    def encode_text(self) -> bytes:
        return self.name.encode('utf-8')

    def decode_text(self, data: Union[bytes, str], resolver: Optional[Resolver] = None) -> 'TimeZone':
        if isinstance(data, str):
            return _load(data, resolver)
        try:
            text = bytes(data).decode('utf-8')
        except UnicodeDecodeError as e:
            raise MalformedEncoding(f"time zone text is not valid UTF-8: {e}") from e
        return _load(text, resolver)

    # JSON

    def encode_json(self) -> str:
        return json.dumps(self.name, ensure_ascii=False)

    def decode_json(self, data: Union[bytes, str], resolver: Optional[Resolver] = None) -> 'TimeZone':
        """
        Load from a JSON string literal.

        JSON ``null`` is ignored and the receiver is returned unchanged, the
        same way decoders leave a field alone when its value is null.

        Raises:
            MalformedEncoding: If the data is not a JSON string or null
        """
        try:
            decoded = json.loads(data)
        except (ValueError, TypeError) as e:
            raise MalformedEncoding(f"malformed JSON string: {e}") from e

        if decoded is None:
            return self
        if not isinstance(decoded, str):
            raise MalformedEncoding(f"malformed JSON string: expected a string, got {type(decoded).__name__}")
        return _load(decoded, resolver)


UTC = TimeZone()


def _load(name: str, resolver: Optional[Resolver] = None) -> TimeZone:
    if resolver is None:
        resolver = get_default_resolver()

    try:
        handle = resolver.resolve(name)
        return TimeZone._from_handle(handle)
    except TimeZoneError as e:
        logger.debug("Rejected time zone %r: %s", name, e)
        raise
