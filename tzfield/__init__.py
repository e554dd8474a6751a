"""
tzfield

A validated IANA time zone value that round-trips through text, JSON and a
database column. UTC is the default, and the host-local zone is rejected.
"""

from tzfield.exceptions import (
    MalformedEncoding,
    NullValueUnsupported,
    TimeZoneError,
    UnsupportedLocalZone,
    ZoneNotFound,
)
from tzfield.resolver import (
    Resolver,
    ZoneHandle,
    ZoneInfoResolver,
    ZoneKind,
    get_default_resolver,
    set_default_resolver,
)
from tzfield.timezone import UTC, TimeZone

__version__ = "0.1.0"
__all__ = [
    "TimeZone",
    "UTC",
    "Resolver",
    "ZoneHandle",
    "ZoneInfoResolver",
    "ZoneKind",
    "get_default_resolver",
    "set_default_resolver",
    "TimeZoneError",
    "ZoneNotFound",
    "UnsupportedLocalZone",
    "NullValueUnsupported",
    "MalformedEncoding",
]
