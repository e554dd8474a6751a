"""
SQLAlchemy column type storing a TimeZone as its canonical name.
"""

from sqlalchemy.types import String, TypeDecorator

from tzfield.exceptions import NullValueUnsupported
from tzfield.timezone import UTC, TimeZone


class TimeZoneType(TypeDecorator):
    """Text column holding "UTC" or an IANA name. NULL is not a valid value."""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            raise NullValueUnsupported()
        if not isinstance(value, TimeZone):
            value = UTC.scan(value)
        return value.value()

    def process_result_value(self, value, dialect):
        return UTC.scan(value)

    def process_literal_param(self, value, dialect):
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self):
        return TimeZone
