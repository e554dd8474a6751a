"""
JSON provider that knows how to render TimeZone values.
"""
from flask.json.provider import DefaultJSONProvider

from tzfield import TimeZone


class TimeZoneJSONProvider(DefaultJSONProvider):
    """Default Flask JSON provider plus TimeZone support."""

    @staticmethod
    def default(o):
        if isinstance(o, TimeZone):
            return o.name
        return DefaultJSONProvider.default(o)
