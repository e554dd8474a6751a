"""
Hooks for encoding TimeZone values with the json module.
"""

import json
from typing import Any

from tzfield.timezone import TimeZone


def default(obj: Any) -> Any:
    """``default=`` hook for json.dumps: TimeZone renders as its name."""
    if isinstance(obj, TimeZone):
        return obj.name
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class TimeZoneJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, TimeZone):
            return o.name
        return super().default(o)
