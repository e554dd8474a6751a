"""
Configured application time zone.
"""

import logging
import os

from tzfield.exceptions import TimeZoneError
from tzfield.timezone import UTC, TimeZone

logger = logging.getLogger(__name__)

DEFAULT_ENV_VAR = 'TZFIELD_TIMEZONE'


def get_configured_timezone(env_var: str = DEFAULT_ENV_VAR, default: TimeZone = UTC) -> TimeZone:
    """Return the zone named by ``env_var``, or ``default`` when unset or invalid."""
    tz_name = os.environ.get(env_var)
    if tz_name is None:
        return default

    try:
        return TimeZone.load(tz_name)
    except TimeZoneError as e:
        logger.warning("Invalid time zone in %s (%s); falling back to %s", env_var, e, default)
        return default
