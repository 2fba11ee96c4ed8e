"""
Timezone-aware timestamps for schedule metadata.
"""

import logging
from datetime import datetime
from typing import Optional

import pytz

from ...config import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)


def resolve_timezone(name: Optional[str]):
    """Return the pytz zone for `name`, falling back to the configured default and then UTC."""
    for candidate in (name, DEFAULT_TIMEZONE):
        if not candidate:
            continue
        try:
            return pytz.timezone(candidate)
        except pytz.UnknownTimeZoneError:
            logger.warning(f"Unknown timezone '{candidate}', ignoring")
    return pytz.utc


def now(timezone: Optional[str] = None) -> datetime:
    return datetime.now(resolve_timezone(timezone))
