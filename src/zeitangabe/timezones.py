# zeitangabe - German Time Expression Parser
# Copyright (c) 2025-2026 Slash Daemon slashdaemon@protonmail.com
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Commercial licensing: [slashdaemon@protonmail.com]

"""
Timezone Helpers

Validation, lookup and autocomplete for IANA timezone names, and the rule
for turning a wall-clock time into an absolute instant across DST changes.
"""

import logging
from datetime import datetime, tzinfo
from typing import Optional, Union

import pytz

logger = logging.getLogger("zeitangabe.timezones")

# Common timezones offered first in autocomplete
COMMON_TIMEZONES = [
    "CET",
    "Europe/Berlin",
    "Europe/Vienna",
    "Europe/Zurich",
    "Europe/Amsterdam",
    "Europe/Brussels",
    "Europe/Luxembourg",
    "Europe/London",
    "Europe/Paris",
    "Europe/Warsaw",
    "UTC",
    "America/New_York",
    "America/Los_Angeles",
    "Asia/Tokyo",
]


def validate_timezone(tz_name: str) -> bool:
    """
    Validate that a timezone name is valid.

    Args:
        tz_name: IANA timezone name (e.g., "Europe/Berlin")

    Returns:
        True if valid, False otherwise
    """
    try:
        pytz.timezone(tz_name)
        return True
    except pytz.UnknownTimeZoneError:
        return False


def get_timezone(tz: Union[str, tzinfo]) -> tzinfo:
    """
    Resolve a timezone to a pytz timezone.

    pytz objects pass through. Other tzinfo objects (zoneinfo.ZoneInfo,
    datetime.timezone.utc) are looked up again by their name.

    Raises:
        pytz.UnknownTimeZoneError: If the name is not in the tz database
        TypeError: If a tzinfo object has no tz database name
    """
    if hasattr(tz, "localize"):
        return tz
    if isinstance(tz, tzinfo):
        try:
            return pytz.timezone(str(tz))
        except pytz.UnknownTimeZoneError:
            raise TypeError(f"Timezone {tz!r} has no tz database name") from None
    return pytz.timezone(tz)


def localize_latest(tz: tzinfo, naive: datetime) -> Optional[datetime]:
    """
    Attach ``tz`` to a wall-clock datetime.

    When the wall-clock time occurs twice (clocks turned back) the later of
    the two instants is returned. When it does not occur at all (clocks
    turned forward) there is no instant and None is returned.
    """
    try:
        return tz.localize(naive, is_dst=None)
    except pytz.AmbiguousTimeError:
        return max(
            tz.localize(naive, is_dst=True),
            tz.localize(naive, is_dst=False),
        )
    except pytz.NonExistentTimeError:
        logger.debug(f"{naive} does not exist in {tz}")
        return None
    except OverflowError:
        return None


def timezone_choices(current: str, limit: int = 25) -> list[str]:
    """
    Suggest timezone names for a partially typed value.

    Names starting with the typed text come first, then names containing it.
    Common timezones are searched before the full tz database.

    Args:
        current: What the user has typed so far
        limit: Maximum number of suggestions

    Returns:
        Matching timezone names, at most ``limit``
    """
    current_lower = current.lower()
    candidates = COMMON_TIMEZONES + [
        tz for tz in pytz.common_timezones if tz not in COMMON_TIMEZONES
    ]
    starts = [tz for tz in candidates if tz.lower().startswith(current_lower)]
    contains = [
        tz for tz in candidates
        if current_lower in tz.lower() and tz not in starts
    ]
    return (starts + contains)[:limit]
