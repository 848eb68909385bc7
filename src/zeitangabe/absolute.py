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
Absolute Date/Time Grammar

Calendar dates ("10.11.2025", "Am 10.11.2025"), clock times ("14:00",
"um 9:30:15 Uhr", "10 Uhr") and the day words Heute/Morgen/Übermorgen,
combined in either order and resolved to a UTC instant in the reference
timezone. Anything that does not lie strictly after "now" is rejected.
"""

from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

import pytz

from .combinators import (
    I32_MAX,
    U32_MAX,
    Parser,
    alt,
    integer,
    literal,
    literal_ci,
    map_fallible,
    map_value,
    optional,
    sequence,
)
from .timezones import localize_latest

SPACE = literal(" ")
UHR = literal_ci(" Uhr")


def _make_date(parsed) -> Optional[date]:
    day, _, month, _, year = parsed
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _make_time(parsed) -> Optional[time]:
    hour, minute, second = parsed
    try:
        return time(hour, minute, second)
    except ValueError:
        return None


# day.month.year
date_parser = map_fallible(
    sequence(
        integer(U32_MAX),
        literal("."),
        integer(U32_MAX),
        literal("."),
        integer(I32_MAX),
    ),
    _make_date,
)

full_date = map_value(
    sequence(optional(literal_ci("Am ")), date_parser),
    lambda parsed: parsed[1],
)

_clock = map_value(
    sequence(
        integer(U32_MAX),
        literal(":"),
        integer(U32_MAX),
        optional(sequence(literal(":"), integer(U32_MAX))),
        optional(UHR),
    ),
    lambda parsed: (parsed[0], parsed[2], parsed[3][1] if parsed[3] else 0),
)

# "10 Uhr": the hour on its own needs the Uhr
_full_hour = map_value(
    sequence(integer(U32_MAX), UHR),
    lambda parsed: (parsed[0], 0, 0),
)

time_parser = map_fallible(alt(_clock, _full_hour), _make_time)

full_time = map_value(
    sequence(optional(literal_ci("Um ")), time_parser),
    lambda parsed: parsed[1],
)


def _add_days(day: date, count: int) -> Optional[date]:
    try:
        return day + timedelta(days=count)
    except OverflowError:
        return None


def special_words(tz: tzinfo, now: datetime) -> Parser:
    """Heute, Morgen and Übermorgen as calendar dates in ``tz``."""
    today = now.astimezone(tz).date()
    return alt(
        map_value(literal_ci("Heute"), lambda _: today),
        map_fallible(literal_ci("Morgen"), lambda _: _add_days(today, 1)),
        map_fallible(literal_ci("Übermorgen"), lambda _: _add_days(today, 2)),
    )


def resolve_future(
    tz: tzinfo, now: datetime, day: date, clock: time
) -> Optional[datetime]:
    """
    Resolve a wall-clock date and time in ``tz`` to a UTC instant after ``now``.

    Args:
        tz: Reference timezone
        now: The current instant (timezone-aware)
        day: Calendar date in ``tz``
        clock: Time of day in ``tz``

    Returns:
        The UTC instant, or None if the time falls into a DST gap, is out of
        range, or is not strictly later than ``now``
    """
    local = localize_latest(tz, datetime.combine(day, clock))
    if local is None:
        return None
    try:
        instant = local.astimezone(pytz.utc)
    except OverflowError:
        return None
    if instant <= now:
        return None
    return instant


def absolute(tz: tzinfo, now: datetime) -> Parser:
    """Date or day word plus clock time, in either order."""
    special = special_words(tz, now)
    pairs = alt(
        map_value(sequence(full_date, SPACE, full_time), lambda p: (p[0], p[2])),
        map_value(sequence(full_time, SPACE, full_date), lambda p: (p[2], p[0])),
        map_value(sequence(special, SPACE, full_time), lambda p: (p[0], p[2])),
        map_value(sequence(full_time, SPACE, special), lambda p: (p[2], p[0])),
    )
    return map_fallible(pairs, lambda pair: resolve_future(tz, now, *pair))
