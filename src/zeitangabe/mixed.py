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
Mixed Grammar

A day/week offset combined with a clock time, e.g. "in 2 Tagen um 9:00" or
"um 18:00 in 1 Woche". The offset moves "now" forward, the clock time then
replaces the time of day on the resulting local date.
"""

from datetime import datetime, time, tzinfo
from typing import Optional

from .absolute import SPACE, full_time, resolve_future
from .combinators import Parser, alt, map_fallible, map_value, sequence
from .duration import Duration
from .relative import full_part


def at_time_after(
    tz: tzinfo, now: datetime, offset: Duration, clock: time
) -> Optional[datetime]:
    """
    Shift ``now`` by ``offset`` and set the local time of day to ``clock``.

    Returns None if the shift overflows or the resulting local time does not
    exist in ``tz``. The result must lie after ``now``.
    """
    shifted = offset.add_to(now)
    if shifted is None:
        return None
    try:
        day = shifted.astimezone(tz).date()
    except OverflowError:
        return None
    return resolve_future(tz, now, day, clock)


def mixed(tz: tzinfo, now: datetime) -> Parser:
    pairs = alt(
        map_value(sequence(full_part, SPACE, full_time), lambda p: (p[0], p[2])),
        map_value(sequence(full_time, SPACE, full_part), lambda p: (p[2], p[0])),
    )
    return map_fallible(pairs, lambda pair: at_time_after(tz, now, *pair))
