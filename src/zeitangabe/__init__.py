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
German Time Expression Parser

Turns phrases like "in 5m", "Morgen um 10 Uhr" or "10.11.2025 14:00" into
an absolute UTC instant.
"""

from .config import ZeitConfig
from .duration import Duration
from .formatting import discord_timestamp, format_parse_error
from .parser import (
    ParsedTime,
    TimeParseError,
    parse,
    parse_time,
    parse_time_expression,
)
from .timezones import (
    COMMON_TIMEZONES,
    get_timezone,
    localize_latest,
    timezone_choices,
    validate_timezone,
)

__all__ = [
    "ZeitConfig",
    "Duration",
    "discord_timestamp",
    "format_parse_error",
    "ParsedTime",
    "TimeParseError",
    "parse",
    "parse_time",
    "parse_time_expression",
    "COMMON_TIMEZONES",
    "get_timezone",
    "localize_latest",
    "timezone_choices",
    "validate_timezone",
]
