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
Time Parser Module

Parses German time expressions into an absolute UTC instant. Three forms
are tried in order:

- Mixed: "in 2 Tagen um 9:00", "18:00 in 1 Woche"
- Absolute: "10.11.2025 14:00", "Morgen um 10 Uhr", "14:00 übermorgen"
- Relative: "5m", "1h30m", "in 1 Tag und 2 Stunden"

The whole input has to be consumed. On failure the unparsed suffix is
reported so the caller can point at the offending text.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Optional, Union

import pytz

from .absolute import absolute
from .combinators import Err, Ok, Result, alt, map_fallible
from .config import ZeitConfig
from .formatting import format_parse_error
from .mixed import mixed
from .relative import full_rel
from .timezones import get_timezone, validate_timezone

logger = logging.getLogger("zeitangabe.parser")


@dataclass
class ParsedTime:
    """Result of parsing a time expression."""

    instant: datetime  # UTC timestamp
    original_input: str
    timezone: str


class TimeParseError(Exception):
    """Raised when a time expression cannot be parsed."""

    def __init__(self, text: str, remainder: str):
        self.text = text
        self.remainder = remainder
        super().__init__(format_parse_error(text, remainder))

    @property
    def offset(self) -> int:
        """Position of the first character that could not be parsed."""
        return len(self.text) - len(self.remainder)

    @property
    def consumed(self) -> str:
        return self.text[: self.offset]


def _as_utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return pytz.utc.localize(now)
    return now.astimezone(pytz.utc)


def parse(text: str, tz: Union[str, tzinfo], now: datetime) -> Result:
    """
    Parse ``text`` against the reference timezone ``tz`` at instant ``now``.

    Never raises on malformed input.

    Args:
        text: The time expression
        tz: Reference timezone, IANA name or tzinfo
        now: The current instant; naive values are taken as UTC

    Returns:
        Ok with the UTC instant, or Err with the unparsed suffix of ``text``
    """
    tz = get_timezone(tz)
    now = _as_utc(now)
    relative = map_fallible(full_rel, lambda duration: duration.add_to(now))
    result = alt(mixed(tz, now), absolute(tz, now), relative)(text)
    if isinstance(result, Ok) and result.rest:
        return Err(result.rest)
    return result


def parse_time(
    text: str, timezone: Union[str, tzinfo], now: Optional[datetime] = None
) -> datetime:
    """
    Parse a time expression into a UTC instant.

    Args:
        text: The time expression
        timezone: IANA timezone name or pytz timezone
        now: Reference instant, sampled from the clock if omitted

    Returns:
        Timezone-aware UTC datetime strictly after ``now``

    Raises:
        TimeParseError: If the expression cannot be parsed
        pytz.UnknownTimeZoneError: If the timezone name is unknown
    """
    tz = get_timezone(timezone)
    if now is None:
        now = datetime.now(pytz.utc)

    result = parse(text, tz, now)
    if isinstance(result, Err):
        logger.debug(f"Could not parse '{text}' in {tz}, stopped at '{result.rest}'")
        raise TimeParseError(text, result.rest)

    logger.debug(f"Parsed '{text}' in {tz} as {result.value.isoformat()}")
    return result.value


def parse_time_expression(
    expr: str,
    user_timezone: Optional[str] = None,
    now: Optional[datetime] = None,
    config: Optional[ZeitConfig] = None,
) -> ParsedTime:
    """
    Parse a time expression into a structured result.

    Supports:
    - Relative: "5m", "1h30m", "2 Stunden", "in 1 Tag und 3 Stunden"
    - Absolute: "10.11.2025 14:00", "Am 10.11.2025 um 14:00 Uhr"
    - Day words: "Morgen um 10 Uhr", "14:00 übermorgen"
    - Mixed: "in 2 Tagen um 9:00"

    Args:
        expr: The time expression to parse
        user_timezone: Server's timezone (IANA name); the configured
            default is used when missing or invalid
        now: Reference instant, sampled from the clock if omitted
        config: Parser configuration, read from the environment if omitted

    Returns:
        ParsedTime with the UTC instant

    Raises:
        TimeParseError: If the expression cannot be parsed
    """
    if config is None:
        config = ZeitConfig.from_env()

    if not expr:
        raise TimeParseError(expr, expr)

    if user_timezone is None:
        user_timezone = config.default_timezone
    elif not validate_timezone(user_timezone):
        logger.warning(
            f"Invalid timezone '{user_timezone}', falling back to {config.default_timezone}"
        )
        user_timezone = config.default_timezone

    instant = parse_time(expr, user_timezone, now)

    return ParsedTime(
        instant=instant,
        original_input=expr,
        timezone=user_timezone,
    )
