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
Time Parser CLI

Command-line tool for trying out time expressions.

Usage:
    # Parse an expression in the default timezone
    python scripts/parse_time_cli.py parse "Morgen um 10 Uhr"

    # Parse in a specific timezone
    python scripts/parse_time_cli.py parse "10.11.2025 14:00" --timezone Europe/Berlin

    # Parse against a fixed reference time
    python scripts/parse_time_cli.py parse "in 2 Tagen um 9:00" --now 2025-03-28T12:00:00+00:00

    # Suggest timezone names
    python scripts/parse_time_cli.py timezones Europe/B
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from zeitangabe import (
    TimeParseError,
    ZeitConfig,
    discord_timestamp,
    get_timezone,
    parse_time_expression,
    timezone_choices,
)

load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def show_parse(expr: str, timezone: str, now: datetime, config: ZeitConfig) -> int:
    """Print the parsed instant, or the diagnostic when parsing fails."""
    try:
        parsed = parse_time_expression(expr, timezone, now=now, config=config)
    except TimeParseError as e:
        print(e)
        print(" " * (e.offset + len("Fehler beim parsen der Zeit: ")) + "^")
        return 1

    local = parsed.instant.astimezone(get_timezone(parsed.timezone))
    print(f"Input:    {parsed.original_input}")
    print(f"Timezone: {parsed.timezone}")
    print(f"UTC:      {parsed.instant.isoformat()}")
    print(f"Local:    {local.strftime('%d.%m.%Y %H:%M:%S %Z')}")
    print(f"Discord:  {discord_timestamp(parsed.instant)}")
    return 0


def show_timezones(current: str, config: ZeitConfig) -> int:
    choices = timezone_choices(current, config.autocomplete_limit)
    if not choices:
        print(f"No timezones matching '{current}'")
        return 1
    for name in choices:
        print(name)
    return 0


def main():
    parser = argparse.ArgumentParser(description="German time expression parser CLI")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a time expression")
    parse_parser.add_argument("expression", help="Time expression, e.g. 'in 5m'")
    parse_parser.add_argument(
        "--timezone", "-t", help="IANA timezone (default: ZEIT_DEFAULT_TIMEZONE)"
    )
    parse_parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        help="Reference time in ISO format (default: current time)",
    )

    # timezones command
    tz_parser = subparsers.add_parser("timezones", help="Suggest timezone names")
    tz_parser.add_argument("current", nargs="?", default="", help="Typed prefix")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    config = ZeitConfig.from_env()

    if args.command == "parse":
        sys.exit(show_parse(args.expression, args.timezone, args.now, config))
    elif args.command == "timezones":
        sys.exit(show_timezones(args.current, config))


if __name__ == "__main__":
    main()
