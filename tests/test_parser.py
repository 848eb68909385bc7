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

"""Tests for the time expression dispatcher and its public entry points."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest
import pytz

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from zeitangabe import (
    ParsedTime,
    TimeParseError,
    ZeitConfig,
    parse,
    parse_time,
    parse_time_expression,
)
from zeitangabe.combinators import Err, Ok

BERLIN = pytz.timezone("Europe/Berlin")
NOW = datetime(2025, 3, 28, 12, 0, tzinfo=pytz.utc)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=pytz.utc)


class TestRelativeExpressions:
    @pytest.mark.parametrize(
        "text,delta",
        [
            ("5m", timedelta(minutes=5)),
            ("in 5m", timedelta(minutes=5)),
            ("In 5 Minuten", timedelta(minutes=5)),
            ("1h30m", timedelta(minutes=90)),
            ("30m1h", timedelta(minutes=90)),
            ("1h 30m", timedelta(minutes=90)),
            ("1 Tag und 2 Stunden", timedelta(hours=26)),
            ("2 Wochen, 3 Tage", timedelta(days=17)),
            ("45sec", timedelta(seconds=45)),
        ],
    )
    def test_added_to_now(self, text, delta):
        assert parse(text, BERLIN, NOW) == Ok(NOW + delta, "")

    def test_zero_duration_rejected(self):
        assert isinstance(parse("0s", BERLIN, NOW), Err)
        assert isinstance(parse("0h0m0s", BERLIN, NOW), Err)

    def test_duration_overflow_rejected(self):
        assert isinstance(parse("9223372036854775808s", BERLIN, NOW), Err)
        assert isinstance(parse("9223372036854775w", BERLIN, NOW), Err)

    def test_instant_overflow_rejected(self):
        assert isinstance(parse("100000000w", BERLIN, NOW), Err)


class TestAbsoluteExpressions:
    def test_date_time_either_order(self):
        expected = Ok(utc(2025, 11, 10, 13, 0), "")
        assert parse("10.11.2025 14:00", BERLIN, NOW) == expected
        assert parse("14:00 10.11.2025", BERLIN, NOW) == expected

    def test_tomorrow(self):
        assert parse("Morgen um 10 Uhr", BERLIN, NOW) == Ok(utc(2025, 3, 29, 9, 0), "")

    def test_past_rejected(self):
        assert isinstance(parse("10.11.2024 14:00", BERLIN, NOW), Err)
        assert isinstance(parse("Heute um 12:00", BERLIN, NOW), Err)

    def test_gap_and_ambiguity(self):
        assert isinstance(parse("30.03.2025 02:30", BERLIN, NOW), Err)
        assert parse("26.10.2025 02:30", BERLIN, NOW) == Ok(utc(2025, 10, 26, 1, 30), "")


class TestMixedExpressions:
    def test_offset_with_time(self):
        assert parse("in 2 Tagen um 9:00", BERLIN, NOW) == Ok(utc(2025, 3, 30, 7, 0), "")

    def test_mixed_preferred_over_relative(self):
        # The relative grammar alone would stop after "in 2 Tagen"
        assert parse("in 2 Tagen 9:00", BERLIN, NOW) == Ok(utc(2025, 3, 30, 7, 0), "")


class TestFailures:
    def test_trailing_text_is_remainder(self):
        assert parse("5mx", BERLIN, NOW) == Err("x")

    def test_trailing_whitespace_is_remainder(self):
        assert parse("5m ", BERLIN, NOW) == Err(" ")
        assert parse("10.11.2025 14:00 ", BERLIN, NOW) == Err(" ")

    def test_points_at_invalid_time(self):
        assert parse("Morgen um 25:00", BERLIN, NOW) == Err("25:00")

    def test_unknown_word(self):
        assert parse("irgendwann", BERLIN, NOW) == Err("irgendwann")

    def test_empty(self):
        assert parse("", BERLIN, NOW) == Err("")

    def test_very_long_number(self):
        text = "1" * 5000 + "s"
        assert parse(text, BERLIN, NOW) == Err(text)

    def test_rejected_date_reported_where_clock_time_stopped(self):
        # The date parses, then is rejected as a whole; the clock time
        # alternative got further before failing
        assert parse("30.03.2025 02:30", BERLIN, NOW) == Err(".03.2025 02:30")
        assert parse("10.11.2024 14:00", BERLIN, NOW) == Err(".11.2024 14:00")

    def test_remainder_is_suffix(self):
        for text in ["5mx", "Morgen um 25:00", "1h und dann", "10.13.2025 14:00"]:
            result = parse(text, BERLIN, NOW)
            assert isinstance(result, Err)
            assert text.endswith(result.rest)


class TestParseTime:
    def test_uses_given_now(self):
        assert parse_time("5m", "Europe/Berlin", now=NOW) == utc(2025, 3, 28, 12, 5)

    def test_naive_now_taken_as_utc(self):
        assert parse_time("5m", BERLIN, now=datetime(2025, 3, 28, 12, 0)) == utc(
            2025, 3, 28, 12, 5
        )

    def test_now_in_other_zone(self):
        now = NOW.astimezone(BERLIN)
        assert parse_time("1h", "UTC", now=now) == utc(2025, 3, 28, 13, 0)

    def test_samples_clock_when_now_missing(self):
        before = datetime.now(pytz.utc)
        result = parse_time("1h", "Europe/Berlin")
        after = datetime.now(pytz.utc)
        assert before + timedelta(hours=1) <= result <= after + timedelta(hours=1)

    def test_error_details(self):
        with pytest.raises(TimeParseError) as exc_info:
            parse_time("Morgen um 25:00", "Europe/Berlin", now=NOW)
        error = exc_info.value
        assert error.remainder == "25:00"
        assert error.offset == 10
        assert error.consumed == "Morgen um "
        assert str(error) == "Fehler beim parsen der Zeit: Morgen um  --- 25:00"

    def test_unknown_timezone(self):
        with pytest.raises(pytz.UnknownTimeZoneError):
            parse_time("5m", "Mars/Olympus_Mons", now=NOW)

    def test_zoneinfo_timezone(self):
        result = parse_time("Morgen um 10 Uhr", ZoneInfo("Europe/Berlin"), now=NOW)
        assert result == utc(2025, 3, 29, 9, 0)

    def test_stdlib_utc(self):
        result = parse_time("Morgen um 10:00", timezone.utc, now=NOW)
        assert result == utc(2025, 3, 29, 10, 0)

    def test_parse_accepts_timezone_name(self):
        assert parse("Morgen um 10 Uhr", "Europe/Berlin", NOW) == Ok(utc(2025, 3, 29, 9, 0), "")


class TestParseTimeExpression:
    def test_returns_parsed_time(self):
        parsed = parse_time_expression(
            "10.11.2025 14:00", "Europe/Berlin", now=NOW, config=ZeitConfig()
        )
        assert parsed == ParsedTime(
            instant=utc(2025, 11, 10, 13, 0),
            original_input="10.11.2025 14:00",
            timezone="Europe/Berlin",
        )

    def test_default_timezone(self):
        config = ZeitConfig(default_timezone="Asia/Tokyo")
        parsed = parse_time_expression("10.11.2025 14:00", now=NOW, config=config)
        assert parsed.timezone == "Asia/Tokyo"
        assert parsed.instant == utc(2025, 11, 10, 5, 0)

    def test_invalid_timezone_falls_back(self):
        parsed = parse_time_expression(
            "10.11.2025 14:00", "Nowhere/Special", now=NOW, config=ZeitConfig()
        )
        assert parsed.timezone == "CET"
        assert parsed.instant == utc(2025, 11, 10, 13, 0)

    def test_config_from_env(self):
        with patch.dict("os.environ", {"ZEIT_DEFAULT_TIMEZONE": "UTC"}):
            parsed = parse_time_expression("10.11.2025 14:00", now=NOW)
        assert parsed.timezone == "UTC"
        assert parsed.instant == utc(2025, 11, 10, 14, 0)

    def test_empty_expression(self):
        with pytest.raises(TimeParseError):
            parse_time_expression("", "Europe/Berlin", now=NOW, config=ZeitConfig())

    def test_unparsable(self):
        with pytest.raises(TimeParseError) as exc_info:
            parse_time_expression("5mx", "Europe/Berlin", now=NOW, config=ZeitConfig())
        assert exc_info.value.remainder == "x"
