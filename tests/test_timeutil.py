import re
from datetime import datetime

import pytest

from shimkit.timeutil import (
    STD_COMPACT_DATE_LAYOUT,
    STD_DATE_TIME_LAYOUT,
    StdDateStr,
    StdDateTimeStr,
    get_time_version,
    timestamp_to_layout,
)


def test_get_time_version_shape():
    version = get_time_version()
    match = re.fullmatch(r"v(\d{14})_(\d+)", version)
    assert match
    assert int(match.group(2)) < 1_000_000_000
    assert datetime.strptime(match.group(1), "%Y%m%d%H%M%S").year >= 2020


def test_date_time_str_get_time():
    expected = datetime(2023, 1, 1, 0, 0, 1).astimezone()
    assert StdDateTimeStr("2023-01-01 00:00:01").get_time() == expected


def test_date_str_get_time():
    expected = datetime(2023, 1, 2).astimezone()
    assert StdDateStr("2023-01-02").get_time() == expected


@pytest.mark.parametrize(
    "text", ["", "2023-1-01 00:00:01", "2023-13-01 00:00:01", "2023-01-01", "garbage"]
)
def test_date_time_str_invalid(text):
    assert StdDateTimeStr(text).get_time() is None


@pytest.mark.parametrize("text", ["", "2023-1-2", "2023-02-30", "2023-01-01 00:00:00"])
def test_date_str_invalid(text):
    assert StdDateStr(text).get_time() is None


def test_timestamp_to_layout_round_trip():
    timestamp = 1_700_000_000
    text = timestamp_to_layout(timestamp, STD_DATE_TIME_LAYOUT)
    parsed = StdDateTimeStr(text).get_time()
    assert parsed.timestamp() == timestamp


def test_timestamp_to_layout_compact_date():
    timestamp = 1_700_000_000
    compact = timestamp_to_layout(timestamp, STD_COMPACT_DATE_LAYOUT)
    full = timestamp_to_layout(timestamp, STD_DATE_TIME_LAYOUT)
    assert re.fullmatch(r"\d{8}", compact)
    assert compact == full[:10].replace("-", "")