from __future__ import annotations

import pytest

from conftest import RAW_LINE, SUMMARY_LINES
from ridelog.models import RideRecord
from ridelog.summary import format_distance, format_duration, format_summary


@pytest.mark.parametrize("seconds,expected", [(0, "0:00:00"), (752, "0:12:32"), (22313, "6:11:53"), (360000, "100:00:00")])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_distance_truncates():
    assert format_distance(3069, "km") == "3.06 km"
    assert format_distance(5, "km") == "0.00 km"


def test_summary_matches_announcer_input():
    assert format_summary(RideRecord.from_csv_line(RAW_LINE)) == SUMMARY_LINES


def test_summary_without_lifetime_totals():
    assert format_summary(RideRecord.from_csv_line(RAW_LINE), ts=False) == SUMMARY_LINES[:5]


def test_summary_drops_zero_fields():
    r = RideRecord.from_csv_line("3060,752,15.27,23.19,0,97080,22313")
    assert "cadence: 0/min" in format_summary(r)
    assert not any(line.startswith("cadence") for line in format_summary(r, zeros=False))


def test_summary_in_miles():
    lines = format_summary(RideRecord.from_csv_line("16093,3600,16.09,32.18,70,160934,7200"), miles=True)
    assert lines == [
        "distance: 9.99 mi",
        "time: 1:00:00",
        "meanspeed: 9.99 mph",
        "maxspeed: 19.99 mph",
        "cadence: 70/min",
        "ts_dist: 99.99 mi",
        "ts_time: 2:00:00",
    ]
