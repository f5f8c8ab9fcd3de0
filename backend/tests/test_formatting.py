"""
Tests for duration, date and label formatting, and chart payloads.
"""
from datetime import date
from zoneinfo import ZoneInfo

import pytest

from workout_tracker.services.workouts import DayTotal
from workout_tracker.services.workouts.charts import (
    TYPE_COLORS,
    duration_chart_data,
    type_chart_data,
)
from workout_tracker.services.workouts.formatting import (
    format_day_label,
    format_duration,
    format_item_duration,
    format_workout_date,
    ordinal,
    resolve_timezone,
)

from fixtures.workout_fixtures import SWIMMING_DATE, WALKING_DATE

UTC = ZoneInfo("UTC")


class TestDurations:

    @pytest.mark.parametrize("minutes,expected", [
        (0, "0 h 0 m"),
        (45, "0 h 45 m"),
        (60, "1 h 0 m"),
        (92, "1 h 32 m"),
        (1501, "25 h 1 m"),
    ])
    def test_summary_duration(self, minutes, expected):
        assert format_duration(minutes) == expected

    def test_item_duration(self):
        assert format_item_duration(92) == "1 hr 32 min"
        assert format_item_duration(32) == "0 hr 32 min"


class TestDates:

    @pytest.mark.parametrize("n,expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
        (11, "11th"), (12, "12th"), (13, "13th"),
        (21, "21st"), (22, "22nd"), (23, "23rd"), (30, "30th"), (31, "31st"),
    ])
    def test_ordinal(self, n, expected):
        assert ordinal(n) == expected

    def test_day_label(self):
        assert format_day_label(date(2025, 1, 2)) == "Jan 2nd"
        assert format_day_label(date(2024, 10, 11)) == "Oct 11th"

    def test_workout_date(self):
        assert format_workout_date(SWIMMING_DATE, UTC) == "Friday, Sep 27th, 2024, 03:05 AM"
        assert format_workout_date(WALKING_DATE, UTC) == "Tuesday, Sep 24th, 2024, 03:09 AM"

    def test_workout_date_afternoon_in_local_zone(self):
        tz = ZoneInfo("America/Los_Angeles")
        assert format_workout_date(SWIMMING_DATE, tz) == "Thursday, Sep 26th, 2024, 08:05 PM"

    def test_resolve_timezone(self):
        assert resolve_timezone(None) is None
        assert resolve_timezone("") is None
        assert resolve_timezone("Europe/Paris") == ZoneInfo("Europe/Paris")

    def test_resolve_unknown_timezone(self):
        with pytest.raises(ValueError, match="Invalid timezone"):
            resolve_timezone("Mars/Olympus_Mons")


class TestCharts:

    def test_type_chart_data(self):
        slices = type_chart_data({"Running": 2, "Yoga": 1})

        assert slices == [
            {"name": "Running", "count": 2, "color": "#3fb09b",
             "legendFontColor": "#7F7F7F", "legendFontSize": 12},
            {"name": "Yoga", "count": 1, "color": "#eaa451",
             "legendFontColor": "#7F7F7F", "legendFontSize": 12},
        ]

    def test_type_colors_cycle(self):
        counts = {f"Type {i}": 1 for i in range(len(TYPE_COLORS) + 2)}
        slices = type_chart_data(counts)

        assert slices[len(TYPE_COLORS)]["color"] == TYPE_COLORS[0]
        assert slices[len(TYPE_COLORS) + 1]["color"] == TYPE_COLORS[1]

    def test_duration_chart_data(self):
        totals = [
            DayTotal("Sep 24th", 60, date(2024, 9, 24)),
            DayTotal("Sep 27th", 32, date(2024, 9, 27)),
        ]
        assert duration_chart_data(totals) == {
            "labels": ["Sep 24th", "Sep 27th"],
            "datasets": [{"data": [60, 32]}],
        }

    def test_empty_charts(self):
        assert type_chart_data({}) == []
        assert duration_chart_data([]) == {"labels": [], "datasets": [{"data": []}]}
