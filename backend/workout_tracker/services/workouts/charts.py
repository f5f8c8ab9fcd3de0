"""
Chart payloads for the stats view.

Shapes match what the mobile client's pie and bar chart components consume.
"""
from typing import Any, Dict, List, Sequence

from workout_tracker.services.workouts.aggregator import DayTotal

TYPE_COLORS = [
    "#3fb09b",
    "#eaa451",
    "#3f83b0",
    "#eadc51",
    "#3f50b0",
    "#663fb0",
    "#c7ea51",
    "#b03f79",
    "#3fb06c",
    "#ea6d51",
]
LEGEND_FONT_COLOR = "#7F7F7F"
LEGEND_FONT_SIZE = 12


def type_chart_data(counts: Dict[str, int]) -> List[Dict[str, Any]]:
    """One pie slice per workout type, colors cycling through the palette."""
    return [
        {
            "name": workout_type,
            "count": count,
            "color": TYPE_COLORS[index % len(TYPE_COLORS)],
            "legendFontColor": LEGEND_FONT_COLOR,
            "legendFontSize": LEGEND_FONT_SIZE,
        }
        for index, (workout_type, count) in enumerate(counts.items())
    ]


def duration_chart_data(day_totals: Sequence[DayTotal]) -> Dict[str, Any]:
    """Bar chart labels and a single dataset of minutes per day."""
    return {
        "labels": [d.label for d in day_totals],
        "datasets": [
            {"data": [d.total_minutes for d in day_totals]},
        ],
    }
