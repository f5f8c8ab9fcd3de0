"""
Workout Tracker - log workouts and compute totals and chart data.
"""
__version__ = "1.0.0"
