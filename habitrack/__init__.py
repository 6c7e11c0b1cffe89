"""Habit tracking: streaks and day counting, a JSON file store and a command line tool."""

__version__ = "0.1.0"
__all__ = ["habit", "store", "cli"]