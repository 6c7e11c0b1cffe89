"""Habits, streaks and day arithmetic for habit tracking."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _resolve(now: datetime | None) -> datetime:
    return now if now is not None else _utcnow()


def _as_utc(t: datetime) -> datetime:
    """Return ``t`` in UTC; naive datetimes are taken to be UTC already."""
    if t.tzinfo is None:
        return t.replace(tzinfo=timezone.utc)
    return t.astimezone(timezone.utc)


def round_date_to_day(t: datetime) -> datetime:
    """Truncate ``t`` to midnight UTC of its day."""
    return _as_utc(t).replace(hour=0, minute=0, second=0, microsecond=0)


def day_diff(start: datetime, stop: datetime) -> int:
    """Return the absolute number of whole days between two moments."""
    return abs((round_date_to_day(stop) - round_date_to_day(start)).days)


@dataclass
class Habit:
    """State of a tracked habit.

    ``date`` is the day the habit was last recorded and ``streak`` the
    number of consecutive days it has been recorded.
    """

    name: str
    date: datetime
    streak: int = 1

    def start(self, now: datetime | None = None) -> str:
        """Start a new streak and return a greeting."""
        self._start_new_streak(_resolve(now))
        return (
            f"Good luck with your new habit '{self.name}'. "
            "Don't forget to do it tomorrow.\n"
        )

    def check(self, now: datetime | None = None) -> tuple[int, str]:
        """Return days since the habit was last logged and a report."""
        diff = day_diff(self.date, _resolve(now))
        if diff in (0, 1):
            return diff, (
                f"You're currently on a {self.streak}-day streak for "
                f"'{self.name}'. Stick to it!\n"
            )
        return diff, (
            f"It's been {diff} days since you did '{self.name}'. "
            "It's ok, life happens. Get back on that horse today!\n"
        )

    def record(self, now: datetime | None = None) -> tuple[int, str]:
        """Record activity, continuing or restarting the streak.

        Returns the streak length and a message; the message is empty
        when the habit was already recorded on the same day.
        """
        moment = _resolve(now)
        diff = day_diff(self.date, moment)
        if diff == 0:
            return self.streak, ""
        if diff > 1:
            self._start_new_streak(moment)
            return self.streak, (
                f"You last did the habit '{self.name}' {diff} days ago, "
                "so you're starting a new streak today. Good luck!\n"
            )
        self.date = round_date_to_day(moment)
        self.streak += 1
        return self.streak, (
            f"Nice work: you've done the habit '{self.name}' for "
            f"{self.streak} days in a row now. Keep it up!\n"
        )

    def _start_new_streak(self, moment: datetime) -> None:
        self.date = round_date_to_day(moment)
        self.streak = 1


def new_habit(name: str, now: datetime | None = None) -> Habit:
    """Create a habit logged today with a one-day streak.

    Raises ValueError if ``name`` is empty.
    """
    if not name:
        raise ValueError("name cannot be empty")
    return Habit(name=name, date=round_date_to_day(_resolve(now)), streak=1)