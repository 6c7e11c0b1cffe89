"""Persistent storage of habits and store-level operations."""

from __future__ import annotations

import json
import os
import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from .habit import Habit, _resolve, new_habit


class Store(ABC):
    """Storage for tracked habits."""

    @abstractmethod
    def log(self, habit_name: str, now: datetime | None = None) -> str:
        """Log activity for a habit and return a message."""

    @abstractmethod
    def get_all(self) -> list[Habit]:
        """Return all tracked habits."""

    @abstractmethod
    def save(self) -> None:
        """Persist the store."""


def _parse_time(text: str) -> datetime:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        raise ValueError(f"date {text!r} has no time zone")
    return moment


def _format_time(moment: datetime) -> str:
    text = moment.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _habit_from_json(value: object) -> Habit:
    if not isinstance(value, dict):
        raise ValueError("habit must be a JSON object")
    streak = value.get("streak", 0)
    if isinstance(streak, bool) or not isinstance(streak, int):
        raise ValueError("habit streak must be an integer")
    return Habit(
        name=str(value.get("name", "")),
        date=_parse_time(value["date"]) if "date" in value else datetime(1, 1, 1, tzinfo=timezone.utc),
        streak=streak,
    )


def _habit_to_json(habit: Habit) -> dict:
    return {"name": habit.name, "date": _format_time(habit.date), "streak": habit.streak}


class FileStore(Store):
    """Habits kept in a JSON file, keyed by name.

    Changes are held in memory until :meth:`save` is called.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self.data: dict[str, Habit] = {}
        self._lock = threading.RLock()
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return
        if raw:
            document = json.loads(raw)
            if not isinstance(document, dict):
                raise ValueError("store must hold a JSON object")
            self.data = {key: _habit_from_json(value) for key, value in document.items()}

    def save(self) -> None:
        """Write the store to its file, creating its directory if needed."""
        with self._lock:
            payload = json.dumps(
                {key: _habit_to_json(habit) for key, habit in self.data.items()},
                sort_keys=True,
                separators=(",", ":"),
            )
            self.path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)

    def get_all(self) -> list[Habit]:
        """Return copies of all habits sorted by name."""
        with self._lock:
            habits = [replace(h) for h in self.data.values()]
        return sorted(habits, key=lambda h: h.name)

    def get(self, habit_name: str) -> Habit | None:
        """Return a copy of the named habit, or None if it is not tracked."""
        with self._lock:
            habit = self.data.get(habit_name)
            return replace(habit) if habit is not None else None

    def add(self, habit: Habit) -> None:
        """Put a habit in the store; call :meth:`save` to persist it."""
        with self._lock:
            self.data[habit.name] = replace(habit)

    def log(self, habit_name: str, now: datetime | None = None) -> str:
        """Record the named habit, starting to track it if it is new."""
        moment = _resolve(now)
        habit = self.get(habit_name)
        if habit is None:
            habit = new_habit(habit_name, moment)
            message = habit.start(moment)
        else:
            _, message = habit.record(moment)
        self.add(habit)
        return message


def check(store: Store, now: datetime | None = None) -> str:
    """Report on every habit in the store."""
    habits = store.get_all()
    if not habits:
        return "You are not tracking any habit yet.\n"
    moment = _resolve(now)
    return "".join(habit.check(moment)[1] for habit in habits)


def record(store: Store, habit_name: str, now: datetime | None = None) -> str:
    """Log the named habit and save the store."""
    message = store.log(habit_name, now)
    store.save()
    return message


def data_dir() -> str:
    """Directory that holds the store: XDG_DATA_HOME, else home, else '.'."""
    path = os.environ.get("XDG_DATA_HOME", "")
    if path:
        return path
    try:
        return str(Path.home())
    except (RuntimeError, KeyError):
        return "."