# habitrack

A small habit tracker. Log an activity once a day and it keeps count of your
streak, the number of consecutive days you have done it. Miss more than a day
and the next log starts a fresh streak.

## Installation

```
pip install habitrack
```

## Command line

Record that you did a habit today:

```
$ habit jog
Good luck with your new habit 'jog'. Don't forget to do it tomorrow.
```

The next day:

```
$ habit jog
Nice work: you've done the habit 'jog' for 2 days in a row now. Keep it up!
```

If more than one day has passed since you last logged it:

```
$ habit jog
You last did the habit 'jog' 4 days ago, so you're starting a new streak today. Good luck!
```

Logging the same habit twice on one day prints nothing and leaves the streak
unchanged.

Run `habit` with no arguments to see how all your habits are going, one line
per habit, sorted by name:

```
$ habit
You're currently on a 2-day streak for 'jog'. Stick to it!
It's been 4 days since you did 'read'. It's ok, life happens. Get back on that horse today!
```

With no habits yet it prints `You are not tracking any habit yet.`

Only the first argument is used as the habit name; quote names with spaces
(`habit "play piano"`). The command defines no options: `-h` prints a usage
line, and any other leading `-flag` is reported on standard error and skipped.
`--` ends option handling.

Habits are kept in a JSON file named `.habits.json`. It is placed in
`$XDG_DATA_HOME` when that variable is set, otherwise in your home directory,
and in the current directory if no home directory can be found. The directory
is created when first needed.

The command exits with status 1 and writes the error to standard error when
the store file cannot be read or holds invalid data, when it cannot be
written, or when the habit name is empty.

Days are counted in UTC.

## Library

The same building blocks are available from Python. Every function and method
that depends on the current time takes an optional `now` argument (a
`datetime`); naive datetimes are taken to be UTC.

```python
from datetime import datetime, timezone

from habitrack.habit import new_habit
from habitrack.store import FileStore, check, record

now = datetime(2022, 9, 1, 3, 0, tzinfo=timezone.utc)

store = FileStore("/tmp/habits.json")
print(record(store, "read", now))   # logs and saves
print(check(store, now))            # one line per habit, sorted by name

habit = new_habit("jog", now)
print(habit.check(now))             # (days since last logged, message)
```

### `habitrack.habit`

- `Habit` is a dataclass with `name`, `date` (midnight UTC of the day it was
  last logged) and `streak`.
  - `start(now)` begins a new one-day streak and returns a greeting.
  - `check(now)` returns the number of days since the habit was last logged
    and a report.
  - `record(now)` continues the streak (one day later), restarts it (more than
    one day later) or does nothing (same day, empty message); it returns the
    streak length and the message.
- `new_habit(name, now)` creates a habit dated today with a streak of 1;
  an empty name raises `ValueError`.
- `round_date_to_day(t)` truncates a moment to midnight UTC.
- `day_diff(start, stop)` is the absolute number of days between two moments.

### `habitrack.store`

- `Store` is the abstract interface: `log`, `get_all` and `save`.
- `FileStore(path)` keeps habits in a JSON file keyed by habit name. A missing
  or empty file gives an empty store; invalid JSON or malformed entries raise
  an error on opening. Its habits are in the `data` dict.
  - `get(habit_name)` returns a copy of the habit, or `None`.
  - `add(habit)` stores a copy of the habit.
  - `log(habit_name, now)` records the habit, starting it if it is new, and
    returns the message.
  - `get_all()` returns copies of all habits sorted by name.
  - `save()` writes the file (mode 0600), creating its directory if needed.
  Changes stay in memory until `save()` is called.
- `check(store, now)` reports on every habit in a store.
- `record(store, habit_name, now)` logs a habit and saves the store.
- `data_dir()` gives the default storage directory described above.

### `habitrack.cli`

- `run(argv, out, err, now)` runs the command against given streams and
  returns the exit status.
- `main(argv)` runs it with the process's streams; the `habit` command calls it.

## What it does not do

There is no way to rename or delete a habit, to log an activity for a past
day, or to keep more than one streak history per habit; each habit holds only
its last logged day and current streak.

## Running the tests

```
pip install habitrack[test]
pytest
```