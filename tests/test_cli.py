import io
from datetime import datetime

import pytest

from habitrack.cli import main, run
from habitrack.store import FileStore


def at(text):
    return datetime.fromisoformat(text.replace("Z", "+00:00"))


@pytest.fixture
def home(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    return tmp_path


def invoke(args, now=None):
    out, err = io.StringIO(), io.StringIO()
    code = run(args, out, err, now)
    return code, out.getvalue(), err.getvalue()


def test_no_args_reports_empty_store(home):
    code, out, err = invoke([])
    assert code == 0
    assert out == "You are not tracking any habit yet.\n"
    assert err == ""


def test_logging_over_two_days(home):
    code, out, _ = invoke(["jog"], at("2022-09-01T03:00:00Z"))
    assert code == 0
    assert out == "Good luck with your new habit 'jog'. Don't forget to do it tomorrow.\n"
    assert (home / ".habits.json").exists()

    code, out, _ = invoke(["jog"], at("2022-09-02T03:00:00Z"))
    assert code == 0
    assert out == "Nice work: you've done the habit 'jog' for 2 days in a row now. Keep it up!\n"

    code, out, _ = invoke([], at("2022-09-02T10:00:00Z"))
    assert code == 0
    assert out == "You're currently on a 2-day streak for 'jog'. Stick to it!\n"


def test_broken_streak_is_reported(home):
    invoke(["read"], at("2022-09-01T03:00:00Z"))
    code, out, _ = invoke([], at("2022-09-05T03:00:00Z"))
    assert code == 0
    assert out == (
        "It's been 4 days since you did 'read'. It's ok, life happens. "
        "Get back on that horse today!\n"
    )


def test_empty_name_fails(home):
    code, out, err = invoke([""])
    assert code == 1
    assert out == ""
    assert err == "name cannot be empty"


def test_corrupt_store_fails(home):
    (home / ".habits.json").write_text("invalid data")
    code, out, err = invoke([])
    assert code == 1
    assert out == ""
    assert err != "" and "invalid" not in out


def test_unknown_flag_is_reported_and_ignored(home):
    code, out, err = invoke(["-x"])
    assert code == 0
    assert err == "flag provided but not defined: -x\nUsage of habit:\n"
    assert out == "You are not tracking any habit yet.\n"


def test_unknown_flag_then_habit_records_habit(home):
    code, out, _ = invoke(["-x", "jog"], at("2022-09-01T03:00:00Z"))
    assert code == 0
    assert out == "Good luck with your new habit 'jog'. Don't forget to do it tomorrow.\n"


def test_help_flag_prints_usage(home):
    code, _, err = invoke(["-h"])
    assert code == 0
    assert err == "Usage of habit:\n"


def test_bad_flag_syntax(home):
    _, _, err = invoke(["---x"])
    assert err == "bad flag syntax: ---x\nUsage of habit:\n"


def test_double_dash_ends_flags(home):
    code, out, err = invoke(["--", "-x"], at("2022-09-01T03:00:00Z"))
    assert code == 0
    assert err == ""
    assert out == "Good luck with your new habit '-x'. Don't forget to do it tomorrow.\n"
    assert [h.name for h in FileStore(home / ".habits.json").get_all()] == ["-x"]


def test_main_records_habit(home, capsys):
    assert main(["walk"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Good luck with your new habit 'walk'. Don't forget to do it tomorrow.\n"
    assert [h.name for h in FileStore(home / ".habits.json").get_all()] == ["walk"]