# tests/test_formatting.py

from datetime import date, datetime, timedelta, timezone

from task_structures import DisplayConfig, TaskNode
from task_structures.formatting import describe_task, format_date, format_value, is_late, parse_date


def test_format_and_parse_date() -> None:
    moment = datetime(2045, 5, 1, 9, 0)

    assert format_date(moment) == "05/01/2045 09:00"
    assert parse_date("05/01/2045 09:00") == moment
    assert parse_date(" 05/01/2045 09:00 ") == moment


def test_format_value() -> None:
    assert format_value(54) == "54"
    assert format_value("Tracy") == "Tracy"
    assert format_value(datetime(2000, 3, 22, 13, 45)) == "03/22/2000 13:45"
    assert format_value(date(2000, 3, 22), "%Y") == "2000"


def test_is_late() -> None:
    now = datetime(2024, 1, 1)

    assert is_late(datetime(2023, 12, 31), now)
    assert not is_late(datetime(2024, 1, 2), now)
    assert not is_late(now, now)


def test_is_late_defaults_to_current_time() -> None:
    aware_past = datetime.now(timezone.utc) - timedelta(days=1)

    assert is_late(datetime(2000, 1, 1))
    assert not is_late(datetime.now() + timedelta(days=365))
    assert is_late(aware_past)


def test_describe_task() -> None:
    now = datetime(2024, 1, 1)
    past = TaskNode(task="Swap Laundry", due_date=datetime(2003, 11, 5, 13, 0))
    future = TaskNode(task="Relax", due_date=datetime(2100, 1, 11, 19, 0))

    assert describe_task(past, now) == "LATE: Swap Laundry, Due: 11/05/2003 13:00"
    assert describe_task(future, now) == "Relax, Due: 01/11/2100 19:00"
    assert describe_task(future, now, DisplayConfig(date_format="%d.%m.%Y")) == "Relax, Due: 11.01.2100"
