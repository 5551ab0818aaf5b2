# tests/test_day_presenter.py

from __future__ import annotations

from ramplo.client.day_presenter import (
    compute_total_estimate,
    present_day,
    render_day,
)
from ramplo.schemas.day_plan_schema import DayPlan, DayTask


def make_day(*minutes: int) -> DayPlan:
    return DayPlan(
        day=2,
        week=1,
        objective="Start building your local referral network.",
        week_theme="Foundation Setup",
        extra_time_activity="Schedule two coffee meetings.",
        tasks=[
            DayTask(title=f"Task {i}", category="networking", estimated_minutes=m)
            for i, m in enumerate(minutes, 1)
        ],
    )


def test_estimate_with_hours() -> None:
    estimate = compute_total_estimate(make_day(25, 40))
    assert estimate.total_minutes == 65
    assert (estimate.hours, estimate.minutes) == (1, 5)
    assert str(estimate) == "1h 5m"


def test_estimate_under_an_hour_has_no_hour_component() -> None:
    assert str(compute_total_estimate(make_day(10, 15))) == "25m"


def test_empty_day_shows_zero_minutes() -> None:
    assert str(compute_total_estimate(make_day())) == "0m"


def test_whole_hours_still_show_minutes() -> None:
    assert str(compute_total_estimate(make_day(60, 45, 15))) == "2h 0m"


def test_estimate_is_order_independent() -> None:
    assert compute_total_estimate(make_day(5, 70, 30)) == compute_total_estimate(
        make_day(30, 5, 70)
    )


def test_absent_day_renders_nothing() -> None:
    assert present_day(None) is None
    assert render_day(None) == ""


def test_view_keeps_authoring_order() -> None:
    view = present_day(make_day(30, 10, 20))

    assert view is not None
    assert view.title == "Week 1, Day 2"
    assert view.estimate == "1h 0m"
    assert [t.title for t in view.tasks] == ["Task 1", "Task 2", "Task 3"]
    assert view.tasks[1].duration == "10 min"
    assert view.tasks[0].category == "networking"


def test_render_contains_sections() -> None:
    text = render_day(make_day(10, 15))

    assert text.startswith("Week 1, Day 2\nFoundation Setup")
    assert "Estimated time: 25m" in text
    assert "[ ] Task 1 (networking, 10 min)" in text
    assert text.endswith("If You Have Extra Time\nSchedule two coffee meetings.")
