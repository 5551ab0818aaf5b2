from dataclasses import dataclass, field
from typing import List, Optional

from ramplo.schemas.day_plan_schema import DayPlan


@dataclass(frozen=True)
class TimeEstimate:
    total_minutes: int

    @property
    def hours(self) -> int:
        return self.total_minutes // 60

    @property
    def minutes(self) -> int:
        return self.total_minutes % 60

    def __str__(self) -> str:
        if self.hours > 0:
            return f"{self.hours}h {self.minutes}m"
        return f"{self.minutes}m"


@dataclass(frozen=True)
class TaskLine:
    title: str
    category: str
    duration: str
    completed: bool = False


@dataclass(frozen=True)
class DayView:
    title: str
    week_theme: str
    objective: str
    estimate: str
    extra_time_activity: str
    tasks: List[TaskLine] = field(default_factory=list)


def compute_total_estimate(day: DayPlan) -> TimeEstimate:
    return TimeEstimate(sum(task.estimated_minutes for task in day.tasks))


def present_day(day: Optional[DayPlan]) -> Optional[DayView]:
    if day is None:
        return None

    return DayView(
        title=f"Week {day.week}, Day {day.day}",
        week_theme=day.week_theme,
        objective=day.objective,
        estimate=str(compute_total_estimate(day)),
        extra_time_activity=day.extra_time_activity,
        tasks=[
            TaskLine(
                title=task.title,
                category=task.category.value,
                duration=f"{task.estimated_minutes} min",
                completed=task.completed,
            )
            for task in day.tasks
        ],
    )


def render_day(day: Optional[DayPlan]) -> str:
    view = present_day(day)
    if view is None:
        return ""

    lines = [
        view.title,
        view.week_theme,
        "",
        "Today's Objective",
        view.objective,
        "",
        f"Estimated time: {view.estimate}",
        "",
        "Daily Tasks",
    ]
    for task in view.tasks:
        mark = "x" if task.completed else " "
        lines.append(f"[{mark}] {task.title} ({task.category}, {task.duration})")
    lines += ["", "If You Have Extra Time", view.extra_time_activity]
    return "\n".join(lines)
