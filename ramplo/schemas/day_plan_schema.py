from pydantic import BaseModel, Field
from typing import List, Optional

from ramplo.schemas.task_schema import TaskCategory


class DayTask(BaseModel):
    id: Optional[str] = None
    title: str
    description: Optional[str] = None
    category: TaskCategory
    estimated_minutes: int = Field(..., ge=0)
    completed: bool = False


class DayPlan(BaseModel):
    day: int = Field(..., ge=1, le=5)
    week: int = Field(..., ge=1)
    objective: str
    week_theme: str
    extra_time_activity: str
    tasks: List[DayTask] = []
