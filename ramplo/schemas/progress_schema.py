from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class UserProgress(BaseModel):
    user_id: str
    start_date: Optional[datetime] = None
    current_week: int = 1
    current_day: int = 1
    tasks_completed: int = 0
    ramp_run_days: int = 0
    applications_submitted: int = 0
    loans_closed: int = 0
    last_activity_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProgressUpdate(BaseModel):
    ramp_run_days: Optional[int] = Field(default=None, ge=0)
    applications_submitted: Optional[int] = Field(default=None, ge=0)
    loans_closed: Optional[int] = Field(default=None, ge=0)
