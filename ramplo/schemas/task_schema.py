from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class TaskCategory(str, Enum):
    ORGANIZATION = "organization"
    BRANDING = "branding"
    NETWORKING = "networking"
    RESEARCH = "research"
    CONTENT = "content"
    ADMIN = "admin"
    STRATEGY = "strategy"
    FOLLOW_UP = "follow-up"
    FOLLOWUP = "followup"
    SOCIAL_MEDIA = "social-media"
    EDUCATION = "education"
    MARKETING = "marketing"
    OUTREACH = "outreach"
    PIPELINE = "pipeline"
    PRACTICE = "practice"


class Task(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., validation_alias=AliasChoices("_id", "id"))
    user_id: str
    title: str
    description: Optional[str] = None
    category: TaskCategory
    estimated_minutes: int = Field(..., ge=0)
    week: int = Field(..., ge=1)
    day: int = Field(..., ge=1)
    position: int = 0
    completed: bool = False
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
