from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

from ramplo.schemas.progress_schema import UserProgress


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., validation_alias=AliasChoices("_id", "id"))
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_active: bool = True
    is_morty_user: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserProfile(BaseModel):
    user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    experience_level: Optional[str] = None
    focus: List[str] = []
    markets: List[str] = []
    time_available_weekday: Optional[str] = None
    goals: Optional[str] = None
    onboarding_completed: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfileCreate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    experience_level: Optional[str] = None
    focus: List[str] = []
    markets: List[str] = Field(default=[], max_length=4)
    time_available_weekday: Optional[str] = None
    goals: Optional[str] = None


class AuthUserResponse(BaseModel):
    user: User
    profile: Optional[UserProfile] = None
    progress: Optional[UserProgress] = None
