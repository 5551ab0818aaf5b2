from typing import Optional
import logging
import uuid

from fastapi import HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from ramplo.repositories.user_repo import UserRepository
from ramplo.repositories.progress_repo import ProgressRepository
from ramplo.schemas.user_schema import (
    AuthUserResponse,
    ProfileCreate,
    User,
    UserProfile,
)
from ramplo.schemas.progress_schema import UserProgress
from ramplo.utils.util_func import get_current_time, is_morty_email

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.user_repo = UserRepository(db)
        self.progress_repo = ProgressRepository(db)

    async def check_and_create(self, email: str) -> dict:
        """Return the user for ``email``, creating it with a fresh progress record."""
        email = email.strip().lower()
        try:
            existing = await self.user_repo.get_user_by_email(email)
            if existing:
                return {"user": User.model_validate(existing), "new_created": False}

            now = get_current_time()
            user_id = str(uuid.uuid4())
            user_doc = {
                "_id": user_id,
                "email": email,
                "first_name": None,
                "last_name": None,
                "is_active": True,
                "is_morty_user": is_morty_email(email),
                "created_at": now,
                "updated_at": now,
            }
            try:
                await self.user_repo.create_user(user_doc)
            except DuplicateKeyError:
                # Another request created the same e-mail first
                existing = await self.user_repo.get_user_by_email(email)
                return {"user": User.model_validate(existing), "new_created": False}

            # All users start at day 1
            await self.progress_repo.create_progress(
                UserProgress(
                    user_id=user_id,
                    start_date=now,
                    created_at=now,
                    updated_at=now,
                ).model_dump()
            )
            logger.info(
                f"[Users] Created user {user_id} (morty={user_doc['is_morty_user']})"
            )
            return {"user": User.model_validate(user_doc), "new_created": True}
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(
                status_code=500, detail=f"check_and_create error: {str(e)}"
            )

    async def get_auth_user(self, user_id: str) -> AuthUserResponse:
        user = await self.user_repo.get_user_by_id(user_id)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        profile = await self.user_repo.get_profile(user_id)
        progress = await self.progress_repo.get_progress(user_id)
        return AuthUserResponse(
            user=User.model_validate(user),
            profile=UserProfile.model_validate(profile) if profile else None,
            progress=UserProgress.model_validate(progress) if progress else None,
        )

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        doc = await self.user_repo.get_profile(user_id)
        if not doc:
            return None
        return UserProfile.model_validate(doc)

    async def complete_onboarding(
        self, user_id: str, data: ProfileCreate
    ) -> UserProfile:
        if await self.user_repo.get_profile(user_id):
            raise HTTPException(status_code=409, detail="Onboarding already completed")

        now = get_current_time()
        profile = UserProfile(
            user_id=user_id,
            **data.model_dump(),
            onboarding_completed=True,
            created_at=now,
            updated_at=now,
        )
        try:
            await self.user_repo.create_profile(profile.model_dump())
        except DuplicateKeyError:
            raise HTTPException(status_code=409, detail="Onboarding already completed")
        return profile
