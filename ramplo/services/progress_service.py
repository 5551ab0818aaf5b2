from datetime import date
from typing import Optional
import logging

from fastapi import HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from ramplo.repositories.progress_repo import ProgressRepository
from ramplo.schemas.progress_schema import ProgressUpdate, UserProgress
from ramplo.utils.util_func import (
    calculate_current_week_and_day,
    get_business_days_between,
    get_current_time,
    to_local_date,
)

logger = logging.getLogger(__name__)


class ProgressService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.progress_repo = ProgressRepository(db)

    async def get_progress(self, user_id: str) -> Optional[UserProgress]:
        doc = await self.progress_repo.get_progress(user_id)
        if not doc:
            return None
        return UserProgress.model_validate(doc)

    async def sync_current_day(self, progress: dict, today: date) -> tuple[int, int]:
        """Recompute week/day from the start date and persist it when it moved."""
        start = progress.get("start_date")
        if not start:
            return 1, 1

        elapsed = get_business_days_between(to_local_date(start), today)
        week, day = calculate_current_week_and_day(elapsed)

        if progress.get("current_week") != week or progress.get("current_day") != day:
            await self.progress_repo.update_progress(
                progress["user_id"],
                {
                    "current_week": week,
                    "current_day": day,
                    "updated_at": get_current_time(),
                },
            )
            logger.info(
                f"[Progress] Auto-updated user {progress['user_id']} to week {week}, day {day}"
            )
        return week, day

    async def get_current_week_and_day(self, user_id: str) -> tuple[int, int]:
        progress = await self.progress_repo.get_progress(user_id)
        if not progress:
            return 1, 1
        return await self.sync_current_day(progress, get_current_time().date())

    async def update_progress(self, user_id: str, updates: ProgressUpdate) -> UserProgress:
        values = updates.model_dump(exclude_none=True)
        values["updated_at"] = get_current_time()
        doc = await self.progress_repo.update_progress(user_id, values)
        if not doc:
            raise HTTPException(status_code=404, detail="Progress not found")
        return UserProgress.model_validate(doc)

    async def rollover_all(self) -> int:
        """Advance every user's current week/day; returns how many moved."""
        today = get_current_time().date()
        moved = 0
        for progress in await self.progress_repo.find_all():
            before = (progress.get("current_week"), progress.get("current_day"))
            try:
                after = await self.sync_current_day(progress, today)
            except Exception as e:
                logger.error(
                    f"[Progress] Rollover failed for user {progress.get('user_id')}: {e}"
                )
                continue
            if after != before:
                moved += 1
        return moved
