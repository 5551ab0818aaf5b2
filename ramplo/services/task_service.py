from typing import Optional, List
import logging

from fastapi import HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from ramplo.repositories.task_repo import TaskRepository
from ramplo.repositories.progress_repo import ProgressRepository
from ramplo.schemas.task_schema import Task
from ramplo.services.progress_service import ProgressService
from ramplo.services.roadmap_service import RoadmapService
from ramplo.utils.util_func import get_current_time

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, db: AsyncIOMotorDatabase, user_id: str):
        self.task_repo = TaskRepository(db)
        self.progress_repo = ProgressRepository(db)
        self.progress_service = ProgressService(db)
        self.roadmap_service = RoadmapService(db, user_id)
        self.user_id = user_id

    async def list_tasks(
        self, week: Optional[int] = None, day: Optional[int] = None
    ) -> List[Task]:
        if week is None or day is None:
            week, day = await self.progress_service.get_current_week_and_day(
                self.user_id
            )
            week, day = self.roadmap_service.clamp_to_roadmap(week, day)
        docs = await self.task_repo.find_tasks(self.user_id, week, day)
        logger.debug(
            f"[Tasks] Found {len(docs)} tasks for user {self.user_id} week {week} day {day}"
        )
        return [Task.model_validate(doc) for doc in docs]

    async def complete_task(self, task_id: str) -> Task:
        """Mark a task complete.

        Completing an already-complete task returns it unchanged and does not
        count towards progress again.
        """
        now = get_current_time()
        doc = await self.task_repo.mark_complete(task_id, self.user_id, now)
        if doc is None:
            existing = await self.task_repo.get_task(task_id, self.user_id)
            if not existing:
                raise HTTPException(status_code=404, detail="Task not found")
            logger.info(f"[Tasks] Task {task_id} already completed, skipping")
            return Task.model_validate(existing)

        await self.progress_repo.increment_tasks_completed(self.user_id, now)
        logger.info(f"[Tasks] User {self.user_id} completed task {task_id}")
        return Task.model_validate(doc)
