from typing import Optional, List
import logging
import uuid

from fastapi import HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from ramplo.repositories.task_repo import TaskRepository
from ramplo.schemas.day_plan_schema import DayPlan, DayTask
from ramplo.utils.foundation_roadmap import (
    DEFAULT_EXTRA_TIME_ACTIVITY,
    DEFAULT_OBJECTIVE,
    FOUNDATION_ROADMAP,
)
from ramplo.utils.util_func import get_current_time

logger = logging.getLogger(__name__)


class RoadmapService:
    def __init__(self, db: AsyncIOMotorDatabase, user_id: str, roadmap: dict = None):
        self.task_repo = TaskRepository(db)
        self.roadmap = roadmap or FOUNDATION_ROADMAP
        self.user_id = user_id

    def find_week(self, week: int) -> Optional[dict]:
        for week_data in self.roadmap["weeks"]:
            if week_data["week"] == week:
                return week_data
        return None

    def find_day(self, week: int, day: int) -> Optional[dict]:
        week_data = self.find_week(week)
        if not week_data:
            return None
        for day_data in week_data["days"]:
            if day_data["day"] == day:
                return day_data
        return None

    def last_day(self) -> tuple[int, int]:
        last_week = max(self.roadmap["weeks"], key=lambda w: w["week"])
        return last_week["week"], max(d["day"] for d in last_week["days"])

    def clamp_to_roadmap(self, week: int, day: int) -> tuple[int, int]:
        """Past the end of the roadmap the user stays on its final day."""
        if (week, day) > self.last_day():
            return self.last_day()
        return week, day

    def build_default_tasks(self) -> List[dict]:
        now = get_current_time()
        tasks = []
        for week_data in self.roadmap["weeks"]:
            for day_data in week_data["days"]:
                for position, task in enumerate(day_data["tasks"]):
                    tasks.append(
                        {
                            "_id": str(uuid.uuid4()),
                            "user_id": self.user_id,
                            "title": task["title"],
                            "description": task.get("description"),
                            "category": task["category"],
                            "estimated_minutes": task["estimated_minutes"],
                            "week": week_data["week"],
                            "day": day_data["day"],
                            "position": position,
                            "completed": False,
                            "completed_at": None,
                            "created_at": now,
                        }
                    )
        return tasks

    async def seed_default_tasks(self) -> int:
        """Create the user's tasks from the roadmap unless they already exist."""
        try:
            if await self.task_repo.count_tasks(self.user_id) > 0:
                logger.info(f"[Roadmap] User {self.user_id} already has tasks")
                return 0
            created = await self.task_repo.insert_tasks(self.build_default_tasks())
            logger.info(
                f"[Roadmap] Created {created} tasks from {self.roadmap['id']} for user {self.user_id}"
            )
            return created
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    async def get_day_plan(self, week: int, day: int) -> DayPlan:
        week_data = self.find_week(week)
        day_data = self.find_day(week, day)
        if not week_data or not day_data:
            raise HTTPException(status_code=404, detail="Day not found in roadmap")

        docs = await self.task_repo.find_tasks(self.user_id, week, day)
        if docs:
            tasks = [
                DayTask(
                    id=doc["_id"],
                    title=doc["title"],
                    description=doc.get("description"),
                    category=doc["category"],
                    estimated_minutes=doc["estimated_minutes"],
                    completed=doc.get("completed", False),
                )
                for doc in docs
            ]
        else:
            tasks = [DayTask(**task) for task in day_data["tasks"]]

        return DayPlan(
            day=day,
            week=week,
            objective=day_data.get("objective")
            or DEFAULT_OBJECTIVE.format(day=day, theme=week_data["theme"]),
            week_theme=week_data["theme"],
            extra_time_activity=day_data.get(
                "extra_time_activity", DEFAULT_EXTRA_TIME_ACTIVITY
            ),
            tasks=tasks,
        )
