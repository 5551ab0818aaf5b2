from typing import Optional, List
from datetime import datetime
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument


class TaskRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db["tasks"]

    async def insert_tasks(self, tasks: List[dict]) -> int:
        if not tasks:
            return 0
        result = await self.collection.insert_many(tasks)
        return len(result.inserted_ids)

    async def find_tasks(
        self, user_id: str, week: Optional[int] = None, day: Optional[int] = None
    ) -> List[dict]:
        query = {"user_id": user_id}
        if week is not None:
            query["week"] = week
        if day is not None:
            query["day"] = day
        cursor = self.collection.find(query).sort(
            [("week", ASCENDING), ("day", ASCENDING), ("position", ASCENDING)]
        )
        return await cursor.to_list(length=None)

    async def get_task(self, task_id: str, user_id: str) -> Optional[dict]:
        return await self.collection.find_one({"_id": task_id, "user_id": user_id})

    async def mark_complete(
        self, task_id: str, user_id: str, now: datetime
    ) -> Optional[dict]:
        """Flip an incomplete task to complete; None when nothing matched."""
        return await self.collection.find_one_and_update(
            {"_id": task_id, "user_id": user_id, "completed": False},
            {"$set": {"completed": True, "completed_at": now}},
            return_document=ReturnDocument.AFTER,
        )

    async def count_tasks(self, user_id: str) -> int:
        return await self.collection.count_documents({"user_id": user_id})
