from typing import Optional, List
from datetime import datetime
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument


class ProgressRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db["user_progress"]

    async def create_progress(self, data: dict) -> dict:
        await self.collection.insert_one(data)
        return data

    async def get_progress(self, user_id: str) -> Optional[dict]:
        return await self.collection.find_one({"user_id": user_id})

    async def find_all(self) -> List[dict]:
        return await self.collection.find({}).to_list(length=None)

    async def update_progress(self, user_id: str, updates: dict) -> Optional[dict]:
        return await self.collection.find_one_and_update(
            {"user_id": user_id},
            {"$set": updates},
            return_document=ReturnDocument.AFTER,
        )

    async def increment_tasks_completed(self, user_id: str, now: datetime) -> bool:
        result = await self.collection.update_one(
            {"user_id": user_id},
            {
                "$inc": {"tasks_completed": 1},
                "$set": {"last_activity_date": now, "updated_at": now},
            },
        )
        return result.modified_count > 0
