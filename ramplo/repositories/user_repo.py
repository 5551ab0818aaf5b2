from typing import Optional
from motor.motor_asyncio import AsyncIOMotorDatabase


class UserRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db["users"]
        self.profile_collection = db["user_profiles"]

    async def create_user(self, data: dict) -> dict:
        await self.collection.insert_one(data)
        return data

    async def get_user_by_id(self, user_id: str) -> Optional[dict]:
        return await self.collection.find_one({"_id": user_id})

    async def get_user_by_email(self, email: str) -> Optional[dict]:
        return await self.collection.find_one({"email": email})

    async def get_profile(self, user_id: str) -> Optional[dict]:
        return await self.profile_collection.find_one({"user_id": user_id})

    async def create_profile(self, data: dict) -> dict:
        await self.profile_collection.insert_one(data)
        return data
