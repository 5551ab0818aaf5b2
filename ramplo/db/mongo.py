from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ServerSelectionTimeoutError
import logging
from pymongo import ASCENDING

from ramplo.config import MONGO_URI, MONGO_DB_NAME

logger = logging.getLogger(__name__)

# Setup client with short timeout for quick failure
client = AsyncIOMotorClient(MONGO_URI, serverSelectionTimeoutMS=3000)

# Global DB object
db: AsyncIOMotorDatabase | None = None


async def connect_to_mongo():
    global db
    try:
        # Ping the server to check connection
        await client.admin.command("ping")
        db = client[MONGO_DB_NAME]
        logger.info("[MongoDB] Connected successfully.")
        await init_indexes()
    except ServerSelectionTimeoutError as e:
        logger.error(f"[MongoDB] Connection failed: {e}")
        db = None


async def get_database() -> AsyncIOMotorDatabase:
    if db is None:
        raise RuntimeError("Database not available")
    return db


async def init_indexes():
    if db is None:
        raise RuntimeError("Database not initialized")

    await db["users"].create_index(
        [("email", ASCENDING)], unique=True, name="idx_email_unique"
    )
    await db["user_profiles"].create_index(
        [("user_id", ASCENDING)], unique=True, name="idx_profile_user_unique"
    )
    await db["user_progress"].create_index(
        [("user_id", ASCENDING)], unique=True, name="idx_progress_user_unique"
    )
    await db["tasks"].create_index(
        [
            ("user_id", ASCENDING),
            ("week", ASCENDING),
            ("day", ASCENDING),
            ("position", ASCENDING),
        ],
        name="idx_user_week_day_position",
    )

    logger.info("[MongoDB] Indexes initialized.")
