from motor.motor_asyncio import AsyncIOMotorDatabase
import logging

from ramplo.services.progress_service import ProgressService

logger = logging.getLogger(__name__)


class SchedulerService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def rollover_progress(self) -> int:
        progress_service = ProgressService(self.db)
        moved = await progress_service.rollover_all()
        logger.info(f"[Scheduler] Progress rollover moved {moved} users")
        return moved
