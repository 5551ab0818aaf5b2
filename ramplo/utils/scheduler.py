import logging

from ramplo.db.mongo import get_database
from ramplo.services.scheduler_service import SchedulerService

logger = logging.getLogger(__name__)


async def daily_progress_rollover():
    try:
        db = await get_database()
        scheduler_service = SchedulerService(db)
        await scheduler_service.rollover_progress()
        return "OK"
    except Exception as e:
        logger.error(f"[Scheduler] DAILY_PROGRESS_ROLLOVER ERR {e}")
        raise
