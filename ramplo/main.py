from fastapi import FastAPI
import logging

from ramplo.config import APP_TIMEZONE, LOG_LEVEL
from ramplo.db.mongo import connect_to_mongo
from ramplo.routers import user_router, task_router, roadmap_router

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from ramplo.utils.scheduler import daily_progress_rollover
import pytz

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="RampLO API")
scheduler = AsyncIOScheduler()

# Register routers
app.include_router(user_router.router, prefix="/api", tags=["Users"])
app.include_router(task_router.router, prefix="/api/tasks", tags=["Tasks"])
app.include_router(roadmap_router.router, prefix="/api/roadmap", tags=["Roadmap"])


@app.on_event("startup")
async def startup_event():
    tz = pytz.timezone(APP_TIMEZONE)
    await connect_to_mongo()
    scheduler.add_job(
        daily_progress_rollover, CronTrigger(hour=0, minute=5, timezone=tz)
    )
    scheduler.start()
    logger.info("[Scheduler] Started")


@app.on_event("shutdown")
async def shutdown_event():
    scheduler.shutdown()
    logger.info("[Scheduler] Shutdown")


@app.get("/")
async def root():
    return {"message": "RampLO API is running."}
