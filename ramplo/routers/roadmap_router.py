from fastapi import APIRouter, Depends, HTTPException, Path
from motor.motor_asyncio import AsyncIOMotorDatabase

from ramplo.db.mongo import get_database
from ramplo.schemas.day_plan_schema import DayPlan
from ramplo.schemas.user_schema import User
from ramplo.services.progress_service import ProgressService
from ramplo.services.roadmap_service import RoadmapService
from ramplo.utils.auth import get_current_user

router = APIRouter()


@router.get("/today", response_model=DayPlan)
async def get_today_plan(
    user: User = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        week, day = await ProgressService(db).get_current_week_and_day(user.id)
        roadmap_service = RoadmapService(db, user.id)
        return await roadmap_service.get_day_plan(
            *roadmap_service.clamp_to_roadmap(week, day)
        )
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/days/{week}/{day}", response_model=DayPlan)
async def get_day_plan(
    week: int = Path(..., ge=1),
    day: int = Path(..., ge=1, le=5),
    user: User = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        return await RoadmapService(db, user.id).get_day_plan(week, day)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
