from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from ramplo.db.mongo import get_database
from ramplo.schemas.user_schema import AuthUserResponse, ProfileCreate, User
from ramplo.schemas.progress_schema import ProgressUpdate, UserProgress
from ramplo.services.user_service import UserService
from ramplo.services.progress_service import ProgressService
from ramplo.services.roadmap_service import RoadmapService
from ramplo.utils.auth import get_current_user

router = APIRouter()


@router.get("/auth/user", response_model=AuthUserResponse)
async def get_auth_user(
    user: User = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        return await UserService(db).get_auth_user(user.id)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/onboarding")
async def complete_onboarding(
    data: ProfileCreate,
    user: User = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        profile = await UserService(db).complete_onboarding(user.id, data)
        created = await RoadmapService(db, user.id).seed_default_tasks()
        return {
            "message": "Onboarding completed",
            "profile": profile,
            "tasks_created": created,
        }
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/progress", response_model=UserProgress)
async def update_progress(
    updates: ProgressUpdate,
    user: User = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        return await ProgressService(db).update_progress(user.id, updates)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
