from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from ramplo.db.mongo import get_database
from ramplo.schemas.task_schema import Task
from ramplo.schemas.user_schema import User
from ramplo.services.task_service import TaskService
from ramplo.utils.auth import get_current_user

router = APIRouter()


@router.get("", response_model=List[Task])
async def list_tasks(
    week: Optional[int] = Query(default=None, ge=1),
    day: Optional[int] = Query(default=None, ge=1, le=5),
    user: User = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        return await TaskService(db, user.id).list_tasks(week, day)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{task_id}/complete", response_model=Task)
async def complete_task(
    task_id: str,
    user: User = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        return await TaskService(db, user.id).complete_task(task_id)
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
