# tests/test_progress_service.py

from __future__ import annotations

from datetime import date, datetime

import pytest
import pytz
from fastapi import HTTPException

from ramplo.schemas.progress_schema import ProgressUpdate
from ramplo.services.progress_service import ProgressService
from ramplo.services.scheduler_service import SchedulerService

from .fakes import FakeDatabase

TZ = pytz.timezone("America/Chicago")


def progress_doc(user_id: str, start: datetime | None, week: int = 1, day: int = 1) -> dict:
    return {
        "user_id": user_id,
        "start_date": start,
        "current_week": week,
        "current_day": day,
        "tasks_completed": 0,
    }


@pytest.mark.asyncio
async def test_sync_moves_progress_forward() -> None:
    db = FakeDatabase()
    doc = progress_doc("u1", TZ.localize(datetime(2026, 10, 5, 9, 0)))
    await db["user_progress"].insert_one(doc)
    service = ProgressService(db)

    week, day = await service.sync_current_day(doc, date(2026, 10, 13))

    assert (week, day) == (2, 2)
    stored = await db["user_progress"].find_one({"user_id": "u1"})
    assert (stored["current_week"], stored["current_day"]) == (2, 2)


@pytest.mark.asyncio
async def test_sync_without_start_date_defaults_to_first_day() -> None:
    service = ProgressService(FakeDatabase())

    assert await service.sync_current_day(progress_doc("u1", None), date(2026, 10, 13)) == (1, 1)


@pytest.mark.asyncio
async def test_missing_progress_defaults_to_first_day() -> None:
    service = ProgressService(FakeDatabase())

    assert await service.get_current_week_and_day("nobody") == (1, 1)
    assert await service.get_progress("nobody") is None


@pytest.mark.asyncio
async def test_rollover_counts_moved_users() -> None:
    db = FakeDatabase()
    long_ago = TZ.localize(datetime(2020, 1, 6, 9, 0))
    await db["user_progress"].insert_one(progress_doc("old", long_ago))
    await db["user_progress"].insert_one(progress_doc("capped", long_ago, week=14, day=5))

    moved = await SchedulerService(db).rollover_progress()

    assert moved == 1
    old = await db["user_progress"].find_one({"user_id": "old"})
    assert old["current_week"] == 14


@pytest.mark.asyncio
async def test_update_progress_requires_existing_record() -> None:
    service = ProgressService(FakeDatabase())

    with pytest.raises(HTTPException) as exc_info:
        await service.update_progress("nobody", ProgressUpdate(loans_closed=1))

    assert exc_info.value.status_code == 404
