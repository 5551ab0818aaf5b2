from fastapi import Depends, HTTPException, Request
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import EmailStr, TypeAdapter, ValidationError

from ramplo.config import AUTH_EMAIL_HEADER
from ramplo.db.mongo import get_database
from ramplo.schemas.user_schema import User
from ramplo.services.user_service import UserService

email_adapter = TypeAdapter(EmailStr)


async def get_current_user(
    request: Request, db: AsyncIOMotorDatabase = Depends(get_database)
) -> User:
    raw_email = request.headers.get(AUTH_EMAIL_HEADER)
    if not raw_email:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        email = email_adapter.validate_python(raw_email.strip())
    except ValidationError:
        raise HTTPException(status_code=401, detail="Not authenticated")
    result = await UserService(db).check_and_create(email)
    return result["user"]
