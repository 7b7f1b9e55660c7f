from uuid import UUID
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from journey.core.database import get_db
from journey.core.errors import ApiError, INVALID_UUID_MESSAGE
from journey.services.mailer import Mailer
from journey.services.store import TripStore


async def get_store(db: AsyncSession = Depends(get_db)) -> TripStore:
    return TripStore(db)


async def get_mailer() -> Mailer:
    return Mailer()


def parse_uuid(raw_id: str) -> UUID:
    try:
        return UUID(raw_id)
    except ValueError:
        raise ApiError(INVALID_UUID_MESSAGE)
