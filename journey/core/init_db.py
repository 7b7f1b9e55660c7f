from sqlalchemy import text
from journey.core.database import engine, Base
from journey.core.logger import logger
import journey.models  # noqa: F401  registers tables on Base.metadata


async def check_db():
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection established")


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")
