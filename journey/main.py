import uvicorn
from fastapi import FastAPI
from journey.core.config import settings
from journey.core.database import engine
from journey.core.errors import register_exception_handlers
from journey.core.init_db import check_db, init_db
from journey.core.logger import logger
from journey.routes import api_router

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.PROJECT_DESCRIPTION,
    openapi_url="/openapi.json"
)

register_exception_handlers(app)

# Include all API routes
app.include_router(api_router)

@app.get("/")
async def root():
    return {"message": "Welcome to Journey API"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.on_event("startup")
async def startup_event():
    await check_db()
    if settings.CREATE_TABLES:
        await init_db()

@app.on_event("shutdown")
async def shutdown_event():
    await engine.dispose()
    logger.info("goodbye :)")


def run():
    uvicorn.run(
        "journey.main:app",
        host=settings.HOST,
        port=settings.PORT,
        timeout_keep_alive=60,
    )


if __name__ == "__main__":
    run()
