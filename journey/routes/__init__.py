# journey/routes/__init__.py
from fastapi import APIRouter
from journey.routes import participants, trips


api_router = APIRouter()

api_router.include_router(participants.router)
api_router.include_router(trips.router)
