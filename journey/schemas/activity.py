from pydantic import BaseModel
from datetime import datetime
from typing import List
from uuid import UUID


class ActivityOut(BaseModel):
    id: UUID
    title: str
    occurs_at: datetime

    model_config = {"from_attributes": True}


class ActivityGroup(BaseModel):
    date: datetime
    activities: List[ActivityOut]


class GetTripActivitiesResponse(BaseModel):
    activities: List[ActivityGroup]
