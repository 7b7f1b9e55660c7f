from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import List
from uuid import UUID

class CreateTripRequest(BaseModel):
    destination: str = Field(..., min_length=4)
    starts_at: datetime
    ends_at: datetime
    emails_to_invite: List[EmailStr] = []
    owner_name: str = Field(..., min_length=1)
    owner_email: EmailStr


class CreateTripResponse(BaseModel):
    trip_id: str = Field(..., alias="tripId")

    model_config = {"populate_by_name": True}


class TripDetail(BaseModel):
    id: UUID
    destination: str
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool

    model_config = {"from_attributes": True}


class GetTripDetailsResponse(BaseModel):
    trip: TripDetail
