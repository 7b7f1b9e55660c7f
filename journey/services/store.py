from uuid import UUID
from typing import List
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from journey.core.logger import logger
from journey.models.trip import Trip
from journey.models.participant import Participant
from journey.models.activity import Activity
from journey.schemas.trip import CreateTripRequest

# driver-level connection failures (asyncpg) surface as OSError, unwrapped
STORE_ERRORS = (SQLAlchemyError, OSError)


class TripStore:
    """Query layer over trips, participants and activities.

    Lookups of a single row raise ``sqlalchemy.exc.NoResultFound`` when
    nothing matches; callers treat that as the not-found signal.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_trip(self, request: CreateTripRequest) -> UUID:
        """Insert the trip and one unconfirmed participant per invited e-mail."""
        new_trip = Trip(
            destination=request.destination,
            owner_email=request.owner_email,
            owner_name=request.owner_name,
            starts_at=request.starts_at,
            ends_at=request.ends_at,
        )
        try:
            self.db.add(new_trip)
            await self.db.flush()

            for email in request.emails_to_invite:
                self.db.add(Participant(trip_id=new_trip.id, email=email))

            await self.db.commit()
        except STORE_ERRORS:
            await self.db.rollback()
            raise

        logger.info(
            f"Trip {new_trip.id} created for {request.owner_email} "
            f"with {len(request.emails_to_invite)} invited participants"
        )
        return new_trip.id

    async def get_participant(self, participant_id: UUID) -> Participant:
        result = await self.db.execute(
            select(Participant).where(Participant.id == participant_id)
        )
        return result.scalar_one()

    async def confirm_participant(self, participant_id: UUID) -> bool:
        """Flips ``is_confirmed`` to true.

        Returns False when no unconfirmed row matched, so of two concurrent
        confirmations only one wins.
        """
        try:
            result = await self.db.execute(
                update(Participant)
                .where(
                    Participant.id == participant_id,
                    Participant.is_confirmed.is_(False),
                )
                .values(is_confirmed=True)
            )
            await self.db.commit()
        except STORE_ERRORS:
            await self.db.rollback()
            raise

        if result.rowcount == 0:
            return False
        logger.info(f"Participant {participant_id} confirmed")
        return True

    async def get_trip(self, trip_id: UUID) -> Trip:
        result = await self.db.execute(select(Trip).where(Trip.id == trip_id))
        return result.scalar_one()

    async def get_trip_activities(self, trip_id: UUID) -> List[Activity]:
        # unknown trip is not-found, a known trip without activities is []
        trip_exists = await self.db.execute(select(Trip.id).where(Trip.id == trip_id))
        trip_exists.scalar_one()

        result = await self.db.execute(
            select(Activity)
            .where(Activity.trip_id == trip_id)
            .order_by(Activity.occurs_at)
        )
        return list(result.scalars().all())
