import smtplib
from uuid import UUID
from starlette.concurrency import run_in_threadpool
from journey.core.database import SessionLocal
from journey.core.logger import logger
from journey.models.trip import Trip
from journey.services import email_service
from journey.services.store import STORE_ERRORS, TripStore

CONFIRM_TRIP_SUBJECT = "Confirme sua viagem"


class MailerError(Exception):
    pass


def build_confirm_trip_body(trip: Trip) -> str:
    return (
        f"Olá, {trip.owner_name}!\n"
        f"\n"
        f"A sua viagem para {trip.destination} que começa no dia "
        f"{trip.starts_at.strftime('%Y-%m-%d')} precisa ser confirmada.\n"
        f"Clique no botão abaixo para confirmar.\n"
    )


class Mailer:
    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    async def send_confirm_trip_email_to_trip_owner(self, trip_id: UUID) -> None:
        """Looks the trip up in its own session and mails its owner."""
        async with self.session_factory() as db:
            try:
                trip = await TripStore(db).get_trip(trip_id)
            except STORE_ERRORS as e:
                raise MailerError(f"failed to get trip {trip_id} for confirmation email") from e

        try:
            await run_in_threadpool(
                email_service.send_email_text,
                trip.owner_email,
                CONFIRM_TRIP_SUBJECT,
                build_confirm_trip_body(trip),
            )
        except (smtplib.SMTPException, OSError) as e:
            raise MailerError(f"failed to send confirmation email for trip {trip_id}") from e

        logger.info(f"Confirmation email for trip {trip_id} sent to {trip.owner_email}")


async def notify_trip_owner(mailer: Mailer, trip_id: UUID) -> None:
    """Background task body: failures are logged, never raised."""
    try:
        await mailer.send_confirm_trip_email_to_trip_owner(trip_id)
    except Exception as e:
        logger.error(f"failed to send email on create trip: trip_id={trip_id}: {e}")
