from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import NoResultFound
from journey.core.errors import ApiError, GENERIC_ERROR_MESSAGE
from journey.core.logger import logger
from journey.dependencies.services import get_store, parse_uuid
from journey.schemas.message import ErrorMessage
from journey.services.store import STORE_ERRORS, TripStore

router = APIRouter(prefix="/participants", tags=["Participants"])

ALREADY_CONFIRMED_MESSAGE = "participant already confirmed"

@router.patch(
    "/{participant_id}/confirm",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorMessage}},
)
async def confirm_participant_route(
    participant_id: str,
    store: TripStore = Depends(get_store)
):
    """Confirms a participant on a trip. A participant can only be confirmed once."""
    pid = parse_uuid(participant_id)

    try:
        participant = await store.get_participant(pid)
    except NoResultFound:
        raise ApiError("participant not found")
    except STORE_ERRORS as e:
        logger.error(f"failed to get participant {participant_id}: {e}")
        raise ApiError(GENERIC_ERROR_MESSAGE)

    if participant.is_confirmed:
        raise ApiError(ALREADY_CONFIRMED_MESSAGE)

    try:
        confirmed = await store.confirm_participant(pid)
    except STORE_ERRORS as e:
        logger.error(f"failed to confirm participant {participant_id}: {e}")
        raise ApiError(GENERIC_ERROR_MESSAGE)

    # another request confirmed it between the read and the update
    if not confirmed:
        raise ApiError(ALREADY_CONFIRMED_MESSAGE)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
