from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.exc import NoResultFound
from journey.core.errors import ApiError, NotImplementedRoute, GENERIC_ERROR_MESSAGE
from journey.core.logger import logger
from journey.dependencies.services import get_mailer, get_store, parse_uuid
from journey.schemas.activity import GetTripActivitiesResponse
from journey.schemas.message import ErrorMessage
from journey.schemas.trip import (
    CreateTripRequest,
    CreateTripResponse,
    GetTripDetailsResponse,
    TripDetail,
)
from journey.services.activities import group_activities
from journey.services.mailer import Mailer, notify_trip_owner
from journey.services.store import STORE_ERRORS, TripStore

router = APIRouter(prefix="/trips", tags=["Trips"])

ERROR_RESPONSES = {400: {"model": ErrorMessage}}
NOT_IMPLEMENTED_RESPONSES = {501: {"model": ErrorMessage}}


@router.post(
    "",
    response_model=CreateTripResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_trip_route(
    trip: CreateTripRequest,
    background_tasks: BackgroundTasks,
    store: TripStore = Depends(get_store),
    mailer: Mailer = Depends(get_mailer)
):
    try:
        trip_id = await store.create_trip(trip)
    except STORE_ERRORS as e:
        logger.error(f"failed to create trip for {trip.owner_email}: {e}")
        raise ApiError("failed to create trip, try again")

    # runs after the response is sent
    background_tasks.add_task(notify_trip_owner, mailer, trip_id)

    return CreateTripResponse(trip_id=str(trip_id))


@router.get("/{trip_id}", response_model=GetTripDetailsResponse, responses=ERROR_RESPONSES)
async def get_trip_route(
    trip_id: str,
    store: TripStore = Depends(get_store)
):
    tid = parse_uuid(trip_id)

    try:
        trip = await store.get_trip(tid)
    except NoResultFound:
        raise ApiError("Trip not found")
    except STORE_ERRORS as e:
        logger.error(f"failed to get trip {trip_id}: {e}")
        raise ApiError(GENERIC_ERROR_MESSAGE)

    return GetTripDetailsResponse(trip=TripDetail.model_validate(trip))


@router.put("/{trip_id}", responses=NOT_IMPLEMENTED_RESPONSES)
async def update_trip_route(trip_id: str):
    raise NotImplementedRoute()


@router.get(
    "/{trip_id}/activities",
    response_model=GetTripActivitiesResponse,
    responses=ERROR_RESPONSES,
)
async def get_trip_activities_route(
    trip_id: str,
    store: TripStore = Depends(get_store)
):
    tid = parse_uuid(trip_id)

    try:
        activities = await store.get_trip_activities(tid)
    except NoResultFound:
        raise ApiError("no trips found")
    except STORE_ERRORS as e:
        logger.error(f"failed to get activities for trip {trip_id}: {e}")
        raise ApiError(GENERIC_ERROR_MESSAGE)

    return GetTripActivitiesResponse(activities=group_activities(activities))


@router.post("/{trip_id}/activities", responses=NOT_IMPLEMENTED_RESPONSES)
async def create_trip_activity_route(trip_id: str):
    raise NotImplementedRoute()


@router.get("/{trip_id}/confirm", responses=NOT_IMPLEMENTED_RESPONSES)
async def confirm_trip_route(trip_id: str):
    raise NotImplementedRoute()


@router.post("/{trip_id}/invites", responses=NOT_IMPLEMENTED_RESPONSES)
async def invite_to_trip_route(trip_id: str):
    raise NotImplementedRoute()


@router.get("/{trip_id}/links", responses=NOT_IMPLEMENTED_RESPONSES)
async def get_trip_links_route(trip_id: str):
    raise NotImplementedRoute()


@router.post("/{trip_id}/links", responses=NOT_IMPLEMENTED_RESPONSES)
async def create_trip_link_route(trip_id: str):
    raise NotImplementedRoute()


@router.get("/{trip_id}/participants", responses=NOT_IMPLEMENTED_RESPONSES)
async def get_trip_participants_route(trip_id: str):
    raise NotImplementedRoute()
