from fastapi import APIRouter, Depends, Query, Response

from src.guest_list.dtos import MissingFieldError
from src.guest_list.features.list_events.router import get_event_read_model
from src.guest_list.repository.read_models import EventReadModel
from src.guest_list.schemas import GuestResponse
from src.guest_list.urls import LIST_EVENT_GUESTS_URL

router = APIRouter()


@router.get(LIST_EVENT_GUESTS_URL, response_model=list[GuestResponse], response_model_exclude_unset=True)
@router.get(
    LIST_EVENT_GUESTS_URL + "/",
    response_model=list[GuestResponse],
    response_model_exclude_unset=True,
    include_in_schema=False,
)
async def list_event_guests(
    event_id: str | None = Query(default=None, alias="id"),
    read_model: EventReadModel = Depends(get_event_read_model),
):
    """
    Get the guest list of one event.
    An unknown event id yields an empty 200 response.
    """
    if not event_id:
        raise MissingFieldError("Request body missing an event id")

    guests = await read_model.get_event_guests(event_id)
    if guests is None:
        return Response(status_code=200)
    return [GuestResponse.from_guest(guest) for guest in guests]
