from fastapi import APIRouter, Depends, Response

from src.guest_list.dtos import MissingFieldError
from src.guest_list.features.create_event.router import get_event_write_model
from src.guest_list.repository.write_models import EventWriteModel
from src.guest_list.schemas import EventResponse
from src.guest_list.urls import DELETE_EVENT_URL, DELETE_EVENT_WITHOUT_ID_URLS

router = APIRouter()


@router.delete(DELETE_EVENT_URL, response_model=EventResponse, response_model_exclude_unset=True)
async def delete_event(
    event_id: str,
    write_model: EventWriteModel = Depends(get_event_write_model),
):
    """
    Delete an event and its guest list.
    Returns the removed event, or an empty 200 response when none matched.
    """
    event = await write_model.delete_event(event_id)
    if event is None:
        return Response(status_code=200)
    return EventResponse.from_event(event)


@router.delete(DELETE_EVENT_WITHOUT_ID_URLS[0], include_in_schema=False)
@router.delete(DELETE_EVENT_WITHOUT_ID_URLS[1], include_in_schema=False)
async def delete_event_without_id() -> None:
    raise MissingFieldError("No event ID given", status_code=404)
