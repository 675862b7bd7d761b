from typing import Any

from fastapi import APIRouter, Body, Depends

from src.guest_list.dtos import EVENT_FIELDS, NewEventDTO
from src.guest_list.repository.store import GuestListStore, get_guest_list_store
from src.guest_list.repository.write_models import EventWriteModel, InMemoryEventWriteModel
from src.guest_list.schemas import EventResponse
from src.guest_list.urls import CREATE_EVENT_URL
from src.guest_list.validation import reject_unexpected_fields, require_fields

router = APIRouter()


def get_event_write_model(
    store: GuestListStore = Depends(get_guest_list_store),
) -> EventWriteModel:
    """Dependency to get event write model instance."""
    return InMemoryEventWriteModel(store)


@router.post(CREATE_EVENT_URL, response_model=EventResponse, response_model_exclude_unset=True)
async def create_event(
    payload: dict[str, Any] | None = Body(default=None),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """
    Create a new event with an empty guest list.
    Accepts exactly eventName and eventLocation.
    """
    payload = payload or {}
    require_fields(payload, EVENT_FIELDS, "Please enter an event name and location.")
    reject_unexpected_fields(
        payload,
        EVENT_FIELDS,
        "Request body contains more than event name and location properties",
    )

    event = await write_model.create_event(
        NewEventDTO(
            event_name=payload["eventName"],
            event_location=payload["eventLocation"],
        )
    )
    return EventResponse.from_event(event)
