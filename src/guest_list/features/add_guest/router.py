from typing import Any

from fastapi import APIRouter, Body, Depends

from src.guest_list.dtos import NEW_GUEST_FIELDS, NEW_GUEST_OPTIONAL_FIELDS, NewGuestDTO
from src.guest_list.repository.store import GuestListStore, get_guest_list_store
from src.guest_list.repository.write_models import GuestWriteModel, InMemoryGuestWriteModel
from src.guest_list.schemas import GuestResponse
from src.guest_list.urls import ADD_GUEST_URL
from src.guest_list.validation import reject_unexpected_fields, require_fields

router = APIRouter()


def get_guest_write_model(
    store: GuestListStore = Depends(get_guest_list_store),
) -> GuestWriteModel:
    """Dependency to get guest write model instance."""
    return InMemoryGuestWriteModel(store)


@router.post(ADD_GUEST_URL, response_model=GuestResponse, response_model_exclude_unset=True)
async def add_guest_to_event(
    payload: dict[str, Any] | None = Body(default=None),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    """
    Add a guest to an event.

    Required: eventId, firstName, lastName. Optional: deadline.
    New guests start with attending set to "false".
    """
    payload = payload or {}
    require_fields(payload, NEW_GUEST_FIELDS, "No event id, first or last name given.")
    reject_unexpected_fields(
        payload,
        NEW_GUEST_FIELDS + NEW_GUEST_OPTIONAL_FIELDS,
        "Request body contains more than event id, first and last name",
    )

    guest = await write_model.add_guest(
        NewGuestDTO(
            event_id=payload["eventId"],
            first_name=payload["firstName"],
            last_name=payload["lastName"],
            deadline=payload.get("deadline"),
        )
    )
    return GuestResponse.from_guest(guest)
