from typing import Any

from fastapi import APIRouter, Body, Depends

from src.guest_list.dtos import GUEST_CHANGE_FIELDS, GuestChangesDTO
from src.guest_list.features.add_guest.router import get_guest_write_model
from src.guest_list.repository.write_models import GuestWriteModel
from src.guest_list.schemas import GuestResponse
from src.guest_list.urls import MODIFY_GUEST_URL
from src.guest_list.validation import reject_disallowed_fields

router = APIRouter()


@router.patch(MODIFY_GUEST_URL, response_model=GuestResponse, response_model_exclude_unset=True)
async def modify_guest(
    guest_id: str,
    payload: dict[str, Any] | None = Body(default=None),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    """
    Update any of firstName, lastName, deadline and attending on a guest.

    Names change only when a non-empty value is sent. An empty deadline
    clears it. Attending is stored as sent.
    """
    payload = payload or {}
    reject_disallowed_fields(payload, GUEST_CHANGE_FIELDS)

    guest = await write_model.modify_guest(guest_id, GuestChangesDTO(changes=payload))
    return GuestResponse.from_guest(guest)
