from fastapi import APIRouter, Depends

from src.guest_list.dtos import DELETED_ATTENDING_GUESTS_MESSAGE
from src.guest_list.features.add_guest.router import get_guest_write_model
from src.guest_list.repository.write_models import GuestWriteModel
from src.guest_list.urls import DELETE_ATTENDING_GUESTS_URL

router = APIRouter()


@router.delete(DELETE_ATTENDING_GUESTS_URL, response_model=str)
async def delete_attending_event_guests(
    event_id: str,
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> str:
    """
    Drop every guest of the event whose attending value is non-empty.

    Guests only survive when attending is null, false, 0 or "". Any other
    value, including the "false" string new guests start with, gets the
    guest removed.
    """
    await write_model.delete_attending_guests(event_id)
    return DELETED_ATTENDING_GUESTS_MESSAGE
