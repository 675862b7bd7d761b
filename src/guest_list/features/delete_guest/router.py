from fastapi import APIRouter, Depends

from src.guest_list.features.add_guest.router import get_guest_write_model
from src.guest_list.repository.write_models import GuestWriteModel
from src.guest_list.schemas import GuestResponse
from src.guest_list.urls import DELETE_GUEST_URL

router = APIRouter()


@router.delete(DELETE_GUEST_URL, response_model=GuestResponse, response_model_exclude_unset=True)
async def delete_guest(
    guest_id: str,
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    """
    Remove a guest from its event and return it.
    """
    guest = await write_model.delete_guest(guest_id)
    return GuestResponse.from_guest(guest)
