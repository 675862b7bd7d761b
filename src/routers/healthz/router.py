from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.guest_list.repository.store import GuestListStore, get_guest_list_store

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    version: str = "0.1.0"
    events: int


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    store: GuestListStore = Depends(get_guest_list_store),
) -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running.
    Reports how many events the store currently holds.
    """
    return HealthCheckResponse(status="healthy", events=len(store.events))
