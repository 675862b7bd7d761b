from fastapi import APIRouter, Depends

from src.guest_list.repository.read_models import EventReadModel, InMemoryEventReadModel
from src.guest_list.repository.store import GuestListStore, get_guest_list_store
from src.guest_list.schemas import EventResponse
from src.guest_list.urls import LIST_EVENTS_URL

router = APIRouter()


def get_event_read_model(
    store: GuestListStore = Depends(get_guest_list_store),
) -> EventReadModel:
    """Dependency to get event read model instance."""
    return InMemoryEventReadModel(store)


@router.get(LIST_EVENTS_URL, response_model=list[EventResponse], response_model_exclude_unset=True)
async def list_events(
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventResponse]:
    """
    List all events with their guest lists, oldest first.
    """
    events = await read_model.list_events()
    return [EventResponse.from_event(event) for event in events]
