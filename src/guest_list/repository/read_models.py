import abc

from src.guest_list.repository.memory_models import Event, Guest
from src.guest_list.repository.store import GuestListStore


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_events(self) -> list[Event]:
        """
        List every event in insertion order, guest lists included.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_event_guests(self, event_id: str) -> list[Guest] | None:
        """
        Get the guest list of an event.
        Returns None when no event has that id.
        """
        raise NotImplementedError


class InMemoryEventReadModel(EventReadModel):
    """Read model backed by the process-local store."""

    def __init__(self, store: GuestListStore) -> None:
        self._store = store

    async def list_events(self) -> list[Event]:
        with self._store.lock:
            return self._store.events

    async def get_event_guests(self, event_id: str) -> list[Guest] | None:
        with self._store.lock:
            event = self._store.get_event(event_id)
            if event is None:
                return None
            return list(event.guest_list)
