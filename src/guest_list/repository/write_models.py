"""Write models for events and guests.

Each operation holds the store lock across its lookup and its mutation.
"""

import logging
from abc import ABC, abstractmethod

from src.guest_list.dtos import (
    EventNotFoundError,
    GuestChangesDTO,
    GuestNotFoundError,
    NewEventDTO,
    NewGuestDTO,
    is_empty_value,
)
from src.guest_list.repository.memory_models import Event, Guest
from src.guest_list.repository.store import GuestListStore

logger = logging.getLogger(__name__)


class EventWriteModel(ABC):
    """Abstract base class for event write operations."""

    @abstractmethod
    async def create_event(self, new_event: NewEventDTO) -> Event:
        """Create an event with an empty guest list and a fresh id."""
        raise NotImplementedError

    @abstractmethod
    async def delete_event(self, event_id: str) -> Event | None:
        """Remove an event together with its guests.

        Returns the removed event, or None when nothing matched.
        """
        raise NotImplementedError


class GuestWriteModel(ABC):
    """Abstract base class for guest write operations."""

    @abstractmethod
    async def add_guest(self, new_guest: NewGuestDTO) -> Guest:
        """Append a guest to an event's guest list.

        Raises:
            EventNotFoundError: no event has ``new_guest.event_id``
        """
        raise NotImplementedError

    @abstractmethod
    async def modify_guest(self, guest_id: str, changes: GuestChangesDTO) -> Guest:
        """Apply a partial update to a guest.

        Raises:
            GuestNotFoundError: no guest has ``guest_id``
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_guest(self, guest_id: str) -> Guest:
        """Remove a guest from its event, keeping the others in order.

        Raises:
            GuestNotFoundError: no guest has ``guest_id``
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_attending_guests(self, event_id: str) -> None:
        """Keep only the guests of an event whose attending value is falsy.

        Raises:
            EventNotFoundError: no event has ``event_id``
        """
        raise NotImplementedError


class InMemoryEventWriteModel(EventWriteModel):
    def __init__(self, store: GuestListStore) -> None:
        self._store = store

    async def create_event(self, new_event: NewEventDTO) -> Event:
        with self._store.lock:
            event = self._store.add_event(
                Event(
                    event_id=self._store.next_event_id(),
                    event_name=new_event.event_name,
                    event_location=new_event.event_location,
                )
            )
        logger.info(f"Created event {event.event_id}")
        return event

    async def delete_event(self, event_id: str) -> Event | None:
        with self._store.lock:
            event = self._store.remove_event(event_id)
        if event is not None:
            logger.info(f"Deleted event {event_id} with {len(event.guest_list)} guests")
        return event


class InMemoryGuestWriteModel(GuestWriteModel):
    def __init__(self, store: GuestListStore) -> None:
        self._store = store

    def _get_guest(self, guest_id: str) -> tuple[Event, Guest]:
        found = self._store.find_guest(guest_id)
        if found is None:
            raise GuestNotFoundError(guest_id)
        return found

    async def add_guest(self, new_guest: NewGuestDTO) -> Guest:
        with self._store.lock:
            event = self._store.get_event(new_guest.event_id)
            if event is None:
                raise EventNotFoundError(new_guest.event_id)

            guest = Guest(
                id=self._store.next_guest_id(event.event_id),
                first_name=new_guest.first_name,
                last_name=new_guest.last_name,
                deadline=None if is_empty_value(new_guest.deadline) else new_guest.deadline,
            )
            event.guest_list.append(guest)
        logger.info(f"Added guest {guest.id} to event {event.event_id}")
        return guest

    async def modify_guest(self, guest_id: str, changes: GuestChangesDTO) -> Guest:
        with self._store.lock:
            _, guest = self._get_guest(guest_id)

            if not is_empty_value(changes.first_name):
                guest.first_name = changes.first_name
            if not is_empty_value(changes.last_name):
                guest.last_name = changes.last_name
            if changes.sets_deadline:
                guest.deadline = changes.deadline
            if changes.sets_attending:
                guest.attending = changes.attending
        logger.info(f"Modified guest {guest_id}: {', '.join(changes.changes) or 'no changes'}")
        return guest

    async def delete_guest(self, guest_id: str) -> Guest:
        with self._store.lock:
            event, guest = self._get_guest(guest_id)
            del event.guest_list[event.guest_list.index(guest)]
        logger.info(f"Deleted guest {guest_id} from event {event.event_id}")
        return guest

    async def delete_attending_guests(self, event_id: str) -> None:
        with self._store.lock:
            event = self._store.get_event(event_id)
            if event is None:
                raise EventNotFoundError(event_id)

            remaining = [guest for guest in event.guest_list if is_empty_value(guest.attending)]
            removed = len(event.guest_list) - len(remaining)
            event.guest_list[:] = remaining
        logger.info(f"Deleted {removed} attending guests from event {event_id}")
