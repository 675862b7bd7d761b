"""Process-local store for events and their guest lists.

The store owns the events and both id counters. It is built once per
application (see the lifespan in ``src.main``) and handed to the read and
write models through ``get_guest_list_store``.
"""

import logging
import threading

from fastapi import Request

from src.guest_list.dtos import GUEST_ID_SEPARATOR, event_id_from_guest_id
from src.guest_list.repository.memory_models import Event, Guest

logger = logging.getLogger(__name__)

FIXTURE_EVENT_ID = "100"
FIXTURE_GUEST_ID = "100-100"


class GuestListStore:
    """Insertion-ordered events keyed by id, plus the id counters.

    The primitives below do not lock. Callers performing a lookup followed by
    a mutation hold ``lock`` for the whole sequence.
    """

    def __init__(self, seed_fixture: bool = True) -> None:
        self.lock = threading.RLock()
        self._events: dict[str, Event] = {}
        self._next_event_id = 1
        self._next_guest_seq = 1
        # ids handed out outside the counters; never issued again
        self._reserved_ids: set[str] = set()
        if seed_fixture:
            self._seed_fixture()

    def _seed_fixture(self) -> None:
        self._events[FIXTURE_EVENT_ID] = Event(
            event_id=FIXTURE_EVENT_ID,
            event_name="bla",
            event_location="asdkfl",
            guest_list=[
                Guest(
                    id=FIXTURE_GUEST_ID,
                    first_name="firstName",
                    last_name="lastName",
                    deadline="",
                    attending="false",
                )
            ],
        )
        self._reserved_ids.update({FIXTURE_EVENT_ID, FIXTURE_GUEST_ID})
        logger.debug(f"Seeded fixture event {FIXTURE_EVENT_ID}")

    @property
    def events(self) -> list[Event]:
        return list(self._events.values())

    def get_event(self, event_id: str) -> Event | None:
        # ids arrive from JSON bodies and may be lists or objects
        if not isinstance(event_id, str):
            return None
        return self._events.get(event_id)

    def find_guest(self, guest_id: str) -> tuple[Event, Guest] | None:
        """Locate a guest through the event id encoded in its prefix."""
        event = self.get_event(event_id_from_guest_id(guest_id))
        if event is None:
            return None
        guest = event.find_guest(guest_id)
        if guest is None:
            return None
        return event, guest

    def next_event_id(self) -> str:
        event_id = str(self._next_event_id)
        self._next_event_id += 1
        while event_id in self._reserved_ids or event_id in self._events:
            event_id = str(self._next_event_id)
            self._next_event_id += 1
        return event_id

    def next_guest_id(self, event_id: str) -> str:
        guest_id = f"{event_id}{GUEST_ID_SEPARATOR}{self._next_guest_seq}"
        self._next_guest_seq += 1
        while guest_id in self._reserved_ids:
            guest_id = f"{event_id}{GUEST_ID_SEPARATOR}{self._next_guest_seq}"
            self._next_guest_seq += 1
        return guest_id

    def add_event(self, event: Event) -> Event:
        self._events[event.event_id] = event
        return event

    def remove_event(self, event_id: str) -> Event | None:
        return self._events.pop(event_id, None)


def get_guest_list_store(request: Request) -> GuestListStore:
    """Dependency returning the store owned by the running application."""
    return request.app.state.guest_list_store
