"""In-memory records held by the guest list store."""

from dataclasses import dataclass, field
from typing import Any

from src.guest_list.dtos import ATTENDING_DEFAULT


@dataclass
class Guest:
    id: str
    first_name: Any
    last_name: Any
    # None means the client never sent a deadline; "" means it was cleared.
    deadline: Any = None
    # Kept as the wire value ("true"/"false" or whatever the client last sent).
    attending: Any = ATTENDING_DEFAULT


@dataclass
class Event:
    event_id: str
    event_name: Any
    event_location: Any
    guest_list: list[Guest] = field(default_factory=list)

    def find_guest(self, guest_id: str) -> Guest | None:
        for guest in self.guest_list:
            if guest.id == guest_id:
                return guest
        return None
