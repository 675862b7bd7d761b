"""Response models for the guest list API.

Fields are camelCased on the wire. Guest values that clients may overwrite
are passed back verbatim, so they are not coerced here.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.guest_list.repository.memory_models import Event, Guest


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GuestResponse(CamelModel):
    """Guest as returned to clients. ``deadline`` is left unset when never sent."""

    id: str
    first_name: Any
    last_name: Any
    deadline: Any = None
    attending: Any = None

    @classmethod
    def from_guest(cls, guest: Guest) -> "GuestResponse":
        data = {
            "id": guest.id,
            "first_name": guest.first_name,
            "last_name": guest.last_name,
            "attending": guest.attending,
        }
        if guest.deadline is not None:
            data["deadline"] = guest.deadline
        return cls(**data)


class EventResponse(CamelModel):
    event_id: str
    event_name: Any
    event_location: Any
    event_guest_list: list[GuestResponse] = []

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        return cls(
            event_id=event.event_id,
            event_name=event.event_name,
            event_location=event.event_location,
            event_guest_list=[GuestResponse.from_guest(guest) for guest in event.guest_list],
        )


class ErrorMessage(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    errors: list[ErrorMessage]
