from dataclasses import dataclass, field
from typing import Any

ATTENDING_DEFAULT = "false"
GUEST_ID_SEPARATOR = "-"

EVENT_FIELDS = ("eventName", "eventLocation")
NEW_GUEST_FIELDS = ("eventId", "firstName", "lastName")
NEW_GUEST_OPTIONAL_FIELDS = ("deadline",)
GUEST_CHANGE_FIELDS = ("firstName", "lastName", "deadline", "attending")

DELETED_ATTENDING_GUESTS_MESSAGE = "Deleted all attending guests."


class GuestListError(Exception):
    """Base error for rejected guest list requests."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class MissingFieldError(GuestListError):
    """Raised when a required field is absent or empty."""


class UnexpectedFieldsError(GuestListError):
    """Raised when a create payload carries keys it does not accept."""


class DisallowedFieldsError(GuestListError):
    """Raised when a guest update carries keys outside the allowed set."""

    def __init__(self, allowed: tuple[str, ...], extra: list[str]) -> None:
        self.allowed = allowed
        self.extra = extra
        super().__init__(
            f"Request body contains more than allowed properties ({', '.join(allowed)}). "
            f"The request also contains these extra keys that are not allowed: {', '.join(extra)}"
        )


class EventNotFoundError(GuestListError):
    status_code = 404

    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")


class GuestNotFoundError(GuestListError):
    status_code = 404

    def __init__(self, guest_id: str) -> None:
        self.guest_id = guest_id
        super().__init__(f"Guest {guest_id} not found")


@dataclass(frozen=True)
class NewEventDTO:
    """DTO for event creation."""

    event_name: str
    event_location: str


@dataclass(frozen=True)
class NewGuestDTO:
    """DTO for adding a guest to an event."""

    event_id: str
    first_name: str
    last_name: str
    deadline: str | None = None


@dataclass(frozen=True)
class GuestChangesDTO:
    """DTO for a partial guest update.

    ``changes`` holds only the keys the client sent, keyed by their wire
    names, so that "not sent" and "sent as empty" stay distinguishable.
    """

    changes: dict[str, Any] = field(default_factory=dict)

    @property
    def first_name(self) -> Any:
        return self.changes.get("firstName")

    @property
    def last_name(self) -> Any:
        return self.changes.get("lastName")

    @property
    def deadline(self) -> Any:
        return self.changes.get("deadline")

    @property
    def sets_deadline(self) -> bool:
        return not is_empty_value(self.deadline) or self.deadline == ""

    @property
    def sets_attending(self) -> bool:
        return "attending" in self.changes

    @property
    def attending(self) -> Any:
        return self.changes.get("attending")


def event_id_from_guest_id(guest_id: str) -> str:
    return guest_id.split(GUEST_ID_SEPARATOR, 1)[0]


def is_empty_value(value: Any) -> bool:
    """True for the JSON values that count as "not given": null, false, 0 and "".

    Empty lists and objects are real values here.
    """
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0
