from fastapi import APIRouter

from .features.add_guest.router import router as add_guest_router
from .features.create_event.router import router as create_event_router
from .features.delete_attending_guests.router import router as delete_attending_guests_router
from .features.delete_event.router import router as delete_event_router
from .features.delete_guest.router import router as delete_guest_router
from .features.list_event_guests.router import router as list_event_guests_router
from .features.list_events.router import router as list_events_router
from .features.modify_guest.router import router as modify_guest_router

router = APIRouter()

router.include_router(create_event_router)
router.include_router(list_events_router)
router.include_router(list_event_guests_router)
router.include_router(add_guest_router)
router.include_router(modify_guest_router)
router.include_router(delete_guest_router)
router.include_router(delete_attending_guests_router)
router.include_router(delete_event_router)
