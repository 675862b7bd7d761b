CREATE_EVENT_URL = "/newEvent"
LIST_EVENTS_URL = "/events"
LIST_EVENT_GUESTS_URL = "/allEventGuests"
ADD_GUEST_URL = "/addNewGuestToEvent"
MODIFY_GUEST_URL = "/ModifyEG/{guest_id}"
DELETE_GUEST_URL = "/eventGuest/{guest_id}"
DELETE_ATTENDING_GUESTS_URL = "/deleteAttendingEventGuests/{event_id}"
DELETE_EVENT_URL = "/deleteEvent/{event_id}"
DELETE_EVENT_WITHOUT_ID_URLS = ("/deleteEvent", "/deleteEvent/")
