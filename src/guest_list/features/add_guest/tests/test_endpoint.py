import pytest

from src.guest_list.urls import ADD_GUEST_URL, CREATE_EVENT_URL, LIST_EVENT_GUESTS_URL


@pytest.mark.asyncio
async def test_add_guest_to_new_event(client):
    """Test adding a guest to a freshly created event."""
    event = (await client.post(CREATE_EVENT_URL, json={"eventName": "Party", "eventLocation": "Hall"})).json()

    response = await client.post(
        ADD_GUEST_URL,
        json={"eventId": event["eventId"], "firstName": "A", "lastName": "B"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "id": "1-1",
        "firstName": "A",
        "lastName": "B",
        "attending": "false",
    }


@pytest.mark.asyncio
async def test_add_guest_with_deadline(client):
    """Test that a deadline is kept when sent."""
    response = await client.post(
        ADD_GUEST_URL,
        json={"eventId": "100", "firstName": "A", "lastName": "B", "deadline": "2026-12-01"},
    )

    assert response.status_code == 200
    assert response.json()["deadline"] == "2026-12-01"


@pytest.mark.asyncio
async def test_add_guest_with_empty_deadline_omits_it(client):
    """Test that an empty deadline is treated as not sent."""
    response = await client.post(
        ADD_GUEST_URL,
        json={"eventId": "100", "firstName": "A", "lastName": "B", "deadline": ""},
    )

    assert response.status_code == 200
    assert "deadline" not in response.json()


@pytest.mark.asyncio
async def test_added_guests_share_event_prefix(client):
    """Test every guest id starts with its event id."""
    event = (await client.post(CREATE_EVENT_URL, json={"eventName": "Party", "eventLocation": "Hall"})).json()
    for first_name in ("Ann", "Bob"):
        await client.post(ADD_GUEST_URL, json={"eventId": event["eventId"], "firstName": first_name, "lastName": "X"})
        await client.post(ADD_GUEST_URL, json={"eventId": "100", "firstName": first_name, "lastName": "X"})

    for event_id in (event["eventId"], "100"):
        guests = (await client.get(LIST_EVENT_GUESTS_URL, params={"id": event_id})).json()
        assert all(guest["id"].startswith(f"{event_id}-") for guest in guests)


@pytest.mark.asyncio
async def test_add_guest_sequence_is_shared_across_events(client):
    """Test the guest sequence counts across all events."""
    event = (await client.post(CREATE_EVENT_URL, json={"eventName": "Party", "eventLocation": "Hall"})).json()

    first = await client.post(ADD_GUEST_URL, json={"eventId": "100", "firstName": "A", "lastName": "B"})
    second = await client.post(ADD_GUEST_URL, json={"eventId": event["eventId"], "firstName": "C", "lastName": "D"})

    assert first.json()["id"] == "100-1"
    assert second.json()["id"] == "1-2"


@pytest.mark.asyncio
async def test_add_guest_missing_last_name(client):
    """Test that a missing last name is rejected."""
    response = await client.post(ADD_GUEST_URL, json={"eventId": "100", "firstName": "A"})

    assert response.status_code == 400
    assert response.json() == {"errors": [{"message": "No event id, first or last name given."}]}


@pytest.mark.asyncio
async def test_add_guest_unexpected_fields(client):
    """Test that keys beyond the guest fields are rejected."""
    response = await client.post(
        ADD_GUEST_URL,
        json={"eventId": "100", "firstName": "A", "lastName": "B", "attending": "true"},
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["message"] == (
        "Request body contains more than event id, first and last name"
    )


@pytest.mark.asyncio
async def test_add_guest_unknown_event(client, store):
    """Test that adding to an unknown event is a 404 and uses no sequence number."""
    response = await client.post(ADD_GUEST_URL, json={"eventId": "999", "firstName": "A", "lastName": "B"})

    assert response.status_code == 404
    assert response.json() == {"errors": [{"message": "Event 999 not found"}]}

    follow_up = await client.post(ADD_GUEST_URL, json={"eventId": "100", "firstName": "A", "lastName": "B"})
    assert follow_up.json()["id"] == "100-1"


@pytest.mark.asyncio
async def test_add_guest_non_string_event_id(client, store):
    """Test that a list as event id is an unknown event, not a server error."""
    response = await client.post(ADD_GUEST_URL, json={"eventId": ["100"], "firstName": "A", "lastName": "B"})

    assert response.status_code == 404
    assert len(response.json()["errors"]) == 1
    assert [guest.id for guest in store.get_event("100").guest_list] == ["100-100"]


@pytest.mark.asyncio
async def test_add_guest_object_event_id(client):
    """Test that an object as event id is an unknown event too."""
    response = await client.post(ADD_GUEST_URL, json={"eventId": {"id": "100"}, "firstName": "A", "lastName": "B"})

    assert response.status_code == 404
    assert "errors" in response.json()


@pytest.mark.asyncio
async def test_add_guest_accepts_object_name(client):
    """Test that an empty object counts as a given name."""
    response = await client.post(ADD_GUEST_URL, json={"eventId": "100", "firstName": {}, "lastName": "B"})

    assert response.status_code == 200
    assert response.json()["firstName"] == {}


@pytest.mark.asyncio
async def test_add_guest_zero_name_is_missing(client):
    """Test that 0 counts as a missing name."""
    response = await client.post(ADD_GUEST_URL, json={"eventId": "100", "firstName": 0, "lastName": "B"})

    assert response.status_code == 400
