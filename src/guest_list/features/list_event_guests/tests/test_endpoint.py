import pytest

from src.guest_list.urls import ADD_GUEST_URL, LIST_EVENT_GUESTS_URL


@pytest.mark.asyncio
async def test_list_event_guests(client):
    """Test listing the guests of the fixture event."""
    response = await client.get(LIST_EVENT_GUESTS_URL, params={"id": "100"})

    assert response.status_code == 200
    assert [guest["id"] for guest in response.json()] == ["100-100"]


@pytest.mark.asyncio
async def test_list_event_guests_trailing_slash(client):
    """Test the path with a trailing slash serves the same list."""
    response = await client.get(LIST_EVENT_GUESTS_URL + "/", params={"id": "100"})

    assert response.status_code == 200
    assert len(response.json()) == 1


@pytest.mark.asyncio
async def test_list_event_guests_keeps_insertion_order(client):
    """Test guests come back in the order they were added."""
    for first_name in ("Ann", "Bob", "Cid"):
        await client.post(ADD_GUEST_URL, json={"eventId": "100", "firstName": first_name, "lastName": "X"})

    response = await client.get(LIST_EVENT_GUESTS_URL, params={"id": "100"})

    assert [guest["firstName"] for guest in response.json()] == ["firstName", "Ann", "Bob", "Cid"]


@pytest.mark.asyncio
async def test_list_event_guests_missing_id(client):
    """Test that the id query parameter is required."""
    response = await client.get(LIST_EVENT_GUESTS_URL)

    assert response.status_code == 400
    assert response.json() == {"errors": [{"message": "Request body missing an event id"}]}


@pytest.mark.asyncio
async def test_list_event_guests_unknown_event(client):
    """Test that an unknown event yields an empty 200 response."""
    response = await client.get(LIST_EVENT_GUESTS_URL, params={"id": "999"})

    assert response.status_code == 200
    assert response.content == b""
