# mypy: ignore-errors
# tests/v1/test_messages.py
"""Tests for message-related endpoints."""

from __future__ import annotations

import uuid

from fastapi import status
from fastapi.testclient import TestClient

from cleaning_platform.api.v1.dependencies import get_contact_resolver


def _send(client, headers, receiver, body="hello"):
    return client.post(
        "/api/messages",
        json={"receiver_id": str(receiver.id), "message": body},
        headers=headers,
    )


def _conversation_ids(client, headers, other) -> list[int]:
    response = client.get(f"/api/messages/conversation/{other.id}", headers=headers)
    assert response.status_code == status.HTTP_200_OK
    return [message["id"] for message in response.json()["data"]]


def test_requires_token(client) -> None:
    response = client.get("/api/messages/users/list")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["success"] is False


def test_rejects_invalid_token(client) -> None:
    response = client.get(
        "/api/messages/users/list",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_housekeeper_sends_to_owner(client, housekeeper, owner, housekeeper_headers) -> None:
    response = _send(client, housekeeper_headers, owner, "  hi  ")
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["sender_id"] == str(housekeeper.id)
    assert data["receiver_id"] == str(owner.id)
    assert data["message"] == "hi"
    assert data["deleted_for_sender"] is False
    assert data["deleted_for_receiver"] is False


def test_owner_cannot_cold_contact_housekeeper(client, housekeeper, owner_headers) -> None:
    response = _send(client, owner_headers, housekeeper)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["success"] is False


def test_owner_to_owner(client, other_owner, owner_headers) -> None:
    assert _send(client, owner_headers, other_owner).status_code == status.HTTP_201_CREATED


def test_send_to_unknown_receiver(client, owner_headers) -> None:
    response = client.post(
        "/api/messages",
        json={"receiver_id": str(uuid.uuid4()), "message": "hello"},
        headers=owner_headers,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Receiver not found"


def test_send_to_self(client, owner, owner_headers) -> None:
    response = _send(client, owner_headers, owner)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Cannot send message to yourself"


def test_send_blank_message(client, owner, housekeeper_headers) -> None:
    response = _send(client, housekeeper_headers, owner, "   ")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Message cannot be empty"


def test_send_missing_body_field(client, owner, housekeeper_headers) -> None:
    response = client.post(
        "/api/messages",
        json={"receiver_id": str(owner.id)},
        headers=housekeeper_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "message is required"


def test_contacts_for_housekeeper(client, owner, other_owner, housekeeper_headers) -> None:
    response = client.get("/api/messages/users/list", headers=housekeeper_headers)
    assert response.status_code == status.HTTP_200_OK
    names = [profile["name"] for profile in response.json()["data"]]
    assert names == ["Alice Owner", "Carol Owner"]


def test_contacts_for_owner_grow_with_history(
    client, owner, other_owner, housekeeper, owner_headers, housekeeper_headers
) -> None:
    response = client.get("/api/messages/users/list", headers=owner_headers)
    assert [p["user_id"] for p in response.json()["data"]] == [str(other_owner.id)]

    _send(client, housekeeper_headers, owner)

    response = client.get("/api/messages/users/list", headers=owner_headers)
    assert [p["user_id"] for p in response.json()["data"]] == [
        str(other_owner.id),
        str(housekeeper.id),
    ]


def test_conversation_view(client, owner, housekeeper, owner_headers, housekeeper_headers) -> None:
    first = _send(client, housekeeper_headers, owner, "one").json()["data"]["id"]
    second = _send(client, owner_headers, housekeeper, "two").json()["data"]["id"]

    assert _conversation_ids(client, owner_headers, housekeeper) == [first, second]
    assert _conversation_ids(client, housekeeper_headers, owner) == [first, second]


def test_delete_for_me(client, owner, housekeeper, owner_headers, housekeeper_headers) -> None:
    message_id = _send(client, housekeeper_headers, owner, "hi").json()["data"]["id"]

    response = client.delete(f"/api/messages/{message_id}", headers=owner_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["deleted_for_receiver"] is True
    assert response.json()["data"]["deleted_for_sender"] is False

    assert _conversation_ids(client, owner_headers, housekeeper) == []
    assert _conversation_ids(client, housekeeper_headers, owner) == [message_id]

    again = client.delete(f"/api/messages/{message_id}", headers=owner_headers)
    assert again.status_code == status.HTTP_200_OK
    assert again.json()["data"] == response.json()["data"]


def test_delete_for_everyone(client, owner, housekeeper, owner_headers, housekeeper_headers) -> None:
    message_id = _send(client, housekeeper_headers, owner, "oops").json()["data"]["id"]

    response = client.delete(
        f"/api/messages/{message_id}",
        params={"for_everyone": "true"},
        headers=housekeeper_headers,
    )
    assert response.status_code == status.HTTP_200_OK

    assert _conversation_ids(client, owner_headers, housekeeper) == []
    assert _conversation_ids(client, housekeeper_headers, owner) == []


def test_receiver_cannot_delete_for_everyone(
    client, owner, housekeeper, owner_headers, housekeeper_headers
) -> None:
    message_id = _send(client, housekeeper_headers, owner).json()["data"]["id"]

    response = client.delete(
        f"/api/messages/{message_id}",
        params={"for_everyone": "true"},
        headers=owner_headers,
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert _conversation_ids(client, owner_headers, housekeeper) == [message_id]


def test_outsider_cannot_delete(
    client, owner, housekeeper, housekeeper_headers, other_owner_headers
) -> None:
    message_id = _send(client, housekeeper_headers, owner).json()["data"]["id"]

    response = client.delete(f"/api/messages/{message_id}", headers=other_owner_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_delete_missing_message(client, owner_headers) -> None:
    response = client.delete("/api/messages/424242", headers=owner_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["message"] == "Message not found"


def test_delete_id_beyond_integer_range(client, owner_headers) -> None:
    response = client.delete(f"/api/messages/{10**20}", headers=owner_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"success": False, "message": "Message not found"}


def test_get_all_messages(
    client, owner, other_owner, housekeeper, owner_headers, housekeeper_headers
) -> None:
    received = _send(client, housekeeper_headers, owner, "to owner").json()["data"]["id"]
    sent = _send(client, owner_headers, other_owner, "to other").json()["data"]["id"]
    hidden = _send(client, owner_headers, housekeeper, "hidden").json()["data"]["id"]
    client.delete(f"/api/messages/{hidden}", headers=owner_headers)

    response = client.get(f"/api/messages/{owner.id}", headers=owner_headers)
    assert response.status_code == status.HTTP_200_OK
    assert [m["id"] for m in response.json()["data"]] == [received, sent]


def test_get_all_messages_of_someone_else(client, housekeeper, owner_headers) -> None:
    response = client.get(f"/api/messages/{housekeeper.id}", headers=owner_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["message"] == "Unauthorized to view these messages"


def test_unknown_route(client) -> None:
    response = client.get("/api/nothing-here")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"success": False, "message": "Route not found"}


def test_unexpected_error_keeps_envelope(app, owner_headers) -> None:
    def _broken_resolver():
        raise RuntimeError("resolver offline")

    app.dependency_overrides[get_contact_resolver] = _broken_resolver
    try:
        with TestClient(app, base_url="http://test", raise_server_exceptions=False) as client:
            response = client.get("/api/messages/users/list", headers=owner_headers)
    finally:
        app.dependency_overrides.pop(get_contact_resolver, None)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {
        "success": False,
        "message": "Internal server error",
        "error": "resolver offline",
    }
