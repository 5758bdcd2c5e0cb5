"""Messages: pagination, replies, ownership and reply survival."""

import uuid
from datetime import datetime


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_create_and_get_message(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob, name="General")

    created = post_message(alice, conversation["id"], "  hello  ")

    assert created.status_code == 201
    message = created.json()
    assert message["content"] == "hello"
    assert message["userId"] == alice.id
    assert message["user"]["id"] == alice.id
    assert message["replyToId"] is None
    assert message["replyTo"] is None
    assert message["editedAt"] is None

    fetched = client.get(f"/messages/{message['id']}", headers=bob.headers)
    assert fetched.status_code == 200
    assert fetched.json()["conversation"] == {"id": conversation["id"], "name": "General"}


def test_blank_content_is_rejected(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)

    response = post_message(alice, conversation["id"], "   ")

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "content"


def test_non_participant_cannot_read_or_post(
    client, register, create_conversation, post_message
):
    alice, bob, outsider = register("alice"), register("bob"), register("outsider")
    conversation = create_conversation(alice, bob)
    message = post_message(alice, conversation["id"], "secret").json()

    assert post_message(outsider, conversation["id"], "let me in").status_code == 403
    assert (
        client.get(f"/conversations/{conversation['id']}/messages", headers=outsider.headers)
        .status_code
        == 403
    )
    assert client.get(f"/messages/{message['id']}", headers=outsider.headers).status_code == 403
    assert client.get(f"/messages/{uuid.uuid4()}", headers=alice.headers).status_code == 404


def test_reply_carries_shallow_summary(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)
    original = post_message(alice, conversation["id"], "hello").json()

    reply = post_message(bob, conversation["id"], "hi back", reply_to_id=original["id"])

    assert reply.status_code == 201
    body = reply.json()
    assert body["replyToId"] == original["id"]
    assert body["replyTo"]["content"] == "hello"
    assert body["replyTo"]["userId"] == alice.id
    assert body["replyTo"]["user"]["id"] == alice.id

    # Replies to replies only preview one level
    nested = post_message(alice, conversation["id"], "deeper", reply_to_id=body["id"]).json()
    assert nested["replyTo"]["id"] == body["id"]
    assert "replyTo" not in nested["replyTo"]


def test_reply_target_must_exist(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)

    response = post_message(alice, conversation["id"], "orphan", reply_to_id=str(uuid.uuid4()))

    assert response.status_code == 404
    assert response.json() == {"message": "Message to reply to not found"}


def test_cross_conversation_reply_is_rejected(
    client, register, create_conversation, post_message
):
    alice, bob = register("alice"), register("bob")
    room_x = create_conversation(alice, bob, name="X")
    room_y = create_conversation(alice, bob, name="Y")
    in_x = post_message(alice, room_x["id"], "in X").json()

    response = post_message(bob, room_y["id"], "wrong room", reply_to_id=in_x["id"])

    assert response.status_code == 400
    assert response.json() == {"message": "Cannot reply to a message from a different conversation"}
    page = client.get(f"/conversations/{room_y['id']}/messages", headers=bob.headers).json()
    assert page["meta"]["total"] == 0


def test_cross_conversation_reply_rejected_when_caller_not_in_target_room(
    client, register, create_conversation, post_message
):
    alice, bob, carol = register("alice"), register("bob"), register("carol")
    room_x = create_conversation(alice, carol, name="X")
    room_y = create_conversation(carol, bob, name="Y")
    in_x = post_message(alice, room_x["id"], "only for X").json()

    response = post_message(bob, room_y["id"], "reaching across", reply_to_id=in_x["id"])

    assert response.status_code == 400
    assert response.json() == {"message": "Cannot reply to a message from a different conversation"}


def test_pagination_newest_first(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)
    for i in range(120):
        assert post_message(alice, conversation["id"], f"message {i}").status_code == 201
    url = f"/conversations/{conversation['id']}/messages"

    pages = [
        client.get(url, params={"page": n, "limit": 50}, headers=bob.headers).json()
        for n in (1, 2, 3)
    ]

    assert [len(p["data"]) for p in pages] == [50, 50, 20]
    assert pages[0]["meta"] == {
        "total": 120,
        "perPage": 50,
        "currentPage": 1,
        "lastPage": 3,
        "firstPage": 1,
    }
    ids = [m["id"] for p in pages for m in p["data"]]
    assert len(set(ids)) == 120
    created = [_parse(m["createdAt"]) for p in pages for m in p["data"]]
    assert created == sorted(created, reverse=True)


def test_default_page_size_and_limit_bounds(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)
    post_message(alice, conversation["id"], "only one")
    url = f"/conversations/{conversation['id']}/messages"

    page = client.get(url, headers=alice.headers).json()
    assert page["meta"]["perPage"] == 50
    assert page["meta"]["lastPage"] == 1

    assert client.get(url, params={"page": 0}, headers=alice.headers).status_code == 422
    assert client.get(url, params={"limit": 1000}, headers=alice.headers).status_code == 422


def test_only_author_edits(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)
    message = post_message(alice, conversation["id"], "draft").json()
    url = f"/messages/{message['id']}"

    denied = client.put(url, json={"content": "vandalized"}, headers=bob.headers)
    assert denied.status_code == 403

    edited = client.put(url, json={"content": "final"}, headers=alice.headers)
    assert edited.status_code == 200
    first_edit = edited.json()
    assert first_edit["content"] == "final"
    assert first_edit["editedAt"] is not None

    again = client.put(url, json={"content": "final v2"}, headers=alice.headers).json()
    assert again["editedAt"] is not None
    assert _parse(again["editedAt"]) >= _parse(first_edit["editedAt"])


def test_only_author_deletes(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)
    message = post_message(alice, conversation["id"], "mine").json()
    url = f"/messages/{message['id']}"

    assert client.delete(url, headers=bob.headers).status_code == 403
    assert client.delete(url, headers=alice.headers).status_code == 204
    assert client.delete(url, headers=alice.headers).status_code == 404


def test_author_who_left_cannot_edit(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)
    message = post_message(bob, conversation["id"], "bye").json()
    client.delete(
        f"/conversations/{conversation['id']}/participants/{bob.id}", headers=alice.headers
    )

    response = client.put(
        f"/messages/{message['id']}", json={"content": "edited after leaving"}, headers=bob.headers
    )

    assert response.status_code == 403
    assert response.json() == {"message": "You are not a participant in this conversation"}


def test_deleting_reply_target_keeps_reply(client, register, create_conversation, post_message):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)
    target = post_message(alice, conversation["id"], "original").json()
    reply = post_message(bob, conversation["id"], "reply", reply_to_id=target["id"]).json()

    assert client.delete(f"/messages/{target['id']}", headers=alice.headers).status_code == 204

    survived = client.get(f"/messages/{reply['id']}", headers=bob.headers)
    assert survived.status_code == 200
    assert survived.json()["replyToId"] is None
    assert survived.json()["replyTo"] is None
