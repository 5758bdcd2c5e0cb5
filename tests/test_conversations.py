"""Conversations, rosters and the participant/creator gates."""

import uuid


def test_create_conversation_adds_creator_and_participants(client, register, create_conversation):
    alice, bob, carol = register("alice"), register("bob"), register("carol")

    conversation = create_conversation(alice, bob, carol, name="Planning")

    assert conversation["name"] == "Planning"
    assert conversation["createdBy"] == alice.id
    assert conversation["creator"]["id"] == alice.id
    roster = [p["userId"] for p in conversation["participants"]]
    assert roster[0] == alice.id
    assert sorted(roster) == sorted([alice.id, bob.id, carol.id])
    assert all(p["user"]["email"] for p in conversation["participants"])


def test_participant_ids_are_deduplicated_and_creator_dropped(client, register):
    alice, bob = register("alice"), register("bob")

    response = client.post(
        "/conversations",
        json={"participantIds": [bob.id, bob.id, alice.id]},
        headers=alice.headers,
    )

    assert response.status_code == 201
    roster = [p["userId"] for p in response.json()["participants"]]
    assert len(roster) == 2
    assert set(roster) == {alice.id, bob.id}


def test_create_with_unknown_participant_is_atomic(client, register):
    alice, bob = register("alice"), register("bob")

    response = client.post(
        "/conversations",
        json={"name": "Broken", "participantIds": [bob.id, str(uuid.uuid4())]},
        headers=alice.headers,
    )

    assert response.status_code == 400
    assert response.json() == {"message": "One or more participant IDs are invalid"}
    assert client.get("/conversations", headers=alice.headers).json() == []
    assert client.get("/conversations", headers=bob.headers).json() == []


def test_list_visible_to_participants_only(client, register, create_conversation):
    alice, bob, carol, dave = (register(n) for n in ("alice", "bob", "carol", "dave"))
    conversation = create_conversation(alice, bob, carol)

    for user in (alice, bob, carol):
        listed = client.get("/conversations", headers=user.headers).json()
        assert isinstance(listed, list)
        assert [c["id"] for c in listed] == [conversation["id"]]

    assert client.get("/conversations", headers=dave.headers).json() == []


def test_list_is_newest_first(client, register, create_conversation):
    alice, bob = register("alice"), register("bob")
    first = create_conversation(alice, bob, name="first")
    second = create_conversation(alice, bob, name="second")

    listed = client.get("/conversations", headers=bob.headers).json()

    assert [c["id"] for c in listed] == [second["id"], first["id"]]


def test_show_distinguishes_missing_from_forbidden(client, register, create_conversation):
    alice, bob, outsider = register("alice"), register("bob"), register("outsider")
    conversation = create_conversation(alice, bob)

    ok = client.get(f"/conversations/{conversation['id']}", headers=bob.headers)
    forbidden = client.get(f"/conversations/{conversation['id']}", headers=outsider.headers)
    missing = client.get(f"/conversations/{uuid.uuid4()}", headers=alice.headers)

    assert ok.status_code == 200
    assert forbidden.status_code == 403
    assert forbidden.json() == {"message": "You are not a participant in this conversation"}
    assert missing.status_code == 404
    assert missing.json() == {"message": "Conversation not found"}


def test_only_creator_updates(client, register, create_conversation):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob, name="Old")
    url = f"/conversations/{conversation['id']}"

    denied = client.put(url, json={"name": "Hijacked"}, headers=bob.headers)
    assert denied.status_code == 403

    updated = client.put(url, json={"description": "Weekly sync"}, headers=alice.headers)
    assert updated.status_code == 200
    body = updated.json()
    # Fields not sent are left alone
    assert body["name"] == "Old"
    assert body["description"] == "Weekly sync"


def test_only_creator_deletes_and_delete_cascades(
    client, register, create_conversation, post_message
):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)
    message = post_message(bob, conversation["id"], "hi").json()
    url = f"/conversations/{conversation['id']}"

    assert client.delete(url, headers=bob.headers).status_code == 403
    assert client.delete(url, headers=alice.headers).status_code == 204

    assert client.get(url, headers=alice.headers).status_code == 404
    assert client.get(f"/messages/{message['id']}", headers=bob.headers).status_code == 404
    assert client.get("/conversations", headers=bob.headers).json() == []


def test_delete_missing_conversation_is_forbidden(client, register):
    alice = register("alice")

    response = client.delete(f"/conversations/{uuid.uuid4()}", headers=alice.headers)

    assert response.status_code == 403


def test_any_participant_can_add_others(client, register, create_conversation):
    alice, bob, carol = register("alice"), register("bob"), register("carol")
    conversation = create_conversation(alice, bob)
    url = f"/conversations/{conversation['id']}/participants"

    response = client.post(url, json={"userId": carol.id}, headers=bob.headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Participant added successfully"}
    assert client.get(f"/conversations/{conversation['id']}", headers=carol.headers).status_code == 200


def test_add_participant_failures(client, register, create_conversation):
    alice, bob, outsider = register("alice"), register("bob"), register("outsider")
    conversation = create_conversation(alice, bob)
    url = f"/conversations/{conversation['id']}/participants"

    already = client.post(url, json={"userId": bob.id}, headers=alice.headers)
    assert already.status_code == 400
    assert already.json() == {"message": "User is already a participant"}

    unknown = client.post(url, json={"userId": str(uuid.uuid4())}, headers=alice.headers)
    assert unknown.status_code == 404
    assert unknown.json() == {"message": "User not found"}

    not_member = client.post(url, json={"userId": outsider.id}, headers=outsider.headers)
    assert not_member.status_code == 403


def test_remove_participant_twice(client, register, create_conversation):
    alice, bob, carol = register("alice"), register("bob"), register("carol")
    conversation = create_conversation(alice, bob, carol)
    url = f"/conversations/{conversation['id']}/participants/{carol.id}"

    first = client.delete(url, headers=bob.headers)
    second = client.delete(url, headers=bob.headers)

    assert first.status_code == 200
    assert first.json() == {"message": "Participant removed successfully"}
    assert second.status_code == 404
    assert second.json() == {"message": "Participant not found"}
    assert client.get(f"/conversations/{conversation['id']}", headers=carol.headers).status_code == 403


def test_participant_may_remove_creator(client, register, create_conversation):
    alice, bob = register("alice"), register("bob")
    conversation = create_conversation(alice, bob)

    response = client.delete(
        f"/conversations/{conversation['id']}/participants/{alice.id}", headers=bob.headers
    )

    assert response.status_code == 200
    assert client.get("/conversations", headers=alice.headers).json() == []


def test_non_participant_cannot_remove(client, register, create_conversation):
    alice, bob, outsider = register("alice"), register("bob"), register("outsider")
    conversation = create_conversation(alice, bob)

    response = client.delete(
        f"/conversations/{conversation['id']}/participants/{bob.id}", headers=outsider.headers
    )

    assert response.status_code == 403


def test_malformed_ids_are_validation_errors(client, register):
    alice = register("alice")

    response = client.get("/conversations/not-a-uuid", headers=alice.headers)

    assert response.status_code == 422
    assert response.json()["message"] == "Validation failed"
