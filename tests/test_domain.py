from datetime import datetime, timedelta, timezone

import pytest

from roomchat.application.queries.messages.list_messages import ListMessagesQuery
from roomchat.domain.entities import AccessToken, Conversation, Message, TokenType
from roomchat.domain.exceptions import DomainValidationError
from roomchat.domain.value_objects import ConversationId, MessageId, UserEmail, UserId


def test_message_content_is_trimmed_and_required():
    message = Message.create(ConversationId.generate(), UserId.generate(), "  hi  ")
    assert message.content == "hi"
    assert not message.is_edited

    with pytest.raises(DomainValidationError) as excinfo:
        Message.create(ConversationId.generate(), UserId.generate(), "   ")
    assert excinfo.value.field == "content"


def test_message_edit_marks_edited():
    message = Message.create(ConversationId.generate(), UserId.generate(), "draft")

    message.edit("final")
    first = message.edited_at
    message.edit("final again")

    assert message.is_edited
    assert message.content == "final again"
    assert message.edited_at >= first
    assert message.updated_at == message.edited_at


def test_message_authorship():
    author = UserId.generate()
    message = Message.create(ConversationId.generate(), author, "mine")

    assert message.is_authored_by(author)
    assert not message.is_authored_by(UserId.generate())


def test_conversation_update_merges_known_fields_only():
    conversation = Conversation.create(UserId.generate(), name="Old", description="keep")

    conversation.update_details({"name": "New"})
    assert (conversation.name, conversation.description) == ("New", "keep")

    with pytest.raises(ValueError):
        conversation.update_details({"created_by": str(UserId.generate())})


def test_access_token_digest_and_expiry():
    token = AccessToken.create(UserId.generate(), TokenType.GUEST, timedelta(days=7), ["guest"])
    token.bind_secret("secret-value")

    assert token.matches("secret-value")
    assert not token.matches("other-value")
    assert token.token_hash != "secret-value"
    assert not token.is_expired()
    assert token.is_expired(datetime.now(timezone.utc) + timedelta(days=8))


def test_identifiers_must_be_uuids():
    with pytest.raises(ValueError):
        MessageId("42")
    with pytest.raises(ValueError):
        UserId("")


def test_email_normalization():
    assert UserEmail.normalized("  Alice@Example.COM ").value == "alice@example.com"


def test_message_page_bounds_are_validation_errors():
    conversation_id, user_id = ConversationId.generate(), UserId.generate()

    with pytest.raises(DomainValidationError) as page_error:
        ListMessagesQuery(conversation_id=conversation_id, user_id=user_id, page=0)
    with pytest.raises(DomainValidationError) as limit_error:
        ListMessagesQuery(conversation_id=conversation_id, user_id=user_id, per_page=0)

    assert page_error.value.field == "page"
    assert limit_error.value.field == "limit"
