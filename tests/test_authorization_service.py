"""
ConversationAuthorizationService and the roster's uniqueness guarantee,
exercised directly against SQLAlchemy repositories on a SQLite file.
"""

import asyncio

import pytest

from roomchat.application.services import ConversationAuthorizationService
from roomchat.domain.entities import Conversation, Participant, User
from roomchat.domain.exceptions import (
    AlreadyParticipantError,
    ConversationNotFoundError,
    NotAParticipantError,
    NotCreatorError,
)
from roomchat.domain.value_objects import ConversationId, UserEmail
from roomchat.infrastructure.persistence import (
    SqlAlchemyConversationRepository,
    SqlAlchemyParticipantRepository,
    SqlAlchemyUserRepository,
    create_engine,
    create_schema,
    create_session_factory,
)


def run(database_url, scenario):
    async def _main():
        engine = create_engine(database_url)
        try:
            await create_schema(engine)
            return await scenario(create_session_factory(engine))
        finally:
            await engine.dispose()

    return asyncio.run(_main())


async def seed(session_factory, *names):
    """Create users and one conversation created by the first, joined by all but the last."""
    async with session_factory() as session:
        users = [User.create(UserEmail(f"{name}@example.com"), "not-a-real-hash") for name in names]
        user_repository = SqlAlchemyUserRepository(session)
        for user in users:
            await user_repository.add(user)

        conversation = Conversation.create(created_by=users[0].id, name="seeded")
        await SqlAlchemyConversationRepository(session).add(conversation)
        await SqlAlchemyParticipantRepository(session).add_many(
            [Participant.join(conversation.id, user.id) for user in users[:-1]]
        )
        await session.commit()
    return conversation, users


def authorization_for(session):
    return ConversationAuthorizationService(
        conversation_repository=SqlAlchemyConversationRepository(session),
        participant_repository=SqlAlchemyParticipantRepository(session),
    )


def test_predicates(database_url):
    async def scenario(session_factory):
        conversation, (alice, bob, outsider) = await seed(
            session_factory, "alice", "bob", "outsider"
        )
        missing = ConversationId.generate()

        async with session_factory() as session:
            authz = authorization_for(session)
            return {
                "alice_participant": await authz.is_participant(conversation.id, alice.id),
                "bob_participant": await authz.is_participant(conversation.id, bob.id),
                "outsider_participant": await authz.is_participant(conversation.id, outsider.id),
                "missing_participant": await authz.is_participant(missing, alice.id),
                "alice_creator": await authz.is_creator(conversation.id, alice.id),
                "bob_creator": await authz.is_creator(conversation.id, bob.id),
                "missing_creator": await authz.is_creator(missing, alice.id),
            }

    result = run(database_url, scenario)

    assert result == {
        "alice_participant": True,
        "bob_participant": True,
        "outsider_participant": False,
        "missing_participant": False,
        "alice_creator": True,
        "bob_creator": False,
        "missing_creator": False,
    }


def test_ensure_gates(database_url):
    async def scenario(session_factory):
        conversation, (alice, bob, outsider) = await seed(
            session_factory, "alice", "bob", "outsider"
        )
        async with session_factory() as session:
            authz = authorization_for(session)

            await authz.ensure_participant(conversation.id, bob.id)
            await authz.ensure_creator(conversation.id, alice.id)

            with pytest.raises(NotAParticipantError):
                await authz.ensure_participant(conversation.id, outsider.id)
            with pytest.raises(NotCreatorError):
                await authz.ensure_creator(conversation.id, bob.id)

    run(database_url, scenario)


def test_get_conversation_for_user_checks_existence_first(database_url):
    async def scenario(session_factory):
        conversation, (alice, _, outsider) = await seed(session_factory, "alice", "bob", "outsider")
        async with session_factory() as session:
            authz = authorization_for(session)

            loaded = await authz.get_conversation_for_user(conversation.id, alice.id)
            assert loaded.id == conversation.id

            with pytest.raises(ConversationNotFoundError):
                await authz.get_conversation_for_user(ConversationId.generate(), outsider.id)
            with pytest.raises(NotAParticipantError):
                await authz.get_conversation_for_user(conversation.id, outsider.id)

    run(database_url, scenario)


def test_membership_changes_are_seen_immediately(database_url):
    async def scenario(session_factory):
        conversation, (_, bob, _) = await seed(session_factory, "alice", "bob", "outsider")
        async with session_factory() as session:
            authz = authorization_for(session)
            participants = SqlAlchemyParticipantRepository(session)

            assert await authz.is_participant(conversation.id, bob.id)
            await participants.delete(await participants.get(conversation.id, bob.id))
            await session.commit()
            assert not await authz.is_participant(conversation.id, bob.id)

    run(database_url, scenario)


def test_losing_add_participant_race_reports_already_participant(database_url):
    async def scenario(session_factory):
        conversation, (_, _, late) = await seed(session_factory, "alice", "bob", "late")

        async with session_factory() as first, session_factory() as second:
            first_repo = SqlAlchemyParticipantRepository(first)
            second_repo = SqlAlchemyParticipantRepository(second)

            # Both requests pass the "not yet a participant" check
            assert await first_repo.get(conversation.id, late.id) is None
            assert await second_repo.get(conversation.id, late.id) is None

            await first_repo.add(Participant.join(conversation.id, late.id))
            await first.commit()

            with pytest.raises(AlreadyParticipantError):
                await second_repo.add(Participant.join(conversation.id, late.id))

        async with session_factory() as session:
            roster = await SqlAlchemyParticipantRepository(session).get_by_conversation(
                conversation.id
            )
        return [p.user_id for p in roster].count(late.id)

    assert run(database_url, scenario) == 1


def test_add_participant_to_vanished_conversation_is_not_reported_as_duplicate(database_url):
    async def scenario(session_factory):
        conversation, (_, _, late) = await seed(session_factory, "alice", "bob", "late")

        async with session_factory() as first, session_factory() as second:
            # The room is deleted between the membership check and the insert
            assert await SqlAlchemyParticipantRepository(first).get(conversation.id, late.id) is None
            conversations = SqlAlchemyConversationRepository(second)
            assert await conversations.delete(conversation.id)
            await second.commit()

            with pytest.raises(ConversationNotFoundError):
                await SqlAlchemyParticipantRepository(first).add(
                    Participant.join(conversation.id, late.id)
                )

    run(database_url, scenario)
