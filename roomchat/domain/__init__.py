"""
DOMAIN LAYER - Conversations, participants and threaded messages

This layer contains:
- Entities: Business objects with identity (User, AccessToken, Conversation,
  Participant, Message)
- Value Objects: Immutable types (UserId, ConversationId, MessageId, ...)
- Ports: Interfaces that infrastructure implements
- Exceptions: Typed domain errors

RULES:
1. NO framework imports (no FastAPI, SQLAlchemy, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
