"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/     → Data persistence interfaces
- unit_of_work.py   → Transaction boundary
- password_hasher.py→ Credential hashing
- token_service.py  → Access-token encoding/decoding
"""

from roomchat.domain.ports.unit_of_work import UnitOfWork
from roomchat.domain.ports.password_hasher import PasswordHasher
from roomchat.domain.ports.token_service import TokenService

__all__ = [
    "UnitOfWork",
    "PasswordHasher",
    "TokenService",
]
