"""
Access Token Repository Port.
Implementation: roomchat/infrastructure/persistence/sqlalchemy_access_token_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from roomchat.domain.entities.access_token import AccessToken
from roomchat.domain.value_objects.token_id import TokenId


class AccessTokenRepository(ABC):
    @abstractmethod
    async def get_by_id(self, token_id: TokenId) -> Optional[AccessToken]: ...

    @abstractmethod
    async def add(self, token: AccessToken) -> None: ...

    @abstractmethod
    async def delete(self, token_id: TokenId) -> bool: ...
