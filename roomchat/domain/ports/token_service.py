"""
Token Service Port - Turns a persisted AccessToken into a bearer secret and back.
Implementation: roomchat/infrastructure/security/jwt_token_service.py
"""

from abc import ABC, abstractmethod
from roomchat.domain.entities.access_token import AccessToken
from roomchat.domain.value_objects.token_id import TokenId


class TokenService(ABC):
    @abstractmethod
    def encode(self, token: AccessToken) -> str:
        """Return the opaque secret handed to the client."""
        ...

    @abstractmethod
    def decode(self, secret: str) -> TokenId:
        """Validate the secret and return the id of the token row it refers to.

        Raises:
            InvalidTokenError: signature, claims or expiry check failed
        """
        ...
