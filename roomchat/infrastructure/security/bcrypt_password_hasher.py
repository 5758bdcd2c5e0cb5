import bcrypt

from roomchat.domain.ports.password_hasher import PasswordHasher

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input
_BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def _encode(self, plain_password: str) -> bytes:
        return plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]

    def hash(self, plain_password: str) -> str:
        """Hashes the password using bcrypt"""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(self._encode(plain_password), salt).decode()

    def verify(self, plain_password: str, password_hash: str) -> bool:
        """Verifies a password against its hash"""
        try:
            return bcrypt.checkpw(self._encode(plain_password), password_hash.encode())
        except ValueError:
            # Malformed stored hash
            return False
