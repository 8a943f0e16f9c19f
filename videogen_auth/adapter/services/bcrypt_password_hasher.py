import bcrypt

from videogen_auth.app.services.password_hasher import IPasswordHasher

# bcrypt refuses (or silently truncates) anything longer
BCRYPT_MAX_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt with a configurable cost factor (12 in production)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = None

    def hash(self, plaintext: str) -> str:
        secret = plaintext.encode("utf-8")
        if len(secret) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes")
        return bcrypt.hashpw(secret, bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, plaintext: str, password_hash: str) -> bool:
        secret = plaintext.encode("utf-8")
        # No stored hash can match a password that could never have been hashed
        if len(secret) > BCRYPT_MAX_BYTES:
            return False
        return bcrypt.checkpw(secret, password_hash.encode("utf-8"))

    def dummy_verify(self, plaintext: str) -> None:
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("dummy_password")
        self.verify(plaintext, self._dummy_hash)
