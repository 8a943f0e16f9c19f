from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way, salted password hashing"""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        pass

    @abstractmethod
    def verify(self, plaintext: str, password_hash: str) -> bool:
        pass

    @abstractmethod
    def dummy_verify(self, plaintext: str) -> None:
        """Spend the same time as verify() when there is no hash to check."""
        pass
