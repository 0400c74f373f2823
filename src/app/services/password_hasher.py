from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way, salted hashing of login passwords"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass
