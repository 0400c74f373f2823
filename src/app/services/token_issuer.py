from abc import ABC, abstractmethod
from uuid import UUID


class TokenIssuer(ABC):
    """Issues signed bearer tokens after a successful login"""

    @abstractmethod
    def issue(self, user_id: UUID) -> str:
        pass
