from abc import ABC, abstractmethod
from urllib.parse import urlencode


class Notifier(ABC):
    """Delivers out-of-band messages to a user's registered address"""

    @abstractmethod
    async def send_password_reset(self, email: str, name: str, reset_url: str) -> None:
        """Send the reset link. Raises on delivery failure."""
        pass


def build_reset_url(base_url: str, token: str) -> str:
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{urlencode({'token': token})}"
