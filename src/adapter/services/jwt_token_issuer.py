from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import jwt

from src.app.services.token_issuer import TokenIssuer

SESSION_TOKEN_TTL = timedelta(days=7)


class JwtTokenIssuer(TokenIssuer):
    """HS256 JWT carrying the user id"""

    def __init__(
        self,
        secret: str,
        expires_in: timedelta = SESSION_TOKEN_TTL,
        algorithm: str = "HS256",
    ):
        self.secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm

    def issue(self, user_id: UUID) -> str:
        """
        Generate a signed session token

        Args:
            user_id: User UUID

        Returns:
            JWT token string (7-day expiry by default)
        """
        now = datetime.now(UTC)
        payload = {
            "id": str(user_id),
            "exp": now + self.expires_in,
            "iat": now,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)
