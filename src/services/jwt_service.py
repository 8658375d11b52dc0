"""
JWT issuing and verification for logged-in users.

Tokens carry the user's id under the ``id`` claim, plus ``iat`` and, when an
expiration is configured, ``exp``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt

from src.config import Config


class JwtService:
    """Signs and verifies user tokens with a shared secret."""

    def __init__(
        self,
        private_key: str,
        algorithm: str = "HS256",
        expiration_days: Optional[int] = None,
    ):
        """
        Args:
            private_key: Secret used to sign tokens.
            algorithm: JWS algorithm name.
            expiration_days: Token lifetime; tokens never expire when None or 0.

        Raises:
            ValueError: If the key is empty or the algorithm is 'none'.
        """
        # Validate secret key is configured
        if not private_key:
            raise ValueError("JWT_SECRET_KEY must be configured")

        # Validate algorithm is not 'none' (security vulnerability)
        if algorithm.lower() == "none":
            raise ValueError("JWT algorithm 'none' is not allowed")

        self.private_key = private_key
        self.algorithm = algorithm
        self.expiration_days = expiration_days

    @classmethod
    def from_config(cls, config: Config) -> "JwtService":
        return cls(
            private_key=config.JWT_SECRET_KEY,
            algorithm=config.JWT_ALGORITHM,
            expiration_days=config.JWT_EXPIRATION_DAYS,
        )

    def sign(self, user_id: int) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: The user's primary key.

        Returns:
            str: Encoded JWT token.
        """
        now = datetime.now(timezone.utc)
        claims: Dict[str, Any] = {"id": user_id, "iat": now}
        if self.expiration_days:
            claims["exp"] = now + timedelta(days=self.expiration_days)
        return jwt.encode(claims, self.private_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Verify a token and return its claims.

        Args:
            token: The JWT token to verify.

        Returns:
            dict: Token claims, including ``id``.

        Raises:
            jose.JWTError: If the token is malformed, tampered with or expired.
        """
        return jwt.decode(token, self.private_key, algorithms=[self.algorithm])
