"""
Security utilities for password hashing and identity tokens.

Passwords are hashed using bcrypt (via passlib) with a fixed cost factor.
Identity tokens are stateless JWTs signed with HS256 using a server-held
secret. Both services are built once at startup and injected where needed.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import jwt
from jose.exceptions import JOSEError
from passlib.context import CryptContext

from jobtracker.core.errors import ExpiredToken, InvalidToken


# bcrypt only looks at the first 72 bytes of the secret
BCRYPT_MAX_BYTES = 72


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PasswordHasher:
    """
    One-way salted password hashing.

    Produces modular-crypt strings ("$2b$<cost>$<salt+digest>") so that
    verification needs nothing besides the stored hash.
    """

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    @staticmethod
    def _encode(password: str) -> bytes:
        # Bcrypt has a 72-byte limit - truncate if necessary
        return password.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, password: str) -> str:
        """
        Hash a password with a fresh random salt.

        Errors from the OS random source propagate; there is no fallback salt.
        """
        return self._context.hash(self._encode(password))

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a plain password against a stored hash. Never raises."""
        if not isinstance(password, str) or not isinstance(hashed_password, str):
            return False
        try:
            return self._context.verify(self._encode(password), hashed_password)
        except (ValueError, TypeError):
            # Malformed or unrecognised hash
            return False

    def dummy_verify(self) -> bool:
        """
        Spend the same bcrypt cost as a real verify and return False.

        Used when no account matches, so response time does not reveal
        whether an email is registered.
        """
        return self._context.dummy_verify()


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried inside a verified token."""
    user_id: str
    name: str


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    Args:
        secret: Signing key. Must be non-empty.
        expire_days: Token lifetime in days (default: 30)
        algorithm: JWT signing algorithm (symmetric)
        clock: Returns the current UTC time; injectable for tests
    """

    def __init__(
        self,
        secret: str,
        expire_days: int = 30,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Token signing secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(days=expire_days)
        self._clock = clock or _utcnow

    def __repr__(self) -> str:
        return f"<TokenService(algorithm='{self._algorithm}', lifetime={self._lifetime})>"

    def issue(self, user_id: str, name: str) -> str:
        """
        Create a signed token for a user.

        Returns:
            Encoded JWT (header.payload.signature)
        """
        issued_at = self._clock()
        claims = {
            "sub": str(user_id),
            "name": name,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return the identity it carries.

        Raises:
            InvalidToken: bad signature, undecodable token or missing claims
            ExpiredToken: token is past its expiry
        """
        if not isinstance(token, str) or token.count(".") != 2:
            raise InvalidToken("Malformed token")

        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JOSEError as e:
            raise InvalidToken(str(e)) from e

        user_id = payload.get("sub")
        name = payload.get("name")
        expires_at = payload.get("exp")
        if not isinstance(user_id, str) or not user_id or not isinstance(name, str):
            raise InvalidToken("Token is missing identity claims")
        if not isinstance(expires_at, (int, float)) or isinstance(expires_at, bool):
            raise InvalidToken("Token is missing an expiry")

        if self._clock().timestamp() > expires_at:
            raise ExpiredToken("Token has expired")

        return TokenClaims(user_id=user_id, name=name)
