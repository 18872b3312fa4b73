"""
Security utilities for authentication
- Password hashing with bcrypt
- JWT token creation and validation
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from app.config import settings
from app.schemas.user import TokenData

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS
)


class InvalidTokenError(Exception):
    """Raised for any token that cannot be trusted (malformed, expired, bad signature)"""


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: Plain text password from user
        hashed_password: Hashed password from database

    Returns:
        bool: True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Spend the same time as a real password check, for unknown accounts"""
    pwd_context.dummy_verify()


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt with a freshly generated salt

    Args:
        password: Plain text password

    Returns:
        str: Hashed password
    """
    return pwd_context.hash(password)


def create_access_token(user_id: str, issued_at: Optional[datetime] = None) -> str:
    """
    Create a signed JWT identifying a user

    Args:
        user_id: ID of the user the token is issued for
        issued_at: Issuance time, defaults to now

    Returns:
        str: Encoded JWT token, valid for ACCESS_TOKEN_EXPIRE_SECONDS
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(seconds=settings.ACCESS_TOKEN_EXPIRE_SECONDS)

    to_encode = {
        "user": {"id": user_id},
        "iat": issued_at,
        "exp": expire
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> TokenData:
    """
    Verify and decode a JWT token

    Args:
        token: JWT token string

    Returns:
        TokenData: Identity embedded in the token

    Raises:
        InvalidTokenError: If the token is malformed, expired or badly signed
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    user = payload.get("user")
    if not isinstance(user, dict) or not user.get("id"):
        raise InvalidTokenError("Token carries no user identity")

    return TokenData(id=str(user["id"]))
