"""
Authentication endpoints
"""
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.database import get_db
from app.models import User
from app.schemas import UserLogin, UserResponse, Token, TokenData
from app.core import get_current_user_id, body_or_empty
from app.utils import verify_password, dummy_verify, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get("", response_model=UserResponse)
def get_me(
    current_user: TokenData = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Get the caller's own account, without the password hash

    Args:
        current_user: Identity from the token
        db: Database session

    Returns:
        UserResponse: Current user
    """
    user = db.get(User, current_user.id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User not found"
        )
    return user


@router.post("", response_model=Token)
def login(
    credentials: Optional[UserLogin] = Body(None),
    db: Session = Depends(get_db)
):
    """
    Exchange email and password for a token

    Unknown email and wrong password give the same answer.

    Args:
        credentials: Email and password
        db: Database session

    Returns:
        Token: Signed token for the account
    """
    credentials = body_or_empty(UserLogin, credentials)
    invalid_credentials = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=[{"msg": "Invalid credentials"}]
    )

    user = db.query(User).filter(User.email == credentials.email).first()
    if user is None:
        dummy_verify()
        logger.info("Login failed for unknown email")
        raise invalid_credentials

    if not verify_password(credentials.password, user.password_hash):
        logger.info(f"Login failed for user {user.id}")
        raise invalid_credentials

    return Token(token=create_access_token(user.id))
