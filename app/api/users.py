"""
User registration endpoint
"""
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Optional
import logging

from app.database import get_db
from app.models import User
from app.schemas import UserCreate, Token
from app.core import body_or_empty
from app.utils import get_password_hash, create_access_token, gravatar_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])

USER_EXISTS = [{"msg": "User already exists"}]


@router.post("", response_model=Token)
def register_user(
    user_data: Optional[UserCreate] = Body(None),
    db: Session = Depends(get_db)
):
    """
    Register a new user and return a token for them

    Args:
        user_data: Name, email and password
        db: Database session

    Returns:
        Token: Signed token for the new account
    """
    user_data = body_or_empty(UserCreate, user_data)
    existing_user = db.query(User).filter(User.email == user_data.email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=USER_EXISTS
        )

    user = User(
        name=user_data.name,
        email=user_data.email,
        avatar=gravatar_url(user_data.email),
        password_hash=get_password_hash(user_data.password)
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=USER_EXISTS
        )
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return Token(token=create_access_token(user.id))
