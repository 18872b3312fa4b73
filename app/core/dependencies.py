"""
FastAPI dependencies for authentication and request bodies
"""
from fastapi import Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.security import APIKeyHeader
from pydantic import BaseModel, ValidationError
from typing import Optional, Type, TypeVar
import logging

from app.schemas import TokenData
from app.utils.security import verify_token, InvalidTokenError

logger = logging.getLogger(__name__)

# Token travels in a custom header rather than Authorization: Bearer
token_header = APIKeyHeader(name="x-auth-token", auto_error=False)

BodyModel = TypeVar("BodyModel", bound=BaseModel)


async def get_current_user_id(
    token: Optional[str] = Depends(token_header)
) -> TokenData:
    """
    Get the caller's identity from the x-auth-token header

    Args:
        token: Raw token from the request header

    Returns:
        TokenData: Identity embedded in the token

    Raises:
        HTTPException: 401 if the token is missing or not valid
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token. Authorization denied"
        )

    try:
        return verify_token(token)
    except InvalidTokenError as e:
        logger.info(f"Rejected token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid"
        )


def body_or_empty(model: Type[BodyModel], data: Optional[BodyModel]) -> BodyModel:
    """
    Validate a missing request body as an empty object

    A POST without a body then reports each field rule rather than a
    single "body required" error.

    Raises:
        RequestValidationError: With one entry per failing field rule
    """
    if data is not None:
        return data
    try:
        return model.model_validate({})
    except ValidationError as e:
        errors = [{**error, "loc": ("body",) + tuple(error["loc"])} for error in e.errors()]
        raise RequestValidationError(errors, body=None)
