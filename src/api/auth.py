"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import get_token_service
from src.database import get_db
from src.errors import AuthError
from src.schemas.auth import MessageResponse, TokenResponse, UserSignin, UserSignup
from src.services.auth import TokenService, authenticate_user, create_user

router = APIRouter(prefix="/api/v1", tags=["auth"])


@router.post("/signup", response_model=MessageResponse)
async def signup(
    user_data: UserSignup,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    create_user(db, user_data.username, user_data.password)
    return MessageResponse(message="User signed up")


@router.post("/signin", response_model=TokenResponse)
async def signin(
    credentials: UserSignin,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Sign in with username and password."""
    user = authenticate_user(db, credentials.username, credentials.password)

    if not user:
        raise AuthError("Incorrect credentials")

    return TokenResponse(token=token_service.issue(user.id))
