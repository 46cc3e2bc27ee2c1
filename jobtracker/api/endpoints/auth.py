"""
Authentication endpoints for user registration and login.

Implements stateless token authentication:
- POST /register: Create new user account and receive a token
- POST /login: Authenticate and receive a token
"""

import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobtracker.core.database import get_db
from jobtracker.core.deps import get_password_hasher, get_token_service
from jobtracker.core.errors import BadRequest, InvalidCredential
from jobtracker.core.security import PasswordHasher, TokenService
from jobtracker.crud import user as user_crud
from jobtracker.schemas.user import (
    AuthResponse,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Register a new user account.

    The password is hashed before the user is stored. Returns a token
    for immediate use.
    """
    hashed_password = hasher.hash(request.password)
    new_user = user_crud.create(
        db,
        name=request.name,
        email=request.email,
        hashed_password=hashed_password,
    )

    logger.info(f"New user registered: {new_user.id}")

    return AuthResponse(
        user=UserResponse.model_validate(new_user),
        token=tokens.issue(str(new_user.id), new_user.name),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Authenticate user and return a token.

    Unknown email and wrong password produce the same error.
    """
    if not request.email or not request.password:
        raise BadRequest("Please provide email and password")

    user = user_crud.get_by_email(db, request.email)
    if not user:
        hasher.dummy_verify()
    if not user or not hasher.verify(request.password, user.hashed_password):
        logger.info("Failed login attempt")
        raise InvalidCredential()

    logger.info(f"User logged in: {user.id}")

    return AuthResponse(
        user=UserResponse.model_validate(user),
        token=tokens.issue(str(user.id), user.name),
    )
