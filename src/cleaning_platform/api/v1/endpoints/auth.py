# src/cleaning_platform/api/v1/endpoints/auth.py
"""Authentication endpoints for the Cleaning Platform API."""

from __future__ import annotations

from fastapi import APIRouter, status

from cleaning_platform.api.v1.dependencies import AccountServiceDep
from cleaning_platform.schemas.common import Envelope, ok
from cleaning_platform.schemas.user import (
    AuthResponse,
    LoginRequest,
    SignupRequest,
    to_account_response,
)
from cleaning_platform.services.account_service import AuthResult

router = APIRouter(prefix="/auth", tags=["authentication"])


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        user=to_account_response(result.user, result.profile),
        token=result.token,
    )


@router.post(
    "/signup",
    summary="Register a new owner or housekeeper",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[AuthResponse],
)
def signup(payload: SignupRequest, accounts: AccountServiceDep) -> Envelope[AuthResponse]:
    """Create a user and profile, then return an access token."""
    result = accounts.signup(
        email=payload.email,
        password=payload.password,
        name=payload.name,
        role=payload.role_enum,
    )
    return ok(_auth_response(result), "User registered successfully")


@router.post(
    "/login",
    summary="Authenticate with email and password",
    status_code=status.HTTP_200_OK,
    response_model=Envelope[AuthResponse],
)
def login(payload: LoginRequest, accounts: AccountServiceDep) -> Envelope[AuthResponse]:
    """Verify credentials and return an access token."""
    result = accounts.login(email=payload.email, password=payload.password)
    return ok(_auth_response(result), "Login successful")
