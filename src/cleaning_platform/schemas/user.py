"""User-related Pydantic schemas."""

import re
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cleaning_platform.core.settings import settings
from cleaning_platform.models import Profile, Role, User

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
BCRYPT_MAX_PASSWORD_BYTES = 72


def _require_text(field: str, value: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field} is required")
    return value


class Credentials(BaseModel):
    """Email and password pair shared by signup and login."""

    email: str = Field(..., description="Account email; matched case-insensitively")
    password: str = Field(..., description="Plain-text password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Require a plausible email address and normalize it."""
        v = _require_text("email", v).strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        return v

    @field_validator("password")
    @classmethod
    def validate_password_present(cls, v: str) -> str:
        return _require_text("password", v)


class SignupRequest(Credentials):
    """Schema for account registration."""

    name: str = Field(..., description="Display name shown to contacts")
    role: str = Field(..., description="Either 'owner' or 'housekeeper'")

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        """Enforce the configured minimum length and the bcrypt input limit."""
        if len(v) < settings.password_min_length:
            raise ValueError(
                f"Password must be at least {settings.password_min_length} characters long"
            )
        if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes long"
            )
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_text("name", v).strip()

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: str) -> str:
        _require_text("role", v)
        if v not in {role.value for role in Role}:
            raise ValueError("Role must be either 'owner' or 'housekeeper'")
        return v

    @property
    def role_enum(self) -> Role:
        return Role(self.role)


class LoginRequest(Credentials):
    """Schema for login submissions."""


class ProfileResponse(BaseModel):
    """Contact entry returned by the contact list."""

    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    role: Role
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AccountResponse(BaseModel):
    """Public view of an account: user fields merged with its profile."""

    id: uuid.UUID
    email: str
    name: str
    role: Role
    created_at: datetime


class AuthResponse(BaseModel):
    """Payload returned by signup and login."""

    user: AccountResponse
    token: str = Field(..., description="JWT access token")


def to_account_response(user: User, profile: Profile) -> AccountResponse:
    """Merge a user and its profile into the public account view."""
    return AccountResponse(
        id=user.id,
        email=user.email,
        name=profile.name,
        role=profile.role,
        created_at=user.created_at,
    )
