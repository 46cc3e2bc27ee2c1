"""
Pydantic schemas for user registration and login.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""
    name: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(
        ...,
        min_length=6,
        description="Password must be at least 6 characters"
    )

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        # Strip before the length constraints run
        if isinstance(v, str):
            return v.strip()
        return v


class UserLoginRequest(BaseModel):
    """
    Request schema for user login.

    Both fields are optional here so the endpoint can answer a missing
    field with a plain 400 instead of a schema error.
    """
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Public user profile (no sensitive data)."""
    name: str

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Response for register and login."""
    user: UserResponse
    token: str
