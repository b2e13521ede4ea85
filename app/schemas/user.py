"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, computed_field

from app.rugby.permissions import Permission, Role, department_for, permissions_for


# Shared properties
class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    full_name: Optional[str] = None


# Request schemas
class UserCreate(UserBase):
    """Schema for user registration. Self-registered accounts are players."""
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class RoleAssignment(BaseModel):
    """Schema for changing a user's role."""
    role: Role


# Response schemas
class UserResponse(UserBase):
    """Schema for user data in API responses (no sensitive data)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    role: Role
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def department(self) -> str:
        return department_for(self.role)

    @computed_field
    @property
    def permissions(self) -> list[Permission]:
        return sorted(permissions_for(self.role), key=lambda p: p.value)
