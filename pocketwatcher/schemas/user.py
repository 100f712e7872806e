"""
Pydantic schemas for User entity.
"""
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for user registration."""
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=255)
    # The mobile client sends "password"; "secret" is accepted as well
    password: str = Field(..., min_length=1, validation_alias=AliasChoices("password", "secret"))


class UserLogin(BaseModel):
    """Schema for user login."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, validation_alias=AliasChoices("password", "secret"))


class UserResponse(BaseModel):
    """Schema for user response. The password hash is never exposed."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    date: datetime


class AuthToken(BaseModel):
    """Schema for the token returned by register and login."""
    success: bool = True
    authToken: str
