from typing import Optional

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    """DTO for user creation request (validated by the use case, not the schema)"""
    name: Optional[str] = Field(None, examples=["John Doe"])
    email: Optional[str] = Field(None, examples=["john@example.com"])


class UserUpdateRequest(BaseModel):
    """DTO for user update request - omitted fields are left unchanged"""
    name: Optional[str] = Field(None, examples=["Johnny"])
    email: Optional[str] = Field(None, examples=["johnny@example.com"])


class UserResponse(BaseModel):
    """DTO for user response"""
    id: str
    name: str
    email: str
