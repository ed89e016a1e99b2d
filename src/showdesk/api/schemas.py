"""Pydantic models for request payloads."""

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    """Sign-up form payload."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=1)
