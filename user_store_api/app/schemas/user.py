"""
Pydantic models for user data.

``UserCreate`` is the request payload for registering a user.  ``name``
defaults to an empty string so that a body without it still decodes;
the endpoint then rejects it with a specific message.  ``User`` is the
stored and returned representation and is frozen, so a stored record
can never be modified in place.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field("", examples=["Ada"])


class User(BaseModel):
    """Schema for a stored user, also used as the response body."""

    name: str = Field(..., examples=["Ada"])

    model_config = ConfigDict(frozen=True)
