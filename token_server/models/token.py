"""Pydantic models for token requests, grants and responses."""

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    """Body of a token request.

    Fields are optional here; a request missing the room or user id is
    rejected by the signer rather than by validation.
    """
    model_config = ConfigDict(populate_by_name=True)

    room: str | None = None
    username: str | None = None
    user_id: str | None = Field(default=None, alias="userId")


class RoomGrants(BaseModel):
    """Room permissions embedded in an issued token."""
    model_config = ConfigDict(frozen=True)

    room: str | None = None
    room_join: bool = True
    can_publish: bool = True
    can_subscribe: bool = True
    can_publish_data: bool = True


class TokenResponse(BaseModel):
    """Successful token response."""
    token: str


class ErrorResponse(BaseModel):
    """Error body returned on any failure."""
    error: str
