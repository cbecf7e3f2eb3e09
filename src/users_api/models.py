"""Data shapes shared by the API layer and the repositories."""

from typing import Any

from pydantic import BaseModel, ConfigDict

# Identifiers are assigned by the backend: sequential integers in memory,
# 24 character hex strings in MongoDB. Callers must handle both.
UserId = int | str


class User(BaseModel):
    """A stored user as returned to API clients."""

    id: UserId
    name: str
    email: str


class UserCreateRequest(BaseModel):
    """Payload for creating a user.

    Fields are left untyped so that missing or malformed values reach the
    handler's own validation and produce its messages instead of a schema error.
    """

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None


class MessageResponse(BaseModel):
    """Error body returned for every non-2xx response."""

    message: str
