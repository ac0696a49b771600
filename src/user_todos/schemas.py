from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Shared type for incoming deadline which can be a date, datetime, or ISO8601 string
DeadlineInput = Union[date, datetime, str]


def _parse_deadline(value: DeadlineInput) -> datetime:
    """
    Internal helper to normalize deadline input into an aware datetime.
    - If value is a string, attempt to parse via datetime.fromisoformat; if time is missing, set to 00:00.
    - If value is a date (not datetime), convert to datetime at 00:00.
    - Naive datetimes are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        # Promote a date to a datetime at midnight
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        s = value.strip()
        # fromisoformat only learned the 'Z' suffix in Python 3.11
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(s)
        except ValueError:
            try:
                d = date.fromisoformat(s)
            except ValueError as e:
                raise ValueError(
                    "Invalid deadline format. Use ISO8601 date or datetime string (e.g., '2025-01-31' or '2025-01-31T13:45:00')."
                ) from e
            parsed = datetime(d.year, d.month, d.day)
    else:
        raise ValueError("Invalid type for deadline; expected date, datetime, or ISO8601 string.")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# PUBLIC_INTERFACE
class UserCreate(BaseModel):
    """
    Schema for creating a user account.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Ana", "username": "ana"}}
    )

    name: str = Field(..., description="Display name of the user")
    username: str = Field(..., description="Unique username, later sent in the `username` header")


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a todo, and for replacing title and deadline of an existing one.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "deadline": "2025-01-01",
            }
        }
    )

    title: str = Field(..., description="Short title for the todo item")
    deadline: datetime = Field(
        ...,
        description="Deadline of the todo item. Accepts ISO8601 date or datetime; dates are set to 00:00 UTC",
    )

    @field_validator("deadline", mode="before")
    @classmethod
    def parse_deadline(cls, v: DeadlineInput) -> datetime:
        """
        Normalize deadline from str/date/datetime to an aware datetime.
        """
        return _parse_deadline(v)


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0b2a3f64-5717-4562-b3fc-2c963f66afa6",
                "title": "Buy milk",
                "deadline": "2025-01-01T00:00:00Z",
                "done": False,
                "created_at": "2024-12-20T10:15:30.123456Z",
            }
        }
    )

    id: str = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    deadline: datetime = Field(..., description="Deadline as an ISO8601 datetime")
    done: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp")


# PUBLIC_INTERFACE
class UserOut(BaseModel):
    """
    Schema returned by the API for a user, including all of its todos.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "7d6f1c1e-8a8e-4a4b-9c47-6f6f7d1f2b11",
                "name": "Ana",
                "username": "ana",
                "pro": False,
                "todos": [],
            }
        }
    )

    id: str = Field(..., description="Unique identifier of the user")
    name: str = Field(..., description="Display name of the user")
    username: str = Field(..., description="Unique username")
    pro: bool = Field(..., description="Whether the pro plan is active")
    todos: List[TodoOut] = Field(default_factory=list, description="Todos owned by the user")


# PUBLIC_INTERFACE
class ErrorOut(BaseModel):
    """
    Error body returned for rejected requests.
    """

    error: str = Field(..., description="Human readable reason")
