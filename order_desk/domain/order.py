from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 100


def _require_text(value: Any, label: str, max_length: int) -> Any:
    """Reject missing, blank and overlong text with the messages clients expect."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", f"The {label} field is required.")
    if isinstance(value, str) and len(value) > max_length:
        raise PydanticCustomError(
            "string_too_long", f"{label} length can't be more than {max_length}."
        )
    # Non-string input falls through to pydantic's own type check
    return value


class Order(BaseModel):
    """Domain model representing a persisted (or about to be persisted) order."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None  # assigned by the store on insert
    name: str
    description: str
    entry_date: datetime | None = None  # stamped by the service, never client-supplied
    is_invoiced: bool = True
    is_deleted: bool = False  # soft-delete marker

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: Any) -> Any:
        return _require_text(value, "Name", NAME_MAX_LENGTH)

    @field_validator("description", mode="before")
    @classmethod
    def _check_description(cls, value: Any) -> Any:
        return _require_text(value, "Description", DESCRIPTION_MAX_LENGTH)


class OrderSubmission(BaseModel):
    """Payload accepted from callers when submitting an order.

    Only ``name`` and ``description`` are honoured; the remaining fields are
    tolerated so clients may post a full order body, but the service discards
    them.
    """

    name: str | None = None
    description: str | None = None
    id: int | None = None
    entry_date: datetime | None = None
    is_invoiced: bool | None = None
    is_deleted: bool | None = None
