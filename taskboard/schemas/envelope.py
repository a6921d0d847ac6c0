"""Response envelope shared by every endpoint: {success, message?, count?, data?, errors?}."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ErrorDetail(BaseModel):
    """One violated constraint (field name and message)."""

    field: str
    message: str


class Envelope(BaseModel, Generic[DataT]):
    """Uniform JSON wrapper.

    Routes use response_model_exclude_unset, so only the keys passed at
    construction appear in the body; build success responses with ok().
    """

    success: bool = True
    message: str | None = None
    count: int | None = Field(default=None, description="Number of items in list responses")
    data: DataT | None = None
    errors: list[ErrorDetail] | None = None

    @classmethod
    def ok(cls, **fields: Any) -> "Envelope[DataT]":
        """Successful envelope carrying exactly the given keys."""
        return cls(success=True, **fields)
