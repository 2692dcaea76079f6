"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field, StrictInt, StrictStr


class AddEntryRequest(BaseModel):
    """Raw form values for a new food entry."""

    name: StrictStr | None = None
    calories: StrictInt | StrictStr | None = None
    time: StrictStr | None = Field(
        default=None,
        description="ISO-8601 local time; omitted means now.",
    )


class ResetRequest(BaseModel):
    """Confirmation payload for wiping all data."""

    confirm: bool = False
