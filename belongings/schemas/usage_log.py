"""Usage log request/response schemas."""

import datetime as dt

from pydantic import BaseModel


class UsageLogCreate(BaseModel):
    date: str | None = None
    duration: int | float | str | None = None
    notes: str | None = None


class UsageLogResponse(BaseModel):
    id: int
    date: dt.date
    duration: int | None = None
    notes: str | None = None
    product_id: int
    created_at: dt.datetime

    model_config = {"from_attributes": True}
