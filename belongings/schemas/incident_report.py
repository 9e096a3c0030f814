"""Incident report request/response schemas."""

import datetime as dt

from pydantic import BaseModel


class IncidentReportCreate(BaseModel):
    date: str | None = None
    description: str | None = None
    severity: str | None = None


class IncidentReportResponse(BaseModel):
    id: int
    date: dt.date
    description: str
    severity: str | None = None
    product_id: int
    created_at: dt.datetime

    model_config = {"from_attributes": True}
