"""Derived lifecycle metrics - computed on every read, never stored."""

from datetime import date

from pydantic import BaseModel, Field


class MonthlyUsage(BaseModel):
    month: str  # YYYY-MM
    total_minutes: int


class ProductMetrics(BaseModel):
    product_id: int
    warranty_end_date: date | None = None
    days_until_warranty_end: int | None = None
    expected_end_of_life_date: date | None = None
    days_until_end_of_life: int | None = None
    total_usage_minutes: int = 0
    usage_progress_percent: int = 0
    monthly_usage: list[MonthlyUsage] = Field(default_factory=list)


class DashboardEntry(BaseModel):
    product_id: int
    name: str
    category: str | None = None
    purchase_date: date | None = None
    warranty_end_date: date | None = None
    days_until_warranty_end: int | None = None
    expected_end_of_life_date: date | None = None
    days_until_end_of_life: int | None = None
    total_usage_minutes: int = 0
    usage_progress_percent: int = 0
    incident_count: int = 0
