"""
Product request/response schemas - REST API contract.

Request fields are deliberately loose (numbers may arrive as strings, dates as
ISO text); the product service normalizes and validates them so every failure
is reported as a 400 naming the offending field.
"""

from datetime import date, datetime

from pydantic import BaseModel

RawNumber = int | float | str | None
RawText = str | None


class ProductFields(BaseModel):
    model_number: RawText = None
    purchase_date: RawText = None
    category: RawText = None
    manufacturer: RawText = None
    warranty_months: RawNumber = None
    expected_lifespan_years: RawNumber = None
    expected_usage_hours: RawNumber = None
    notes: RawText = None
    purchase_price: RawNumber = None
    image_url: RawText = None
    manual_url: RawText = None


class ProductCreate(ProductFields):
    name: RawText = None


class ProductUpdate(ProductFields):
    """
    Partial update. A field counts as supplied only when it appears in the
    request body (``model_fields_set``); an explicit null or "" clears it.
    """

    name: RawText = None

    def supplied(self) -> dict:
        return self.model_dump(include=self.model_fields_set)


class ProductResponse(BaseModel):
    id: int
    name: str
    model_number: str | None = None
    purchase_date: date | None = None
    category: str | None = None
    manufacturer: str | None = None
    warranty_months: int | None = None
    expected_lifespan_years: int | None = None
    expected_usage_hours: int | None = None
    notes: str | None = None
    purchase_price: float | None = None
    image_url: str | None = None
    manual_url: str | None = None
    owner_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
