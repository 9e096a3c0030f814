"""
Immutable form state for the client forms.

A form is one frozen value per entity type. Every edit produces a new value
through ``with_changes``; nothing mutates a form in place. Inputs stay as the
raw text a user typed, so the payload sent to the API goes through the same
normalization as any other request.
"""

from pydantic import BaseModel, ConfigDict

from belongings.schemas.incident_report import IncidentReportCreate
from belongings.schemas.product import ProductCreate
from belongings.schemas.usage_log import UsageLogCreate


class FormState(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    def with_changes(self, **changes: str):
        """Return a new form with the given fields replaced."""
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown form field(s): {', '.join(sorted(unknown))}")
        return self.model_copy(update=changes)

    def cleared(self):
        return type(self)()


class ProductForm(FormState):
    name: str = ""
    model_number: str = ""
    purchase_date: str = ""
    category: str = ""
    manufacturer: str = ""
    warranty_months: str = ""
    expected_lifespan_years: str = ""
    expected_usage_hours: str = ""
    notes: str = ""
    purchase_price: str = ""
    image_url: str = ""
    manual_url: str = ""

    @classmethod
    def from_product(cls, product) -> "ProductForm":
        """Prefill an edit form from a stored product (absent values become "")."""
        values = {}
        for field in cls.model_fields:
            value = getattr(product, field, None)
            values[field] = "" if value is None else str(value)
        return cls(**values)

    def to_create(self) -> ProductCreate:
        return ProductCreate(**self.model_dump())


class UsageLogForm(FormState):
    date: str = ""
    duration: str = ""
    notes: str = ""

    def to_create(self) -> UsageLogCreate:
        return UsageLogCreate(**self.model_dump())


class IncidentReportForm(FormState):
    date: str = ""
    description: str = ""
    severity: str = ""

    def to_create(self) -> IncidentReportCreate:
        return IncidentReportCreate(**self.model_dump())
