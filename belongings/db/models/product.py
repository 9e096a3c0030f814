"""
Product model - a belonging registered by its owner.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from belongings.db.base import Base

if TYPE_CHECKING:
    from belongings.db.models.incident_report import IncidentReport
    from belongings.db.models.usage_log import UsageLog
    from belongings.db.models.user import User


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """Owned product with the lifecycle inputs the metrics are derived from."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    model_number: Mapped[str | None] = mapped_column(String(255), nullable=True)
    purchase_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    manufacturer: Mapped[str | None] = mapped_column(String(255), nullable=True)
    warranty_months: Mapped[int | None] = mapped_column(nullable=True)
    expected_lifespan_years: Mapped[int | None] = mapped_column(nullable=True)
    expected_usage_hours: Mapped[int | None] = mapped_column(nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    purchase_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    manual_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    owner: Mapped["User"] = relationship("User", back_populates="products")
    usage_logs: Mapped[list["UsageLog"]] = relationship(
        "UsageLog", back_populates="product", cascade="all, delete-orphan", passive_deletes=True
    )
    incident_reports: Mapped[list["IncidentReport"]] = relationship(
        "IncidentReport", back_populates="product", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name})>"
