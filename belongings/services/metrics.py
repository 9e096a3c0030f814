"""
Lifecycle metrics calculator.

Pure functions over a product and its usage logs. Nothing here touches the
database and nothing computed here is ever stored; callers recompute on every
read. Products and logs are duck-typed: ORM rows and response schemas both work.
"""

import calendar
import math
from collections import defaultdict
from collections.abc import Iterable
from datetime import MAXYEAR, date, datetime, time
from fractions import Fraction

from belongings.schemas.metrics import MonthlyUsage, ProductMetrics

MAX_PROGRESS_PERCENT = 100


def add_months(start: date, months: int) -> date:
    """
    Shift by calendar months; the day is clamped to the last day of the target month.
    Raises OverflowError past year 9999.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    if year > MAXYEAR:
        raise OverflowError(f"{start} + {months} months is past year {MAXYEAR}")
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _shifted(start: date | None, months: int | None) -> date | None:
    """End date for optional inputs; None when an input is missing or the end is past the calendar."""
    if start is None or months is None:
        return None
    try:
        return add_months(start, months)
    except OverflowError:
        return None


def warranty_end_date(product) -> date | None:
    return _shifted(product.purchase_date, product.warranty_months)


def expected_end_of_life_date(product) -> date | None:
    years = product.expected_lifespan_years
    return _shifted(product.purchase_date, None if years is None else years * 12)


def days_until(target: date | None, reference: date | datetime) -> int | None:
    """
    Whole days from ``reference`` to ``target``, rounded up; negative once passed.
    A datetime reference counts the partial day, e.g. noon the day before is 1.
    """
    if target is None:
        return None
    if isinstance(reference, datetime):
        target_start = datetime.combine(target, time.min, tzinfo=reference.tzinfo)
        return math.ceil((target_start - reference).total_seconds() / 86400)
    return (target - reference).days


def total_usage_minutes(logs: Iterable) -> int:
    return sum(log.duration or 0 for log in logs)


def usage_lifespan_progress_percent(product, total_minutes: int) -> int:
    """Share of the expected usage hours already consumed, 0..100, rounded half up."""
    hours = product.expected_usage_hours
    if not hours or total_minutes <= 0:
        return 0
    ratio = Fraction(total_minutes * 100, hours * 60)
    percent = math.floor(ratio + Fraction(1, 2))
    return min(percent, MAX_PROGRESS_PERCENT)


def monthly_usage_minutes(logs: Iterable) -> list[MonthlyUsage]:
    """Minutes per calendar month, oldest month first. Logs without a positive duration are skipped."""
    totals: dict[str, int] = defaultdict(int)
    for log in logs:
        if log.duration and log.duration > 0:
            totals[f"{log.date.year:04d}-{log.date.month:02d}"] += log.duration
    return [MonthlyUsage(month=month, total_minutes=totals[month]) for month in sorted(totals)]


def compute_product_metrics(product, logs: Iterable, reference: date | datetime) -> ProductMetrics:
    logs = list(logs)
    total = total_usage_minutes(logs)
    warranty_end = warranty_end_date(product)
    end_of_life = expected_end_of_life_date(product)
    return ProductMetrics(
        product_id=product.id,
        warranty_end_date=warranty_end,
        days_until_warranty_end=days_until(warranty_end, reference),
        expected_end_of_life_date=end_of_life,
        days_until_end_of_life=days_until(end_of_life, reference),
        total_usage_minutes=total,
        usage_progress_percent=usage_lifespan_progress_percent(product, total),
        monthly_usage=monthly_usage_minutes(logs),
    )
