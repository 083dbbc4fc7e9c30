"""Budget totals for a trip, recomputed from the priced rows on every call."""
from collections import defaultdict
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tripplanner.core.cache import RedisCache
from tripplanner.core.config import settings
from tripplanner.models.bookings.base import PaymentStatus
from tripplanner.models import CarRental, Hotel, Restaurant, TouristSite, Transportation
from tripplanner.schemas.budget.budget import BudgetResponse, CurrencyTotals
from tripplanner.utils.currency import convert, currency_symbol, get_rates, quantize

BUDGET_CATEGORIES = (
    ("hotels", Hotel),
    ("transportation", Transportation),
    ("car_rentals", CarRental),
    ("restaurants", Restaurant),
    ("tourist_sites", TouristSite),
)

ZERO = Decimal("0")


async def _priced_rows(db: AsyncSession, model, trip_id: int):
    result = await db.execute(
        select(model.price, model.currency, model.payment_status)
        .where(model.trip_id == trip_id, model.price.is_not(None))
    )
    return result.all()


def summarize(rows_by_category: dict, rates: dict) -> dict:
    """Pure aggregation over ``{category: [(price, currency, status), ...]}``.

    A row counts as paid only when its payment status is ``paid``; rows
    without a currency are treated as USD.
    """
    by_category = {}
    by_currency = defaultdict(lambda: {"paid": ZERO, "unpaid": ZERO})
    base_paid = ZERO
    base_unpaid = ZERO

    for category, rows in rows_by_category.items():
        category_total = ZERO
        for price, currency, payment_status in rows:
            amount = Decimal(str(price))
            currency = (currency or "USD").upper()
            paid = PaymentStatus(payment_status) == PaymentStatus.paid if payment_status else False

            category_total += amount
            converted = convert(amount, currency, rates)
            if paid:
                by_currency[currency]["paid"] += amount
                base_paid += converted
            else:
                by_currency[currency]["unpaid"] += amount
                base_unpaid += converted
        by_category[category] = category_total

    currencies = sorted(
        by_currency.items(),
        key=lambda item: item[1]["paid"] + item[1]["unpaid"],
        reverse=True,
    )
    return {
        "by_category": by_category,
        "by_currency": currencies,
        "total_paid": base_paid,
        "total_unpaid": base_unpaid,
    }


async def get_trip_budget(
    db: AsyncSession, trip_id: int, cache: Optional[RedisCache] = None, base_currency: Optional[str] = None
) -> BudgetResponse:
    base_currency = (base_currency or settings.BUDGET_BASE_CURRENCY).upper()
    rows_by_category = {
        name: await _priced_rows(db, model, trip_id) for name, model in BUDGET_CATEGORIES
    }
    rates, source = await get_rates(base_currency, cache)
    summary = summarize(rows_by_category, rates)

    return BudgetResponse(
        trip_id=trip_id,
        by_category={name: quantize(total) for name, total in summary["by_category"].items()},
        by_currency=[
            CurrencyTotals(
                currency=code,
                symbol=currency_symbol(code),
                total_paid=quantize(totals["paid"]),
                total_unpaid=quantize(totals["unpaid"]),
                total=quantize(totals["paid"] + totals["unpaid"]),
            )
            for code, totals in summary["by_currency"]
        ],
        base_currency=base_currency,
        base_symbol=currency_symbol(base_currency),
        total_paid=quantize(summary["total_paid"]),
        total_unpaid=quantize(summary["total_unpaid"]),
        grand_total=quantize(summary["total_paid"] + summary["total_unpaid"]),
        rates_source=source,
    )
