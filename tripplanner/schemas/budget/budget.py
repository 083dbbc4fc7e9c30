from pydantic import BaseModel
from typing import List, Dict


class CurrencyTotals(BaseModel):
    currency: str
    symbol: str
    total_paid: float
    total_unpaid: float
    total: float


class BudgetResponse(BaseModel):
    trip_id: int
    by_category: Dict[str, float]
    by_currency: List[CurrencyTotals]
    base_currency: str
    base_symbol: str
    total_paid: float
    total_unpaid: float
    grand_total: float
    rates_source: str
