"""Currency symbols, static fallback rates and live rate fetching."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional, Tuple
import httpx

from tripplanner.core.cache import RedisCache
from tripplanner.core.config import settings
from tripplanner.core.logger import logger

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "ILS": "₪",
    "JPY": "¥",
    "CHF": "CHF",
    "CAD": "C$",
    "AUD": "A$",
    "CNY": "¥",
    "INR": "₹",
    "THB": "฿",
    "TRY": "₺",
}

# Shekels per unit of each currency, used when live rates are unavailable
DEFAULT_RATES_TO_ILS = {
    "USD": Decimal("3.65"),
    "EUR": Decimal("3.95"),
    "GBP": Decimal("4.60"),
    "ILS": Decimal("1"),
    "JPY": Decimal("0.024"),
    "CHF": Decimal("4.10"),
    "CAD": Decimal("2.55"),
    "AUD": Decimal("2.30"),
    "CNY": Decimal("0.50"),
    "INR": Decimal("0.044"),
    "THB": Decimal("0.105"),
    "TRY": Decimal("0.105"),
}

CENTS = Decimal("0.01")


def currency_symbol(code: Optional[str]) -> str:
    code = (code or "USD").upper()
    return CURRENCY_SYMBOLS.get(code, code)


def default_rates(base: str) -> Dict[str, Decimal]:
    """Static table re-expressed as 'units of ``base`` per unit of currency'."""
    base = base.upper()
    base_in_ils = DEFAULT_RATES_TO_ILS.get(base)
    if base_in_ils is None:
        return {base: Decimal("1")}
    return {code: rate / base_in_ils for code, rate in DEFAULT_RATES_TO_ILS.items()}


async def fetch_live_rates(base: str) -> Optional[Dict[str, Decimal]]:
    """Fetch 'units of ``base`` per unit of currency' from the exchange-rate API.

    The API answers with how much of each currency one ``base`` buys, so the
    values are inverted. Returns None on any failure.
    """
    url = f"{settings.EXCHANGE_RATE_API_URL.rstrip('/')}/{base.upper()}"
    try:
        async with httpx.AsyncClient(timeout=10) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Exchange rate fetch failed for {base}: {e}")
        return None

    rates = data.get("rates") or {}
    converted = {}
    for code, per_base in rates.items():
        try:
            per_base = Decimal(str(per_base))
        except ArithmeticError:
            continue
        if per_base > 0:
            converted[code.upper()] = Decimal("1") / per_base
    if not converted:
        return None
    converted[base.upper()] = Decimal("1")
    logger.info(f"Fetched {len(converted)} exchange rates for base {base}")
    return converted


async def get_rates(base: str, cache: Optional[RedisCache] = None) -> Tuple[Dict[str, Decimal], str]:
    """Rates into ``base``, from cache, the live API, or the static table."""
    base = base.upper()
    cache_key = RedisCache.build_key("fx", base)

    if cache is not None:
        cached = await cache.get(cache_key)
        if cached:
            return {code: Decimal(value) for code, value in cached.items()}, "live"

    live = await fetch_live_rates(base)
    if live:
        # Currencies the API omits fall back to the static table
        rates = {**default_rates(base), **live}
        if cache is not None:
            await cache.set(
                cache_key,
                {code: str(value) for code, value in rates.items()},
                expire=settings.EXCHANGE_RATE_CACHE_SECONDS,
            )
        return rates, "live"

    return default_rates(base), "default"


def convert(amount: Decimal, code: Optional[str], rates: Dict[str, Decimal]) -> Decimal:
    """Convert into the rates' base currency; currencies missing from ``rates`` convert 1:1."""
    rate = rates.get((code or "USD").upper(), Decimal("1"))
    return amount * rate


def quantize(amount: Decimal) -> float:
    return float(Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP))
