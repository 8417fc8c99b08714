import logging

from debtbook.currency import CURRENCY_CODES
from debtbook.schemas import ExchangeRate, Transaction

logger = logging.getLogger("debtbook")


def build_rates_map(rates: list[ExchangeRate]) -> dict[str, float]:
    """Build {currency: rate_to_primary} from stored rates.

    A later row for the same currency replaces an earlier one.
    """
    rates_map: dict[str, float] = {}
    for rate in rates:
        rates_map[rate.currency_code] = rate.rate_to_primary
    return rates_map


def get_rate(currency: str, primary_currency: str, rates_map: dict[str, float]) -> float:
    """Units of primary currency per 1 unit of currency.

    The primary currency is always 1.0. A currency without a stored rate is
    converted at parity rather than treated as an error.
    """
    if currency == primary_currency:
        return 1.0

    rate = rates_map.get(currency)
    if rate is None:
        logger.debug(
            "No exchange rate, converting at parity",
            extra={"extra_data": {"currency": currency, "primary_currency": primary_currency}},
        )
        return 1.0
    return rate


def convert_amount(
    amount: float,
    currency: str,
    primary_currency: str,
    rates_map: dict[str, float],
) -> float:
    return amount * get_rate(currency, primary_currency, rates_map)


def available_currencies(rates: list[ExchangeRate], primary_currency: str) -> list[str]:
    """Supported currencies that can still be given a rate."""
    taken = {r.currency_code for r in rates}
    taken.add(primary_currency)
    return [c for c in CURRENCY_CODES if c not in taken]


def missing_rate_currencies(
    transactions: list[Transaction],
    primary_currency: str,
    rates_map: dict[str, float],
) -> list[str]:
    """Currencies used by transactions that would silently convert at parity.

    Returned in first-seen order.
    """
    missing: dict[str, None] = {}
    for tx in transactions:
        currency = tx.currency_code
        if currency != primary_currency and currency not in rates_map:
            missing[currency] = None
    return list(missing)
