"""Dashboard views built on top of the computed person balances."""

from datetime import date

from debtbook import config
from debtbook.balances import (
    ZERO_BALANCE_EPSILON,
    calculate_grand_total,
    calculate_person_balances,
    sort_balances_by_total,
)
from debtbook.currency import format_currency
from debtbook.exchange import build_rates_map, missing_rate_currencies
from debtbook.logging_config import setup_logging
from debtbook.schemas import (
    DashboardSummary,
    ExchangeRate,
    Person,
    PersonBalance,
    Profile,
    Transaction,
    TransactionType,
)
from debtbook.serializers import (
    serialize_person_balance,
    serialize_summary,
    serialize_transaction,
)

logger = setup_logging()


def default_profile() -> Profile:
    """Profile used when none is stored yet; currency comes from PRIMARY_CURRENCY."""
    return Profile(primary_currency=config.DEFAULT_PRIMARY_CURRENCY)


def summarize_balances(balances: list[PersonBalance], primary_currency: str) -> DashboardSummary:
    owed_to_you = sum(
        (b.total_in_primary_currency for b in balances if b.total_in_primary_currency > 0), 0.0
    )
    you_owe = abs(sum(
        (b.total_in_primary_currency for b in balances if b.total_in_primary_currency < 0), 0.0
    ))
    people_with_balance = sum(
        1 for b in balances if abs(b.total_in_primary_currency) > ZERO_BALANCE_EPSILON
    )
    return DashboardSummary(
        primary_currency=primary_currency,
        net_balance=calculate_grand_total(balances),
        owed_to_you=owed_to_you,
        you_owe=you_owe,
        people_with_balance=people_with_balance,
    )


def outstanding_balances(
    balances: list[PersonBalance],
    limit: int | None = None,
) -> list[PersonBalance]:
    """Largest non-settled balances first."""
    if limit is None:
        limit = config.OUTSTANDING_BALANCES_LIMIT
    ranked = [
        b for b in sort_balances_by_total(balances)
        if abs(b.total_in_primary_currency) > ZERO_BALANCE_EPSILON
    ]
    return ranked[:limit]


def recent_transactions(
    transactions: list[Transaction],
    limit: int | None = None,
) -> list[Transaction]:
    """Newest incurred_date first; undated transactions go last."""
    if limit is None:
        limit = config.RECENT_TRANSACTIONS_LIMIT
    ordered = sorted(
        transactions,
        key=lambda tx: (tx.incurred_date is not None, tx.incurred_date or date.min),
        reverse=True,
    )
    return ordered[:limit]


def filter_transactions(
    transactions: list[Transaction],
    person_id: str | None = None,
    tx_type: TransactionType | None = None,
) -> list[Transaction]:
    return [
        tx for tx in transactions
        if (person_id is None or tx.person_id == person_id)
        and (tx_type is None or tx.type is tx_type)
    ]


def describe_balance(total: float, primary_currency: str) -> str:
    if total == 0:
        return "No balance"
    if total > 0:
        return f"Owes you {format_currency(total, primary_currency)}"
    return f"You owe {format_currency(abs(total), primary_currency)}"


def build_dashboard(
    transactions: list[Transaction],
    people: list[Person],
    profile: Profile | None,
    rates: list[ExchangeRate],
) -> dict:
    """Compute everything the dashboard shows from freshly loaded data."""
    if profile is None:
        profile = default_profile()
    primary_currency = profile.primary_currency
    rates_map = build_rates_map(rates)

    missing = missing_rate_currencies(transactions, primary_currency, rates_map)
    if missing:
        logger.warning(
            "Currencies without exchange rate converted at parity",
            extra={"extra_data": {"currencies": missing, "primary_currency": primary_currency}},
        )

    balances = calculate_person_balances(transactions, people, primary_currency, rates_map)
    summary = summarize_balances(balances, primary_currency)

    logger.info(
        "Dashboard computed",
        extra={"extra_data": {
            "transactions": len(transactions),
            "people": len(people),
            "people_with_balance": summary.people_with_balance,
        }},
    )

    return {
        "summary": serialize_summary(summary),
        "balances": [
            serialize_person_balance(b, primary_currency) for b in sort_balances_by_total(balances)
        ],
        "outstanding": [
            serialize_person_balance(b, primary_currency) for b in outstanding_balances(balances)
        ],
        "recentTransactions": [serialize_transaction(tx) for tx in recent_transactions(transactions)],
        "missingRates": missing,
    }
