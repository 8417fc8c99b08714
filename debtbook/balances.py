"""Balance computation: group transactions, net per currency, convert and rank."""

from debtbook.exchange import convert_amount
from debtbook.schemas import (
    CurrencyBalance,
    Person,
    PersonBalance,
    PersonBucket,
    Transaction,
    TransactionType,
)

# Nets at or below this magnitude count as settled
ZERO_BALANCE_EPSILON = 0.01


def group_transactions_by_person(
    transactions: list[Transaction],
) -> dict[str, PersonBucket]:
    """Sum debts and repayments per person and currency.

    Returns {personId: PersonBucket}. A person id is present only if at least
    one transaction references it; no check against the people list is made.
    """
    by_person: dict[str, PersonBucket] = {}

    for tx in transactions:
        if tx.person_id not in by_person:
            by_person[tx.person_id] = PersonBucket()
        bucket = by_person[tx.person_id]
        target = bucket.debts if tx.type is TransactionType.DEBT else bucket.repayments
        target[tx.currency_code] = target.get(tx.currency_code, 0) + tx.amount

    return by_person


def calculate_currency_balances(
    bucket: PersonBucket,
    primary_currency: str,
    rates_map: dict[str, float],
) -> tuple[list[CurrencyBalance], float]:
    """Net one person's sums per currency and convert them to the primary currency.

    Currencies keep first-seen order (debts, then repayments). Nets within
    ZERO_BALANCE_EPSILON of zero are dropped entirely.
    """
    balances: list[CurrencyBalance] = []
    total = 0.0

    currencies = list(dict.fromkeys([*bucket.debts, *bucket.repayments]))

    for currency in currencies:
        amount = bucket.debts.get(currency, 0) - bucket.repayments.get(currency, 0)
        if abs(amount) <= ZERO_BALANCE_EPSILON:
            continue

        converted = convert_amount(amount, currency, primary_currency, rates_map)
        balances.append(CurrencyBalance(
            currency_code=currency,
            amount=amount,
            converted_amount=converted,
        ))
        total += converted

    return balances, total


def calculate_person_balances(
    transactions: list[Transaction],
    people: list[Person],
    primary_currency: str,
    rates_map: dict[str, float],
) -> list[PersonBalance]:
    """Build one PersonBalance per person, in the order people are given.

    Transactions whose person_id matches nobody in people are left out.
    """
    by_person = group_transactions_by_person(transactions)

    result: list[PersonBalance] = []
    for person in people:
        bucket = by_person.get(person.id)
        if bucket is None:
            result.append(PersonBalance(person=person))
            continue

        balances, total = calculate_currency_balances(bucket, primary_currency, rates_map)
        result.append(PersonBalance(
            person=person,
            balances_by_currency=balances,
            total_in_primary_currency=total,
        ))

    return result


def sort_balances_by_total(balances: list[PersonBalance]) -> list[PersonBalance]:
    """Return a new list ordered by descending absolute total; ties keep input order."""
    return sorted(balances, key=lambda b: abs(b.total_in_primary_currency), reverse=True)


def calculate_grand_total(balances: list[PersonBalance]) -> float:
    return sum((b.total_in_primary_currency for b in balances), 0.0)
