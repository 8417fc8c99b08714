"""Tests for display payload serialization."""

from datetime import date, datetime

from debtbook.schemas import (
    CurrencyBalance,
    DashboardSummary,
    Person,
    PersonBalance,
    Transaction,
    TransactionType,
)
from debtbook.serializers import (
    serialize_person,
    serialize_person_balance,
    serialize_summary,
    serialize_transaction,
)


def test_serialize_person() -> None:
    person = Person(id="p1", name="Alice", created_at=datetime(2024, 5, 1, 12, 0))

    assert serialize_person(person) == {
        "id": "p1",
        "name": "Alice",
        "createdAt": "2024-05-01T12:00:00",
    }
    assert serialize_person(Person(id="p2", name="Bob"))["createdAt"] is None


def test_serialize_person_balance_formats_amounts() -> None:
    balance = PersonBalance(
        person=Person(id="p1", name="Alice"),
        balances_by_currency=[
            CurrencyBalance(currency_code="EUR", amount=-1500, converted_amount=-1650),
        ],
        total_in_primary_currency=-1650,
    )

    data = serialize_person_balance(balance, "USD")

    assert data["person"]["name"] == "Alice"
    assert data["totalInPrimaryCurrency"] == -1650
    assert data["formattedTotal"] == "-$1,650.00"
    assert data["balancesByCurrency"] == [{
        "currencyCode": "EUR",
        "amount": -1500,
        "convertedAmount": -1650,
        "formatted": "-€1,500.00",
        "formattedConverted": "-$1,650.00",
    }]


def test_serialize_transaction() -> None:
    tx = Transaction(
        id="t1",
        person_id="p1",
        type=TransactionType.REPAYMENT,
        currency_code="GBP",
        amount=12.3,
        incurred_date=date(2024, 2, 29),
    )

    data = serialize_transaction(tx)

    assert data["type"] == "REPAYMENT"
    assert data["personId"] == "p1"
    assert data["formattedAmount"] == "£12.30"
    assert data["incurredDate"] == "2024-02-29"
    assert data["description"] is None


def test_serialize_summary() -> None:
    summary = DashboardSummary(
        primary_currency="EUR",
        net_balance=2500,
        owed_to_you=3000,
        you_owe=500,
        people_with_balance=4,
    )

    data = serialize_summary(summary)

    assert data["primaryCurrency"] == "EUR"
    assert data["peopleWithBalance"] == 4
    assert data["formattedNetBalance"] == "€2,500.00"
    assert data["formattedOwedToYou"] == "€3,000.00"
    assert data["formattedYouOwe"] == "€500.00"
