from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field


class TransactionType(str, Enum):
    DEBT = "DEBT"  # the person owes you more
    REPAYMENT = "REPAYMENT"


# --- Inputs ---

class Transaction(BaseModel):
    person_id: str
    type: TransactionType
    currency_code: str
    amount: float
    id: str | None = None
    description: str | None = None
    incurred_date: date | None = None
    created_at: datetime | None = None


class Person(BaseModel):
    id: str
    name: str
    created_at: datetime | None = None


class ExchangeRate(BaseModel):
    currency_code: str
    rate_to_primary: float = Field(gt=0)
    id: str | None = None
    updated_at: datetime | None = None


class Profile(BaseModel):
    primary_currency: str = "USD"


# --- Derived ---

class PersonBucket(BaseModel):
    """Running debt and repayment sums for one person, keyed by currency."""

    debts: dict[str, float] = {}
    repayments: dict[str, float] = {}


class CurrencyBalance(BaseModel):
    currency_code: str
    amount: float  # net, in currency_code
    converted_amount: float  # in the primary currency


class PersonBalance(BaseModel):
    person: Person
    balances_by_currency: list[CurrencyBalance] = []
    total_in_primary_currency: float = 0.0


class DashboardSummary(BaseModel):
    primary_currency: str
    net_balance: float
    owed_to_you: float
    you_owe: float
    people_with_balance: int
