from debtbook.currency import format_currency
from debtbook.schemas import CurrencyBalance, DashboardSummary, Person, PersonBalance, Transaction


def serialize_person(person: Person) -> dict:
    return {
        "id": person.id,
        "name": person.name,
        "createdAt": person.created_at.isoformat() if person.created_at is not None else None,
    }


def serialize_currency_balance(balance: CurrencyBalance, primary_currency: str) -> dict:
    return {
        "currencyCode": balance.currency_code,
        "amount": balance.amount,
        "convertedAmount": balance.converted_amount,
        "formatted": format_currency(balance.amount, balance.currency_code),
        "formattedConverted": format_currency(balance.converted_amount, primary_currency),
    }


def serialize_person_balance(balance: PersonBalance, primary_currency: str) -> dict:
    return {
        "person": serialize_person(balance.person),
        "balancesByCurrency": [
            serialize_currency_balance(b, primary_currency) for b in balance.balances_by_currency
        ],
        "totalInPrimaryCurrency": balance.total_in_primary_currency,
        "formattedTotal": format_currency(balance.total_in_primary_currency, primary_currency),
    }


def serialize_transaction(tx: Transaction) -> dict:
    return {
        "id": tx.id,
        "personId": tx.person_id,
        "type": tx.type.value,
        "currencyCode": tx.currency_code,
        "amount": tx.amount,
        "formattedAmount": format_currency(tx.amount, tx.currency_code),
        "description": tx.description,
        "incurredDate": tx.incurred_date.isoformat() if tx.incurred_date is not None else None,
    }


def serialize_summary(summary: DashboardSummary) -> dict:
    currency = summary.primary_currency
    return {
        "primaryCurrency": currency,
        "netBalance": summary.net_balance,
        "owedToYou": summary.owed_to_you,
        "youOwe": summary.you_owe,
        "peopleWithBalance": summary.people_with_balance,
        "formattedNetBalance": format_currency(summary.net_balance, currency),
        "formattedOwedToYou": format_currency(summary.owed_to_you, currency),
        "formattedYouOwe": format_currency(summary.you_owe, currency),
    }
