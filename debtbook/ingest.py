"""Turn stored rows into validated models before they reach the balance code."""

import logging
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ValidationError

from debtbook.schemas import ExchangeRate, Person, Transaction, TransactionType

logger = logging.getLogger("debtbook")


class DataIntegrityError(ValueError):
    """A stored row does not describe a valid record."""

    def __init__(self, kind: str, index: int, reason: str):
        self.kind = kind
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid {kind} at row {index}: {reason}")


def _parse_rows(model: type[BaseModel], kind: str, rows: Iterable[dict]) -> list:
    parsed = []
    for index, row in enumerate(rows):
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as exc:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            logger.warning(
                "Rejected invalid row",
                extra={"extra_data": {"kind": kind, "row": index, "reason": reason}},
            )
            raise DataIntegrityError(kind, index, reason) from exc
    return parsed


def parse_transactions(rows: Iterable[dict], lenient: bool = False) -> list[Transaction]:
    """Validate transaction rows.

    With lenient=True an unrecognized type is read as a repayment, which is
    how rows written by older clients were interpreted.
    """
    if not lenient:
        return _parse_rows(Transaction, "transaction", rows)

    known = {t.value for t in TransactionType}
    normalized = []
    for index, row in enumerate(rows):
        # Non-mapping rows are left for validation to reject
        if isinstance(row, Mapping):
            value = row.get("type")
            if not (isinstance(value, str) and value in known):
                logger.warning(
                    "Unknown transaction type read as repayment",
                    extra={"extra_data": {"row": index, "type": repr(value)}},
                )
                row = {**row, "type": TransactionType.REPAYMENT}
        normalized.append(row)
    return _parse_rows(Transaction, "transaction", normalized)


def parse_people(rows: Iterable[dict]) -> list[Person]:
    return _parse_rows(Person, "person", rows)


def parse_exchange_rates(rows: Iterable[dict]) -> list[ExchangeRate]:
    return _parse_rows(ExchangeRate, "exchange rate", rows)
