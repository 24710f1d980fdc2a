"""Expense records (``expense_c`` table)."""

from dataclasses import dataclass

from farmhand.core.fields import DomainRecord, coerce_float, coerce_int, foreign_key_id
from farmhand.core.service import FarmScopedService


@dataclass(frozen=True)
class Expense(DomainRecord):
    id: int
    farm_id: int | None = None
    amount: float | None = None
    category: str | None = None
    date: str | None = None
    description: str | None = None


def expense_from_record(item: dict) -> Expense:
    return Expense(
        id=item.get("Id"),
        farm_id=foreign_key_id(item.get("farm_id_c")),
        amount=item.get("amount_c"),
        category=item.get("category_c"),
        date=item.get("date_c"),
        description=item.get("description_c"),
    )


def expense_to_record(data: dict) -> dict:
    """Build the writable fields of an expense record.

    Expenses have no natural title, so the record Name is "<category> - <amount>".
    """
    return {
        "Name": f"{data.get('category')} - {data.get('amount')}",
        "farm_id_c": coerce_int(data.get("farm_id")),
        "amount_c": coerce_float(data.get("amount")),
        "category_c": data.get("category"),
        "date_c": data.get("date"),
        "description_c": data.get("description"),
    }


class ExpenseService(FarmScopedService):
    table = "expense_c"
    fields = ("farm_id_c", "amount_c", "category_c", "date_c", "description_c")
    label = "expenses"

    def from_record(self, record: dict) -> Expense:
        return expense_from_record(record)

    def to_create_record(self, data: dict) -> dict:
        return expense_to_record(data)

    def to_update_record(self, record_id: int, data: dict) -> dict:
        return {"Id": record_id, **expense_to_record(data)}
