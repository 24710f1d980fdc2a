"""Helpers for Apper record fields - selections, filters, coercion, relations."""

import dataclasses
from dataclasses import dataclass

# =============================================================================
# Request Builders
# =============================================================================


def select_fields(*names: str) -> list[dict]:
    """Build a field selection list, always including the record's Name."""
    return [{"field": {"Name": name}} for name in ("Name", *names)]


def equal_to(field_name: str, value) -> list[dict]:
    """Build a single EqualTo filter condition."""
    return [{"FieldName": field_name, "Operator": "EqualTo", "Values": [value]}]


def order_by(field_name: str, direction: str = "ASC") -> list[dict]:
    return [{"fieldName": field_name, "sorttype": direction}]


# =============================================================================
# Coercion
# =============================================================================


def coerce_int(value) -> int | None:
    """Coerce an id-like value to int. None passes through.

    Accepts ints, integral floats and numeric strings ("12", " 12 ", "12.0").

    Raises:
        ValueError: If the value is not integer-like
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Not an integer id: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Not an integer id: {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            return coerce_int(float(text))
    raise ValueError(f"Not an integer id: {value!r}")


def coerce_float(value) -> float | None:
    """Coerce a numeric value (or numeric string) to float. None passes through."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    return float(value)


# =============================================================================
# Relations
# =============================================================================


@dataclass(frozen=True)
class ScalarKey:
    """Foreign key returned as a bare id."""

    id: int


@dataclass(frozen=True)
class EmbeddedKey:
    """Foreign key returned as a lookup object, e.g. {"Id": 7, "Name": "Farm A"}."""

    id: int
    name: str | None = None


ForeignKey = ScalarKey | EmbeddedKey


def parse_foreign_key(raw) -> ForeignKey | None:
    """Classify a relation field value as it arrives from the backend.

    Returns None for missing or unrecognizable values.
    """
    if raw is None:
        return None
    if isinstance(raw, dict):
        try:
            record_id = coerce_int(raw.get("Id"))
        except ValueError:
            return None
        if record_id is None:
            return None
        return EmbeddedKey(id=record_id, name=raw.get("Name"))
    try:
        record_id = coerce_int(raw)
    except ValueError:
        return None
    return ScalarKey(id=record_id)


def foreign_key_id(raw) -> int | None:
    """Reduce a relation field to its bare integer id."""
    key = parse_foreign_key(raw)
    return key.id if key is not None else None


# =============================================================================
# Domain Records
# =============================================================================


def camel_case(name: str) -> str:
    """Convert a snake_case attribute name to the UI's camelCase key."""
    if name == "id":
        return "Id"
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class DomainRecord:
    """Mixin for entity dataclasses that renders the UI's camelCase shape."""

    def to_dict(self) -> dict:
        result = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if isinstance(value, DomainRecord):
                value = value.to_dict()
            result[camel_case(field.name)] = value
        return result
