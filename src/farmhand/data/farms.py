"""Farm records (``farm_c`` table)."""

from dataclasses import dataclass
from datetime import UTC, datetime

from farmhand.core.fields import DomainRecord, coerce_float
from farmhand.core.service import RecordService


@dataclass(frozen=True)
class Farm(DomainRecord):
    id: int
    name: str | None = None
    location: str | None = None
    size: float | None = None
    unit: str | None = None
    created_at: str | None = None


def farm_from_record(item: dict) -> Farm:
    return Farm(
        id=item.get("Id"),
        name=item.get("name_c"),
        location=item.get("location_c"),
        size=item.get("size_c"),
        unit=item.get("unit_c"),
        created_at=item.get("created_at_c"),
    )


def farm_to_record(data: dict, default_name: str = "New Farm") -> dict:
    return {
        "Name": data.get("name") or default_name,
        "name_c": data.get("name"),
        "location_c": data.get("location"),
        "size_c": coerce_float(data.get("size")),
        "unit_c": data.get("unit"),
    }


class FarmService(RecordService):
    table = "farm_c"
    fields = ("name_c", "location_c", "size_c", "unit_c", "created_at_c")
    label = "farms"

    def from_record(self, record: dict) -> Farm:
        return farm_from_record(record)

    def to_create_record(self, data: dict) -> dict:
        # Creation time is stamped here, never taken from the caller
        return {
            **farm_to_record(data),
            "created_at_c": datetime.now(UTC).isoformat(),
        }

    def to_update_record(self, record_id: int, data: dict) -> dict:
        return {"Id": record_id, **farm_to_record(data, default_name="Updated Farm")}
