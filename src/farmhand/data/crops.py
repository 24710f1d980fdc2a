"""Crop records (``crop_c`` table)."""

from dataclasses import dataclass

from farmhand.core.fields import DomainRecord, coerce_int, foreign_key_id
from farmhand.core.service import FarmScopedService


@dataclass(frozen=True)
class Crop(DomainRecord):
    id: int
    crop_type: str | None = None
    planting_date: str | None = None
    field_location: str | None = None
    status: str | None = None
    expected_harvest: str | None = None
    notes: str | None = None
    farm_id: int | None = None


def crop_from_record(item: dict) -> Crop:
    return Crop(
        id=item.get("Id"),
        crop_type=item.get("crop_type_c"),
        planting_date=item.get("planting_date_c"),
        field_location=item.get("field_location_c"),
        status=item.get("status_c"),
        expected_harvest=item.get("expected_harvest_c"),
        notes=item.get("notes_c"),
        farm_id=foreign_key_id(item.get("farm_id_c")),
    )


def crop_to_record(data: dict, default_name: str = "New Crop") -> dict:
    """Build the writable fields of a crop record."""
    return {
        "Name": data.get("crop_type") or default_name,
        "crop_type_c": data.get("crop_type"),
        "planting_date_c": data.get("planting_date"),
        "field_location_c": data.get("field_location"),
        "status_c": data.get("status"),
        "expected_harvest_c": data.get("expected_harvest"),
        "notes_c": data.get("notes"),
        "farm_id_c": coerce_int(data.get("farm_id")),
    }


class CropService(FarmScopedService):
    table = "crop_c"
    fields = (
        "crop_type_c",
        "planting_date_c",
        "field_location_c",
        "status_c",
        "expected_harvest_c",
        "notes_c",
        "farm_id_c",
    )
    label = "crops"

    def from_record(self, record: dict) -> Crop:
        return crop_from_record(record)

    def to_create_record(self, data: dict) -> dict:
        return crop_to_record(data)

    def to_update_record(self, record_id: int, data: dict) -> dict:
        return {"Id": record_id, **crop_to_record(data, default_name="Updated Crop")}
