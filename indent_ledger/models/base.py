from datetime import date
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return str(ObjectId())


def today() -> str:
    return date.today().isoformat()


def coerce_number(value: Any) -> Any:
    """Blank or missing numeric fields count as 0."""
    if value is None:
        return 0
    if isinstance(value, str) and not value.strip():
        return 0
    return value


class LedgerModel(BaseModel):
    """Base for entity records exchanged with the UI and the cloud store.

    Fields are snake_case in Python and camelCase on the wire; either name
    is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class LedgerRecord(LedgerModel):
    """Base for stored entities.

    Keys this service does not declare are kept on the record, so a pulled
    record is pushed back with every field it arrived with.
    """

    model_config = ConfigDict(extra="allow")
