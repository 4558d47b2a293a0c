"""Contact data model definitions."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

CONTACT_FIELDS = ("firstName", "lastName", "email", "favoriteColor", "birthday")


def _stored_text(value: Any) -> str:
    """Render a stored field as text; other writers may store dates or numbers."""

    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat() if value.time() == datetime.min.time() else value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class ContactInput(BaseModel):
    """Normalized contact fields. Only `validate_contact` should build these."""

    model_config = ConfigDict(frozen=True)

    firstName: str
    lastName: str
    email: str
    favoriteColor: str
    birthday: str

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="python")


class ContactRecord(ContactInput):
    """A stored contact as returned to API clients."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="_id", description="Hex string of the MongoDB ObjectId")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "ContactRecord":
        payload = {field: _stored_text(document.get(field)) for field in CONTACT_FIELDS}
        return cls(_id=str(document["_id"]), **payload)


class CreatedResponse(BaseModel):
    id: str
