"""Contact entity and its document mapping."""

from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from curem.utils.error_handler import PersistenceError


class Contact(BaseModel):
    """
    A contact record.

    Equality is field-wise, so a contact read back from the store compares
    equal to the one that was written.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    company: str = ""
    person: str = ""
    email: str = ""
    phone: str = ""
    slug: str = ""
    country: str = ""

    def to_document(self) -> Dict[str, Any]:
        """Mongo document for this contact (without `_id`)."""
        return self.model_dump(exclude={"id"})

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Contact":
        """Build a Contact from a stored document."""
        if not isinstance(doc, dict) or "_id" not in doc:
            raise PersistenceError("Stored contact has no identifier")
        data = {k: v for k, v in doc.items() if k != "_id"}
        _id = doc["_id"]
        data["id"] = str(_id) if isinstance(_id, ObjectId) else _id
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise PersistenceError(f"Unexpected contact document shape: {e}") from e

    def public_dict(self) -> Dict[str, Any]:
        """JSON-friendly view used by the API"""
        return self.model_dump()
