"""
Contact repository for MongoDB operations.

Every method either returns the affected contact(s) or raises one of the
AppError subclasses; store failures are never swallowed.
"""

from typing import List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from curem.models.contact import Contact
from curem.utils.error_handler import DuplicateSlugError, NotFoundError, PersistenceError
from curem.utils.logging_utils import get_logger

logger = get_logger(__name__)


def _object_id(contact_id: Optional[str]) -> ObjectId:
    """Parse a contact identifier; malformed ids cannot match any document."""
    if not contact_id:
        raise NotFoundError("Contact has no identifier")
    try:
        return ObjectId(contact_id)
    except (InvalidId, TypeError):
        raise NotFoundError(f"Contact '{contact_id}' not found")


class ContactRepository:
    """Repository for contact document operations."""

    def __init__(self, collection: Collection) -> None:
        """Initialize repository with the contacts collection.

        Args:
            collection: pymongo collection holding contact documents.
        """
        self._collection = collection

    def ensure_indexes(self) -> None:
        """Unique slug index; the store is what keeps slugs unique under concurrent writes."""
        try:
            self._collection.create_index([("slug", ASCENDING)], unique=True, name="slug_unique")
        except PyMongoError as e:
            raise PersistenceError(f"Failed to create slug index: {e}") from e
        logger.debug(f"Ensured unique slug index on {self._collection.name}")

    def create(self, contact: Contact) -> Contact:
        """Insert a validated, slugged contact.

        Args:
            contact: Contact without an identifier.

        Returns:
            Copy of the contact carrying the store-assigned identifier.
        """
        try:
            result = self._collection.insert_one(contact.to_document())
        except DuplicateKeyError as e:
            raise DuplicateSlugError(f"Slug '{contact.slug}' already exists") from e
        except PyMongoError as e:
            logger.error(f"Failed to insert contact '{contact.slug}': {e}")
            raise PersistenceError(f"Failed to create contact: {e}") from e

        created = contact.model_copy(update={"id": str(result.inserted_id)})
        logger.info(f"Created contact {created.id} ({created.slug})")
        return created

    def get_by_id(self, contact_id: str) -> Contact:
        """Get a contact by identifier.

        Raises:
            NotFoundError: no document has this identifier.
        """
        doc = self._find_one({"_id": _object_id(contact_id)})
        if doc is None:
            raise NotFoundError(f"Contact '{contact_id}' not found")
        return Contact.from_document(doc)

    def get_by_slug(self, slug: str) -> Contact:
        """Get a contact by slug.

        Raises:
            NotFoundError: no document has this slug.
        """
        doc = self._find_one({"slug": slug})
        if doc is None:
            raise NotFoundError(f"Contact with slug '{slug}' not found")
        return Contact.from_document(doc)

    def get_all(self) -> List[Contact]:
        """Every stored contact, in no particular order."""
        try:
            docs = list(self._collection.find({}))
        except PyMongoError as e:
            raise PersistenceError(f"Failed to list contacts: {e}") from e
        return [Contact.from_document(doc) for doc in docs]

    def update(self, contact: Contact) -> None:
        """Replace the whole stored document at the contact's identifier.

        Fields are written as they are on `contact`; load, mutate, then update.

        Raises:
            NotFoundError: the identifier does not exist.
            DuplicateSlugError: the contact's slug belongs to another document.
        """
        oid = _object_id(contact.id)
        try:
            result = self._collection.replace_one({"_id": oid}, contact.to_document())
        except DuplicateKeyError as e:
            raise DuplicateSlugError(f"Slug '{contact.slug}' already exists") from e
        except PyMongoError as e:
            logger.error(f"Failed to update contact {contact.id}: {e}")
            raise PersistenceError(f"Failed to update contact: {e}") from e

        if result.matched_count == 0:
            raise NotFoundError(f"Contact '{contact.id}' not found")
        logger.info(f"Updated contact {contact.id}")

    def delete(self, contact: Contact) -> None:
        """Remove the document at the contact's identifier.

        Raises:
            NotFoundError: nothing was stored at that identifier, including
                when the contact was already deleted.
        """
        oid = _object_id(contact.id)
        try:
            result = self._collection.delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Failed to delete contact {contact.id}: {e}")
            raise PersistenceError(f"Failed to delete contact: {e}") from e

        if result.deleted_count == 0:
            raise NotFoundError(f"Contact '{contact.id}' not found")
        logger.info(f"Deleted contact {contact.id}")

    def slug_exists(self, slug: str) -> bool:
        """True when any stored contact carries `slug`."""
        return self._find_one({"slug": slug}, {"_id": 1}) is not None

    def count(self) -> int:
        try:
            return self._collection.count_documents({})
        except PyMongoError as e:
            raise PersistenceError(f"Failed to count contacts: {e}") from e

    def drop(self) -> None:
        """Drop the whole collection (tests and resets)."""
        try:
            self._collection.drop()
        except PyMongoError as e:
            raise PersistenceError(f"Failed to drop contacts: {e}") from e
        logger.warning(f"Dropped collection {self._collection.name}")
        self.ensure_indexes()

    def _find_one(self, query: dict, projection: Optional[dict] = None) -> Optional[dict]:
        try:
            return self._collection.find_one(query, projection)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to query contacts: {e}") from e
