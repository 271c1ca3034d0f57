"""
Contact service: validated construction and the operations built on the repository.

Creation flows validator -> slug generator -> repository. Reads and deletes
go straight to the repository; updates are validated first.
"""

from __future__ import annotations

from typing import List, Optional

from curem.models.contact import Contact
from curem.repositories.contact_repository import ContactRepository
from curem.utils.error_handler import ValidationError
from curem.utils.logging_utils import get_logger
from curem.utils.slug import SlugGenerator
from curem.utils.validators import InputValidator

logger = get_logger(__name__)


class ContactService:
    """Contact workflows over an injected repository."""

    def __init__(self, repository: ContactRepository, slug_generator: Optional[SlugGenerator] = None):
        self.repository = repository
        self.slugs = slug_generator or SlugGenerator(repository.slug_exists)

    def new_contact(
        self,
        company: str,
        person: str,
        email: str,
        phone: str = "",
        slug_hint: str = "",
        country: str = "",
    ) -> Contact:
        """
        Validate, slug and insert a new contact.

        An empty `slug_hint` derives a unique slug from `person`. A non-empty
        hint is normalized with slugify and must not be taken already;
        otherwise DuplicateSlugError is raised.

        Returns
        -------
        Contact
            The stored contact, including its identifier.
        """
        fields = InputValidator.validate_contact(company, person, email, phone, slug_hint, country)

        hint = fields.pop("slug")
        if hint:
            slug = self.slugs.claim(hint)
            if not slug:
                raise ValidationError(f"Slug '{hint}' has no usable characters")
        else:
            slug = self.slugs.unique_slug(fields["person"])

        contact = Contact(slug=slug, **fields)
        return self.repository.create(contact)

    def get_by_id(self, contact_id: str) -> Contact:
        return self.repository.get_by_id(contact_id)

    def get_by_slug(self, slug: str) -> Contact:
        return self.repository.get_by_slug(slug)

    def get_all(self) -> List[Contact]:
        return self.repository.get_all()

    def slug_exists(self, slug: str) -> bool:
        return self.repository.slug_exists(slug)

    def update(self, contact: Contact) -> None:
        """
        Validate the in-memory contact and replace the stored document.

        The slug cannot change here; use regenerate_slug for that.
        """
        _validate_stored_fields(contact)
        stored = self.repository.get_by_id(contact.id)
        if contact.slug != stored.slug:
            raise ValidationError(
                f"Slug cannot be changed from '{stored.slug}' to '{contact.slug}'; regenerate it instead"
            )
        self.repository.update(contact)

    def delete(self, contact: Contact) -> None:
        self.repository.delete(contact)

    def regenerate_slug(self, contact: Contact) -> Contact:
        """
        Derive a fresh slug from the contact's current person name and store it.

        The contact's stored slug does not count as a collision, so a contact
        whose name did not change keeps an equivalent slug.
        """
        _validate_stored_fields(contact)
        own = self.repository.get_by_id(contact.id).slug
        generator = SlugGenerator(
            lambda candidate: candidate != own and self.repository.slug_exists(candidate),
            max_attempts=self.slugs.max_attempts,
        )
        updated = contact.model_copy(update={"slug": generator.unique_slug(contact.person)})
        self.repository.update(updated)
        logger.info(f"Regenerated slug for {contact.id}: '{own}' -> '{updated.slug}'")
        return updated


def _validate_stored_fields(contact: Contact) -> None:
    InputValidator.validate_person(contact.person)
    InputValidator.validate_email(contact.email)
