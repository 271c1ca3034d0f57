"""Tests for ContactService."""

from unittest.mock import MagicMock

import pytest

from curem.models.contact import Contact
from curem.services.contacts_service import ContactService
from curem.utils.error_handler import DuplicateSlugError, NotFoundError, ValidationError


class TestNewContact:
    """Tests for the validated construction workflow."""

    def test_new_contact(self, service, db_manager):
        contact = service.new_contact("Encom Inc.", "Flynn", "flynn@encom.com", "", "", "USA")

        fetched = Contact.from_document(db_manager.contacts.find_one({}))
        assert fetched == contact
        assert contact.email == "flynn@encom.com"
        assert contact.slug == "flynn"
        assert contact.id is not None

    def test_get_by_id_returns_equal_contact(self, service, flynn):
        assert service.get_by_id(flynn.id) == flynn

    @pytest.mark.parametrize("person,email", [
        ("", "flynn@encom.com"),
        ("Sam Flynn", ""),
        ("Sam Flynn", "x@.xyzc.com"),
    ])
    def test_validation_errors(self, service, repository, person, email):
        with pytest.raises(ValidationError):
            service.new_contact("Encom Inc.", person, email, "", "", "USA")
        assert repository.count() == 0

    def test_validation_happens_before_store_access(self):
        repository = MagicMock()
        service = ContactService(repository)

        with pytest.raises(ValidationError):
            service.new_contact("Encom Inc.", "", "flynn@encom.com")

        repository.slug_exists.assert_not_called()
        repository.create.assert_not_called()

    def test_slug_hint_is_normalized(self, service):
        contact = service.new_contact(
            "Encom Inc.", "Sam Flynn", "samflynn@encom.com", "103-345-456", "sam_flynn", "USA"
        )
        assert contact.slug == "sam-flynn"
        assert service.get_by_slug(contact.slug) == contact

    def test_slug_hint_not_derived_from_person(self, service):
        contact = service.new_contact("Encom Inc.", "Sam Flynn", "samflynn@encom.com", "", "user", "USA")
        assert contact.slug == "user"

    def test_taken_slug_hint_is_rejected(self, service, repository):
        service.new_contact("Encom Inc.", "Sam Flynn", "samflynn@encom.com", "", "sam_flynn", "USA")
        with pytest.raises(DuplicateSlugError):
            service.new_contact("Encom Inc.", "Sam Flynn", "other@encom.com", "", "sam-flynn", "USA")
        assert repository.count() == 1

    def test_unusable_slug_hint(self, service):
        with pytest.raises(ValidationError):
            service.new_contact("Encom Inc.", "Sam Flynn", "samflynn@encom.com", "", "???", "USA")

    def test_same_person_gets_distinct_slugs(self, service):
        first = service.new_contact("Encom Inc.", "Sam Flynn", "samflynn@encom.com", "", "", "USA")
        second = service.new_contact("Encom Inc.", "Sam Flynn", "sam@example.com", "", "", "USA")

        assert first.slug == "sam-flynn"
        assert second.slug != "sam-flynn"
        assert second.slug == "sam-flynn-2"

    def test_slug_exists(self, service):
        contact = service.new_contact(
            "Encom Inc.", "Sam Flynn", "samflynn@encom.com", "103-345-456", "sam_flynn", "USA"
        )
        assert service.slug_exists(contact.slug) is True
        assert service.slug_exists("kevin-flynn") is False


class TestContactOperations:
    """Tests for reads, updates and deletes through the service."""

    def test_get_all(self, service):
        service.new_contact("Encom Inc.", "Sam Flynn", "samflynn@encom.com", "103-345-456", "sam_flynn", "USA")
        service.new_contact("Encom Inc.", "Kevin Flynn", "kevinflynn@encom.com", "234-877-988", "kevin_flynn", "USA")

        assert len(service.get_all()) == 2

    def test_update_country(self, service, flynn):
        flynn.country = "India"
        service.update(flynn)

        assert service.get_by_id(flynn.id).country == "India"

    def test_update_rejects_invalid_email(self, service, flynn):
        flynn.email = "x@.xyzc.com"
        with pytest.raises(ValidationError):
            service.update(flynn)
        assert service.get_by_id(flynn.id).email == "flynn@encom.com"

    def test_update_rejects_empty_person(self, service, flynn):
        flynn.person = " "
        with pytest.raises(ValidationError):
            service.update(flynn)

    def test_update_cannot_change_slug(self, service, flynn):
        flynn.slug = "Not A Slug!"
        with pytest.raises(ValidationError, match="regenerate"):
            service.update(flynn)
        assert service.get_by_id(flynn.id).slug == "flynn"
        assert service.slug_exists("Not A Slug!") is False

    def test_update_missing_contact(self, service, flynn):
        service.delete(flynn)
        with pytest.raises(NotFoundError):
            service.update(flynn)

    def test_delete(self, service, repository, flynn):
        before = repository.count()

        service.delete(flynn)

        assert repository.count() == before - 1
        with pytest.raises(NotFoundError):
            service.delete(flynn)

    def test_get_deleted_contact(self, service, flynn):
        service.delete(flynn)
        with pytest.raises(NotFoundError):
            service.get_by_id(flynn.id)


class TestRegenerateSlug:
    """Tests for ContactService.regenerate_slug."""

    def test_follows_renamed_person(self, service, flynn):
        flynn.person = "Kevin Flynn"
        service.update(flynn)

        updated = service.regenerate_slug(flynn)

        assert updated.slug == "kevin-flynn"
        assert service.get_by_slug("kevin-flynn").id == flynn.id
        assert service.slug_exists("flynn") is False

    def test_keeps_own_slug_when_name_unchanged(self, service, flynn):
        assert service.regenerate_slug(flynn).slug == "flynn"

    def test_avoids_other_contacts(self, service, flynn):
        service.new_contact("Encom Inc.", "Kevin Flynn", "kevinflynn@encom.com")
        flynn.person = "Kevin Flynn"

        updated = service.regenerate_slug(flynn)

        assert updated.slug == "kevin-flynn-2"
