"""Pytest fixtures for curem tests."""

import mongomock
import pytest

from curem.database import DatabaseManager
from curem.repositories.contact_repository import ContactRepository
from curem.services.contacts_service import ContactService


@pytest.fixture
def mongo_client():
    """In-memory MongoDB client."""
    return mongomock.MongoClient()


@pytest.fixture
def db_manager(mongo_client):
    """Connected database manager over the in-memory client."""
    manager = DatabaseManager(
        uri="mongodb://localhost:27017",
        db_name="curem_test",
        contacts_name="newcontact",
        leads_name="newlead",
        client=mongo_client,
    )
    assert manager.connect()
    yield manager
    if manager.contacts is not None:
        manager.contacts.drop()


@pytest.fixture
def repository(db_manager):
    return ContactRepository(db_manager.contacts)


@pytest.fixture
def service(repository):
    return ContactService(repository)


@pytest.fixture
def flynn(service):
    """A stored contact with an auto-derived slug."""
    return service.new_contact("Encom Inc.", "Flynn", "flynn@encom.com", "", "", "USA")


@pytest.fixture
def app(db_manager):
    from server import create_app

    app = create_app(db_manager)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
