"""
curem - contact records with validated creation and unique slugs.

Usage:
    from curem.database import DatabaseManager
    from curem.repositories.contact_repository import ContactRepository
    from curem.services.contacts_service import ContactService

    db = DatabaseManager.from_config()
    db.connect()
    service = ContactService(ContactRepository(db.contacts))
    contact = service.new_contact("Encom Inc.", "Sam Flynn", "samflynn@encom.com")
"""

__version__ = "0.1.0"
