"""Shared database utilities for accessing MongoDB collections"""

from pymongo.collection import Collection
from curem.database import DatabaseManager
from curem.utils.error_handler import PersistenceError

def get_contacts_collection(db_manager: DatabaseManager) -> Collection:
    """Get the contacts collection from the database manager"""
    if db_manager.is_connected and db_manager.contacts is not None:
        return db_manager.contacts
    raise PersistenceError("Database not connected")

def get_leads_collection(db_manager: DatabaseManager) -> Collection:
    """Get the leads collection from the database manager"""
    if db_manager.is_connected and db_manager.leads is not None:
        return db_manager.leads
    raise PersistenceError("Database not connected")
