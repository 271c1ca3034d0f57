from typing import Optional, Type
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import Config
from .repositories.contact_repository import ContactRepository
from .utils.error_handler import PersistenceError
from .utils.logging_utils import get_logger

logger = get_logger(__name__)

class DatabaseManager:
    """MongoDB connection and collection handles, created once at startup and passed around"""

    def __init__(
        self,
        uri: str,
        db_name: str,
        contacts_name: str = "contacts",
        leads_name: str = "leads",
        timeout_ms: int = 5000,
        client: Optional[MongoClient] = None,
    ):
        self.uri = uri
        self.db_name = db_name
        self.contacts_name = contacts_name
        self.leads_name = leads_name
        self.timeout_ms = timeout_ms
        self.client: Optional[MongoClient] = client
        self.db: Optional[Database] = None
        self.contacts: Optional[Collection] = None
        self.leads: Optional[Collection] = None
        self._connected = False

    @classmethod
    def from_config(cls, config: Type[Config] = Config, client: Optional[MongoClient] = None) -> "DatabaseManager":
        """Build a manager from the Config settings"""
        return cls(
            uri=config.MONGO_URI,
            db_name=config.MONGO_DB_NAME,
            contacts_name=config.CONTACTS_COLLECTION,
            leads_name=config.LEADS_COLLECTION,
            timeout_ms=config.MONGO_TIMEOUT_MS,
            client=client,
        )

    def connect(self) -> bool:
        """Establish database connection with error handling"""
        try:
            if self.client is None:
                self.client = MongoClient(
                    self.uri,
                    serverSelectionTimeoutMS=self.timeout_ms,
                    maxPoolSize=10,
                    retryWrites=True
                )

            # Test connection
            self.client.admin.command('ping')

            self.db = self.client[self.db_name]
            self.contacts = self.db[self.contacts_name]
            self.leads = self.db[self.leads_name]

            self.ensure_indexes()

            self._connected = True
            logger.info(f"MongoDB connected successfully. DB={self.db.name}")
            return True

        except (PyMongoError, PersistenceError) as e:
            logger.error(f"MongoDB connection failed: {e}")
            self._connected = False
            return False

    def ensure_indexes(self):
        """Indexes owned by the contacts repository"""
        ContactRepository(self.contacts).ensure_indexes()

    def disconnect(self):
        """Safely close database connection"""
        if self.client:
            try:
                self.client.close()
                logger.info("Database connection closed")
            except PyMongoError as e:
                logger.error(f"Error closing database connection: {e}")
            finally:
                self.client = None
                self.db = None
                self.contacts = None
                self.leads = None
                self._connected = False

    @property
    def is_connected(self) -> bool:
        """Check if database is connected"""
        return self._connected and self.client is not None

    def health_check(self) -> bool:
        """Perform health check on database connection"""
        if not self.is_connected:
            return False

        try:
            self.client.admin.command('ping')
            return True
        except PyMongoError as e:
            logger.error(f"Database health check failed: {e}")
            self._connected = False
            return False
