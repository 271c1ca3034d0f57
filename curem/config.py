"""
Centralized configuration management for curem.

All environment variables should be accessed through this module.
This provides:
- Default values
- Validation
- Environment-specific behavior
"""

import os
import logging
from typing import Any, Dict
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Centralized configuration management"""

    # ═══════════════════════════════════════════════════════════════════
    # Environment & App Settings
    # ═══════════════════════════════════════════════════════════════════

    APP_ENV: str = os.getenv("APP_ENV", "development")  # development | production
    DEBUG: bool = os.getenv("DEBUG", "true").lower() in ("true", "1", "yes")
    PORT: int = int(os.getenv("PORT", "5000"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # DEBUG | INFO | WARNING | ERROR
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # ═══════════════════════════════════════════════════════════════════
    # Database Configuration
    # ═══════════════════════════════════════════════════════════════════

    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "curem")
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
    CONTACTS_COLLECTION: str = os.getenv("CONTACTS_COLLECTION", "contacts")
    LEADS_COLLECTION: str = os.getenv("LEADS_COLLECTION", "leads")

    # ═══════════════════════════════════════════════════════════════════
    # Slugs
    # ═══════════════════════════════════════════════════════════════════

    # Counter suffixes tried before falling back to a random suffix
    SLUG_MAX_ATTEMPTS: int = int(os.getenv("SLUG_MAX_ATTEMPTS", "100"))

    # ═══════════════════════════════════════════════════════════════════
    # Helper Methods
    # ═══════════════════════════════════════════════════════════════════

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production mode"""
        return cls.APP_ENV == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development mode"""
        return not cls.is_production()

    @classmethod
    def validate(cls) -> list[str]:
        """Validate required configuration and return list of missing items"""
        missing = []

        if not cls.MONGO_DB_NAME:
            missing.append("MONGO_DB_NAME")
        if not cls.CONTACTS_COLLECTION:
            missing.append("CONTACTS_COLLECTION")
        if cls.SLUG_MAX_ATTEMPTS < 1:
            missing.append("SLUG_MAX_ATTEMPTS (must be >= 1)")

        # Production-only requirements
        if cls.is_production() and not os.getenv("MONGO_URI"):
            missing.append("MONGO_URI (production)")

        return missing

    @classmethod
    def get_log_level(cls) -> int:
        """Get logging level as int"""
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }
        return level_map.get(cls.LOG_LEVEL.upper(), logging.INFO)

    @classmethod
    def summary(cls) -> Dict[str, Any]:
        """Configuration summary (safe for logs, no credentials)"""
        return {
            "environment": cls.APP_ENV,
            "debug": cls.DEBUG,
            "log_level": cls.LOG_LEVEL,
            "database": cls.MONGO_DB_NAME,
            "contacts_collection": cls.CONTACTS_COLLECTION,
            "leads_collection": cls.LEADS_COLLECTION,
        }
