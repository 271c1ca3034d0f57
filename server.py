"""Flask server for the curem contacts API"""

from datetime import datetime, timezone
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

# Import logging utils FIRST to configure logging
from curem.utils.logging_utils import get_logger
from curem.config import Config
from curem.database import DatabaseManager
from curem.db.collections import get_contacts_collection
from curem.repositories.contact_repository import ContactRepository
from curem.services.contacts_service import ContactService
from curem.utils.error_handler import PersistenceError
from curem.api.contacts_routes import contacts_bp

logger = get_logger(__name__)


def create_app(db_manager: Optional[DatabaseManager] = None) -> Flask:
    """
    Build the Flask app around an explicit database manager.

    When no manager is given one is created from Config and connected.
    Raises PersistenceError when the database cannot be reached.
    """
    missing = Config.validate()
    if missing:
        logger.warning(f"Missing required configuration: {', '.join(missing)}")
        if Config.is_production():
            raise ValueError(f"Missing required configuration in production: {missing}")

    if db_manager is None:
        db_manager = DatabaseManager.from_config(Config)
    if not db_manager.is_connected and not db_manager.connect():
        logger.error(f"Cannot start: MongoDB unreachable (db={db_manager.db_name})")
        raise PersistenceError(
            f"Could not connect to MongoDB database '{db_manager.db_name}'; check MONGO_URI"
        )

    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    repository = ContactRepository(get_contacts_collection(db_manager))
    app.extensions["curem.db"] = db_manager
    app.extensions["curem.contacts"] = ContactService(repository)

    app.register_blueprint(contacts_bp)

    @app.route("/health")
    def health_check():
        healthy = db_manager.health_check()
        return jsonify({
            "status": "healthy" if healthy else "unhealthy",
            "database": db_manager.db_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }), 200 if healthy else 503

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "NOT_FOUND", "message": "Not found"}), 404

    logger.info(f"App created: {Config.summary()}")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=Config.PORT, debug=Config.DEBUG)
