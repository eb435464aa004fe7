# progress_log/__init__.py

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from sqlalchemy.engine.url import make_url
from dotenv import load_dotenv
import os

# ======================================================
# Load environment first
# ======================================================
load_dotenv()

db = SQLAlchemy()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per hour"],
    storage_uri="memory://"
)


def create_app(test_config=None, repository=None):
    """
    Build the progress log application.

    ``repository`` lets callers hand in their own storage handle; by default
    an EntryRepository over ``db.session`` is used. Raises StartupError when
    the schema cannot be ensured.
    """
    app = Flask(__name__)

    # ==================================================
    # Database
    # ==================================================
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///progress_log.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
        "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
        "max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "10")),
        "pool_pre_ping": True,
        "pool_recycle": 1800,
    }

    # ==================================================
    # Rate Limiting / Logging
    # ==================================================
    # Opt-in; off unless RATELIMIT_ENABLED=true
    app.config["RATELIMIT_ENABLED"] = os.getenv("RATELIMIT_ENABLED", "false").lower() == "true"
    app.config["ADD_RATE_LIMIT"] = os.getenv("ADD_RATE_LIMIT", "30/minute")
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO").upper()

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    limiter.init_app(app)
    db.init_app(app)

    # ==================================================
    # Blueprints / Errors / CLI
    # ==================================================
    from progress_log.cli import entries_cli
    from progress_log.errors import StartupError, StorageError, register_error_handlers
    from progress_log.repository import EntryRepository
    from progress_log.routes.entries import entries_bp

    app.register_blueprint(entries_bp)
    register_error_handlers(app)
    app.cli.add_command(entries_cli)

    # ==================================================
    # Database Initialization (tables)
    # ==================================================
    if repository is None:
        repository = EntryRepository(db.session)
    app.extensions["entry_repository"] = repository

    safe_uri = make_url(app.config["SQLALCHEMY_DATABASE_URI"]).render_as_string(hide_password=True)
    app.logger.info("Using database %s", safe_uri)

    with app.app_context():
        try:
            repository.ensure_schema()
        except StorageError as exc:
            raise StartupError(f"Could not prepare progress log storage at {safe_uri}: {exc}") from exc

    app.logger.info("Progress log schema ready")

    # ==================================================
    # Security Headers
    # ==================================================
    @app.after_request
    def apply_security_headers(response):
        csp = (
            "default-src 'self'; "
            "img-src 'self' data:; "
            "style-src 'self' 'unsafe-inline'; "
            "form-action 'self';"
        )
        response.headers["Content-Security-Policy"] = csp
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response

    return app
