"""
Application factory
"""

# Python Packages
import click
from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.swagger import create_api
from .config.urls import URLs
from .config.database import init_db, db
from .notifications.services.message_events import init_message_events
from .util.logger import setup_logging, get_logger

logger = get_logger("app")





def create_app(test_config: dict = None):
    """
    Application Factory

    Args:
        test_config (dict): config overrides (tests, scripts)
    """

    setup_logging()

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV == "development"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"

    if test_config:
        app.config.update(test_config)

    # Initialize Database
    init_db(app)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS (credentials needed for the session cookie)
    CORS(app, origins = constants.CORS_ALLOWED_ORIGINS, supports_credentials = True)

    # Message change feed
    init_message_events(app)

    # Initialize Swagger + Register Namespaces
    api = create_api()
    URLs.add_namespaces(api)
    api.init_app(app)

    # CLI
    register_commands(app)

    logger.info("Fund Connect app created (env=%s)", constants.APP_ENV)
    return app





def register_commands(app):
    """ flask <command> entries... """

    @app.cli.command("setup-storage")
    @click.option("--public/--private", default = None, help = "Override AWS_S3_PUBLIC_BUCKET.")
    def setup_storage(public):
        """Create / update the fund document bucket."""

        from .vendors.aws.s3_bucket import S3BucketService

        result = S3BucketService().ensure_bucket(public = public)

        click.echo(
            f"Bucket {result['bucket']}: "
            f"{'created' if result['created'] else 'already existed'}, "
            f"public={result['public']}, max_upload_bytes={result['max_upload_bytes']}"
        )
