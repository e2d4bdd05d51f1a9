# travel_tracker/__init__.py
from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from config import Config
from .extensions import db, migrate, csrf
from .context_processors import utility_processor
from .logging_config import setup_logging
from .security import register_security_headers


def check_database_connection(app):
    """
    Run a trivial query once at startup and log the result.

    A failure is logged and otherwise ignored: the app keeps serving and
    each request reports its own database errors.
    """
    with app.app_context():
        try:
            db.session.execute(text('SELECT 1'))
            app.logger.info("Connected to database")
            return True
        except SQLAlchemyError as e:
            app.logger.error(f"Database connection error: {e}", exc_info=True)
            return False
        finally:
            db.session.remove()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging (do this early, after config is loaded)
    setup_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Models must be imported before migrations or create_all see the metadata
    from travel_tracker import models  # noqa

    from travel_tracker.main import bp as main_bp
    app.register_blueprint(main_bp)

    # Register CLI commands
    from travel_tracker.cli import register_cli_commands
    register_cli_commands(app)

    # Register error handlers
    from travel_tracker.error_handlers import register_error_handlers
    register_error_handlers(app)

    app.context_processor(utility_processor)

    register_security_headers(app)

    if app.config.get('DATABASE_CHECK_ON_STARTUP'):
        check_database_connection(app)

    return app
