"""Flask application factory for the task API with OpenTelemetry instrumentation."""

from flask import Flask

from taskboard.extensions import cors, db, ma
from taskboard.telemetry import configure_logging, telemetry_enabled


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the task API application.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    # Initialize telemetry BEFORE creating Flask app
    if telemetry_enabled():
        from taskboard.telemetry import instrument_flask_app, setup_telemetry

        setup_telemetry("taskboard-api")

    app = Flask(__name__)

    # Instrument Flask app (needed for Gunicorn worker forks)
    if telemetry_enabled():
        instrument_flask_app(app)

    # Load configuration
    if config_class is None:
        from taskboard.config import Config

        config_class = Config
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    ma.init_app(app)
    cors.init_app(
        app,
        resources={r"/tasks.*": {"origins": [app.config["CORS_ORIGIN"]]}},
        methods=["GET", "POST", "PUT", "DELETE"],
        supports_credentials=True,
    )

    # Register blueprints
    from taskboard.routes import health_bp, tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(tasks_bp)

    # Register error handlers and CLI commands
    from taskboard.commands import register_commands
    from taskboard.errors import register_error_handlers

    register_error_handlers(app)
    register_commands(app)

    if telemetry_enabled():
        from taskboard.middleware import register_metrics_middleware
        from taskboard.telemetry import attach_log_handler

        register_metrics_middleware(app)
        attach_log_handler()

    configure_logging()

    # Create database tables
    with app.app_context():
        db.create_all()

    return app
