"""Flask application factory for the task board frontend."""

from flask import Flask

from taskboard.board.client import Action, TaskApiError, TaskClient
from taskboard.board.state import BoardController, BoardState, partition
from taskboard.telemetry import configure_logging, telemetry_enabled


def create_board_app(config_class: type | None = None, client: TaskClient | None = None) -> Flask:
    """Create the board frontend.

    Args:
        config_class: Configuration class to use. Defaults to Config.
        client: Task API client; built from API_BASE_URL when omitted.

    Returns:
        Configured Flask application instance.
    """
    if telemetry_enabled():
        from taskboard.telemetry import instrument_flask_app, setup_telemetry

        setup_telemetry("taskboard-board")

    app = Flask(__name__)

    if telemetry_enabled():
        instrument_flask_app(app)

    if config_class is None:
        from taskboard.config import Config

        config_class = Config
    app.config.from_object(config_class)

    from taskboard.board.views import CLIENT_KEY, board_bp

    app.extensions[CLIENT_KEY] = client or TaskClient(
        app.config["API_BASE_URL"], timeout=app.config.get("API_TIMEOUT")
    )
    app.register_blueprint(board_bp)

    if telemetry_enabled():
        from taskboard.middleware import register_metrics_middleware
        from taskboard.telemetry import attach_log_handler

        register_metrics_middleware(app)
        attach_log_handler()

    configure_logging()

    return app


__all__ = [
    "create_board_app",
    "Action",
    "TaskApiError",
    "TaskClient",
    "BoardController",
    "BoardState",
    "partition",
]
