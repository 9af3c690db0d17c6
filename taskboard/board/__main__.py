"""Run the board frontend with Flask's development server."""

from taskboard.board import create_board_app


def main() -> None:
    app = create_board_app()
    app.run(host="0.0.0.0", port=app.config["BOARD_PORT"])


if __name__ == "__main__":
    main()
