"""Run the task API with Flask's development server.

Production deployments point a WSGI server at ``taskboard:create_app()``.
"""

from taskboard import create_app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"])


if __name__ == "__main__":
    main()
