"""Pytest fixtures for the task API and board frontend."""

import os

# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"

import pytest  # noqa: E402

from tests.fakes import FlaskTransport  # noqa: E402


@pytest.fixture
def app():
    """Create test application."""
    from taskboard import create_app
    from taskboard.config import TestConfig

    app = create_app(TestConfig)
    app.config["TESTING"] = True

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from taskboard.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.drop_all()


@pytest.fixture
def make_task(db):
    """Insert a task directly through the store."""
    from taskboard.models import Task

    def _make(name="Comprar leche", completed=False):
        task = Task(name=name, completed=completed)
        db.session.add(task)
        db.session.commit()
        return task

    return _make


@pytest.fixture
def transport(client, db):
    """HTTP transport that routes board requests into the API test client."""
    return FlaskTransport(client)


@pytest.fixture
def task_client(transport):
    """Board-side API client wired to the in-process API."""
    from taskboard.board import TaskClient

    return TaskClient("http://api.test", session=transport)


@pytest.fixture
def board_app(task_client):
    """Create the board frontend against the in-process API."""
    from taskboard.board import create_board_app
    from taskboard.config import TestConfig

    return create_board_app(TestConfig, client=task_client)


@pytest.fixture
def board_client(board_app):
    """Create board test client."""
    return board_app.test_client()
