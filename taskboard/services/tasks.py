"""Task store operations.

Every function here is one store call: routes validate input with the
schemas, hand the loaded fields over, and serialize whatever comes back.
Commit failures are rolled back and re-raised so the error handlers can
report the driver's message.
"""

import logging
from typing import Any

from sqlalchemy import select

from taskboard.extensions import db
from taskboard.models import Task


logger = logging.getLogger(__name__)


def _commit() -> None:
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def create_task(data: dict[str, Any]) -> Task:
    """Insert a new task.

    Args:
        data: Validated fields (name, completed).

    Returns:
        The persisted task with its assigned id and timestamps.
    """
    task = Task(name=data["name"], completed=data.get("completed", False))
    db.session.add(task)
    _commit()
    return task


def list_tasks(completed: bool | None = None, search: str | None = None) -> list[Task]:
    """List tasks matching all given filters.

    Args:
        completed: Exact completion flag, or None for no constraint.
        search: Case-insensitive substring of the name, or None/empty for
            no constraint. Wildcard characters are matched literally.

    Returns:
        Matching tasks ordered by id.
    """
    query = select(Task)

    if completed is not None:
        query = query.where(Task.completed == completed)
    if search:
        query = query.where(Task.name.icontains(search, autoescape=True))

    return list(db.session.scalars(query.order_by(Task.id)))


def get_task(task_id: int) -> Task | None:
    """Fetch a task by primary key."""
    return db.session.get(Task, task_id)


def update_task(task: Task, data: dict[str, Any]) -> Task:
    """Replace the fields present in data, leaving the rest untouched."""
    for field in ("name", "completed"):
        if field in data:
            setattr(task, field, data[field])
    _commit()
    return task


def delete_task(task: Task) -> None:
    """Remove a task permanently."""
    db.session.delete(task)
    _commit()


def seed_demo_tasks() -> list[Task]:
    """Insert the demo tasks shipped with the board."""
    tasks = [
        Task(name="Comprar leche", completed=False),
        Task(name="Pagar facturas", completed=True),
        Task(name="Estudiar Node.js", completed=False),
    ]
    db.session.add_all(tasks)
    _commit()
    logger.info(f"Seeded {len(tasks)} demo tasks")
    return tasks


def delete_all_tasks() -> int:
    """Remove every task and return how many were deleted."""
    count = db.session.query(Task).delete()
    _commit()
    logger.info(f"Removed {count} tasks")
    return count
