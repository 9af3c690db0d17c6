"""Service modules."""

from taskboard.services.tasks import (
    create_task,
    delete_all_tasks,
    delete_task,
    get_task,
    list_tasks,
    seed_demo_tasks,
    update_task,
)


__all__ = [
    "create_task",
    "list_tasks",
    "get_task",
    "update_task",
    "delete_task",
    "seed_demo_tasks",
    "delete_all_tasks",
]
