"""Task CRUD endpoints."""

import logging

from flask import Blueprint, jsonify, request

from taskboard import services
from taskboard.errors import error_response
from taskboard.schemas import TaskCreateSchema, TaskSchema, TaskUpdateSchema
from taskboard.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)
tasks_deleted = meter.create_counter(
    name="tasks.deleted",
    description="Tasks deleted",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/tasks")

TASK_NOT_FOUND = "Task not found"


def _json_body() -> dict:
    """Return the request body as a dict; anything else counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _parse_completed(value: str | None) -> bool | None:
    if value is None:
        return None
    return value.lower() == "true"


@tasks_bp.route("", methods=["POST"])
def create_task():
    """Create a new task.

    Returns:
        JSON response with the created task and 201 status.
    """
    with tracer.start_as_current_span("task.create") as span:
        data = TaskCreateSchema().load(_json_body())
        task = services.create_task(data)

        span.set_attribute("task.id", task.id)
        tasks_created.add(1, {"completed": str(task.completed).lower()})
        logger.info(f"Task created: {task.id}")

        return TaskSchema().jsonify(task), 201


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    """List tasks with optional filters.

    Query params:
        completed: "true" for completed tasks, any other value for pending ones
        search: Substring of the task name (case-insensitive)

    Returns:
        JSON array of matching tasks.
    """
    completed = _parse_completed(request.args.get("completed"))
    search = request.args.get("search") or None

    tasks = services.list_tasks(completed=completed, search=search)
    return TaskSchema(many=True).jsonify(tasks)


@tasks_bp.route("/<int:task_id>", methods=["GET"])
def get_task(task_id: int):
    """Get a single task by id.

    Args:
        task_id: Task identifier.

    Returns:
        JSON response with task data.
    """
    task = services.get_task(task_id)
    if not task:
        return error_response(TASK_NOT_FOUND, 404)

    return TaskSchema().jsonify(task)


@tasks_bp.route("/<int:task_id>", methods=["PUT"])
def update_task(task_id: int):
    """Update some or all fields of a task.

    Args:
        task_id: Task identifier.

    Returns:
        JSON response with the full updated task.
    """
    with tracer.start_as_current_span("task.update") as span:
        span.set_attribute("task.id", task_id)

        task = services.get_task(task_id)
        if not task:
            return error_response(TASK_NOT_FOUND, 404)

        data = TaskUpdateSchema().load(_json_body())
        services.update_task(task, data)

        span.set_attribute("task.fields", sorted(data))
        logger.info(f"Task updated: {task.id}", extra={"fields": sorted(data)})

        return TaskSchema().jsonify(task)


@tasks_bp.route("/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int):
    """Delete a task.

    Args:
        task_id: Task identifier.

    Returns:
        JSON confirmation message.
    """
    with tracer.start_as_current_span("task.delete") as span:
        span.set_attribute("task.id", task_id)

        task = services.get_task(task_id)
        if not task:
            return error_response(TASK_NOT_FOUND, 404)

        services.delete_task(task)

        tasks_deleted.add(1)
        logger.info(f"Task deleted: {task_id}")

        return jsonify({"message": "Task deleted"})
