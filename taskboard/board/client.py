"""HTTP client for the task API."""

import logging
from enum import Enum
from typing import Any

import requests


logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Category of a board request, used to word failure notices."""

    LOAD = "load"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def notice(self) -> str:
        return {
            Action.LOAD: "Failed to load tasks",
            Action.CREATE: "Failed to create task",
            Action.UPDATE: "Failed to update task",
            Action.DELETE: "Failed to delete task",
        }[self]


class TaskApiError(Exception):
    """A request to the task API failed (network error or non-2xx)."""

    def __init__(self, action: Action, detail: str, status_code: int | None = None):
        super().__init__(f"{action.notice}: {detail}")
        self.action = action
        self.detail = detail
        self.status_code = status_code


class TaskClient:
    """Thin wrapper over the task API endpoints.

    Args:
        base_url: API root, e.g. ``http://localhost:8080``.
        session: Object with a ``requests.Session``-compatible ``request``
            method. Defaults to a new session.
        timeout: Per-request timeout in seconds; None keeps the transport default.
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def list_tasks(self, search: str | None = None, completed: bool | None = None) -> list[dict]:
        params: dict[str, str] = {}
        if search:
            params["search"] = search
        if completed is not None:
            params["completed"] = "true" if completed else "false"
        return self._request(Action.LOAD, "GET", "/tasks", params=params)

    def get_task(self, task_id: int) -> dict:
        return self._request(Action.LOAD, "GET", f"/tasks/{task_id}")

    def create_task(self, name: str, completed: bool = False) -> dict:
        return self._request(
            Action.CREATE, "POST", "/tasks", json={"name": name, "completed": completed}
        )

    def update_task(self, task_id: int, **fields: Any) -> dict:
        return self._request(Action.UPDATE, "PUT", f"/tasks/{task_id}", json=fields)

    def delete_task(self, task_id: int) -> dict:
        return self._request(Action.DELETE, "DELETE", f"/tasks/{task_id}")

    def _request(self, action: Action, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            logger.warning(f"{method} {path} returned {status_code}")
            raise TaskApiError(action, str(exc), status_code=status_code) from exc
        except (requests.RequestException, ValueError) as exc:
            logger.warning(f"{method} {path} failed: {exc}")
            raise TaskApiError(action, str(exc)) from exc
