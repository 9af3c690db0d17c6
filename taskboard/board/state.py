"""Board state and the operations that drive it.

The board never patches its task list locally: every mutation is followed
by a full reload, so what is rendered is always what the store returned
on the last successful fetch.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from taskboard.board.client import TaskApiError, TaskClient


logger = logging.getLogger(__name__)


class Column(NamedTuple):
    key: str
    title: str
    completed: bool
    tasks: list[dict[str, Any]]


def partition(tasks: list[dict[str, Any]]) -> tuple[Column, Column]:
    """Split tasks into the incomplete and completed columns.

    Every task lands in exactly one column, chosen by its ``completed``
    flag alone; input order is kept within each column.
    """
    incomplete = [t for t in tasks if not t["completed"]]
    completed = [t for t in tasks if t["completed"]]
    return (
        Column("incomplete", "Incomplete", False, incomplete),
        Column("completed", "Completed", True, completed),
    )


@dataclass
class BoardState:
    """Everything the board view renders from."""

    tasks: list[dict[str, Any]] = field(default_factory=list)
    search: str = ""
    new_task_name: str = ""
    notice: str | None = None

    @property
    def columns(self) -> tuple[Column, Column]:
        return partition(self.tasks)


class BoardController:
    """Apply user actions to a BoardState through the task API."""

    def __init__(self, client: TaskClient, state: BoardState | None = None):
        self.client = client
        self.state = state or BoardState()
        self.load_attempted = False

    def load(self) -> None:
        """Replace the task mirror with the current (search-filtered) list."""
        self.load_attempted = True
        try:
            self.state.tasks = self.client.list_tasks(search=self.state.search or None)
        except TaskApiError as err:
            self._notify(err)

    def set_search(self, search: str) -> None:
        self.state.search = search
        self.load()

    def create(self, name: str) -> None:
        self.state.new_task_name = name
        name = name.strip()
        if not name:
            return

        try:
            self.client.create_task(name, completed=False)
        except TaskApiError as err:
            self._notify(err)
            return

        self.state.new_task_name = ""
        self.load()

    def move(self, task_id: int, completed: bool) -> None:
        """Drop a card on a column: set its completion flag to the column's."""
        try:
            self.client.update_task(task_id, completed=completed)
        except TaskApiError as err:
            self._notify(err)
            return
        self.load()

    def delete(self, task_id: int) -> None:
        try:
            self.client.delete_task(task_id)
        except TaskApiError as err:
            self._notify(err)
            return
        self.load()

    def _notify(self, err: TaskApiError) -> None:
        logger.warning(str(err))
        # Only one notice per round trip
        if self.state.notice is None:
            self.state.notice = err.action.notice
