"""Tests for the board's task API client."""

from unittest.mock import MagicMock

import pytest
import requests

from taskboard.board import Action, TaskApiError, TaskClient


class TestTaskClient:
    def test_create_and_get(self, task_client):
        created = task_client.create_task("Comprar leche")
        assert created["completed"] is False

        assert task_client.get_task(created["id"]) == created

    def test_list_with_search(self, task_client, transport):
        task_client.create_task("Comprar leche")
        task_client.create_task("Pagar facturas")

        tasks = task_client.list_tasks(search="leche")

        assert [t["name"] for t in tasks] == ["Comprar leche"]
        assert transport.calls[-1] == ("GET", "/tasks", {"search": "leche"}, None)

    def test_list_without_filters_sends_no_params(self, task_client, transport):
        task_client.list_tasks(search="")
        assert transport.calls[-1] == ("GET", "/tasks", {}, None)

    def test_list_completed(self, task_client):
        task_client.create_task("Comprar leche")
        task_client.create_task("Pagar facturas", completed=True)

        assert [t["name"] for t in task_client.list_tasks(completed=True)] == ["Pagar facturas"]
        assert [t["name"] for t in task_client.list_tasks(completed=False)] == ["Comprar leche"]

    def test_update(self, task_client):
        created = task_client.create_task("Comprar leche")

        updated = task_client.update_task(created["id"], completed=True)

        assert updated["completed"] is True
        assert updated["name"] == "Comprar leche"

    def test_delete(self, task_client):
        created = task_client.create_task("Comprar leche")

        assert task_client.delete_task(created["id"]) == {"message": "Task deleted"}
        assert task_client.list_tasks() == []

    def test_not_found_raises(self, task_client):
        with pytest.raises(TaskApiError) as exc_info:
            task_client.delete_task(12345)

        assert exc_info.value.action is Action.DELETE
        assert exc_info.value.status_code == 404

    def test_validation_error_raises(self, task_client):
        with pytest.raises(TaskApiError) as exc_info:
            task_client.create_task("")

        assert exc_info.value.action is Action.CREATE
        assert exc_info.value.status_code == 400

    def test_network_error_raises(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("connection refused")
        client = TaskClient("http://localhost:8080/", session=session, timeout=2.5)

        with pytest.raises(TaskApiError) as exc_info:
            client.list_tasks()

        assert exc_info.value.action is Action.LOAD
        assert exc_info.value.status_code is None
        session.request.assert_called_once_with(
            "GET", "http://localhost:8080/tasks", timeout=2.5, params={}
        )
