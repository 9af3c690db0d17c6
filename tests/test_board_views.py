"""Tests for the board frontend pages."""


def _columns(html: str) -> tuple[str, str]:
    """Split rendered markup into (incomplete, completed) column sections."""
    incomplete = html.split('data-column="incomplete"', 1)[1]
    incomplete, completed = incomplete.split('data-column="completed"', 1)
    return incomplete, completed


def _fetch(board_client, url, data=None):
    headers = {"X-Requested-With": "fetch"}
    if data is None:
        return board_client.get(url, headers=headers)
    return board_client.post(url, data=data, headers=headers)


class TestBoardPage:
    def test_empty_board(self, board_client):
        response = board_client.get("/")
        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert "<html" in html
        assert html.count("No tasks here.") == 2

    def test_tasks_split_into_columns(self, board_client, make_task):
        make_task("Comprar leche")
        make_task("Pagar facturas", completed=True)

        incomplete, completed = _columns(board_client.get("/").get_data(as_text=True))

        assert "Comprar leche" in incomplete and "Pagar facturas" not in incomplete
        assert "Pagar facturas" in completed and "Comprar leche" not in completed

    def test_move_urls_follow_mount_point(self, board_client, task_client):
        task = task_client.create_task("Comprar leche")

        html = board_client.get("/", base_url="http://localhost/board").get_data(as_text=True)

        assert f'data-move-url="/board/tasks/{task["id"]}/move"' in html

    def test_script_has_no_hardcoded_routes(self, board_client):
        response = board_client.get("/static/board.js")
        script = response.get_data(as_text=True)
        response.close()

        assert "/tasks/" not in script

    def test_search_fragment(self, board_client, make_task):
        make_task("Comprar leche")
        make_task("Pagar facturas")

        response = board_client.get("/board?search=leche")
        html = response.get_data(as_text=True)

        assert "<html" not in html
        assert "Comprar leche" in html
        assert "Pagar facturas" not in html


class TestBoardActions:
    def test_create(self, board_client, task_client):
        response = _fetch(board_client, "/tasks", {"name": "Comprar pan"})

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert "<html" not in html
        assert "Comprar pan" in _columns(html)[0]
        assert [t["name"] for t in task_client.list_tasks()] == ["Comprar pan"]

    def test_create_full_page_without_script(self, board_client):
        response = board_client.post("/tasks", data={"name": "Comprar pan"})
        assert "<html" in response.get_data(as_text=True)

    def test_create_blank_is_ignored(self, board_client, task_client, transport):
        _fetch(board_client, "/tasks", {"name": "   "})

        assert task_client.list_tasks() == []
        assert not any(method == "POST" for method, *_ in transport.calls)

    def test_move_to_completed(self, board_client, task_client):
        task = task_client.create_task("Comprar leche")

        response = _fetch(board_client, f"/tasks/{task['id']}/move", {"completed": "true"})

        incomplete, completed = _columns(response.get_data(as_text=True))
        assert "Comprar leche" in completed
        assert "Comprar leche" not in incomplete
        assert task_client.get_task(task["id"])["completed"] is True

    def test_move_refetches(self, board_client, task_client, transport):
        task = task_client.create_task("Comprar leche")
        transport.calls.clear()

        _fetch(board_client, f"/tasks/{task['id']}/move", {"completed": "false", "search": "leche"})

        assert [(method, path) for method, path, *_ in transport.calls] == [
            ("PUT", f"/tasks/{task['id']}"),
            ("GET", "/tasks"),
        ]
        assert transport.calls[0][3] == {"completed": False}
        assert transport.calls[1][2] == {"search": "leche"}

    def test_delete(self, board_client, task_client):
        task = task_client.create_task("Comprar leche")

        response = _fetch(board_client, f"/tasks/{task['id']}/delete", {})

        assert "Comprar leche" not in response.get_data(as_text=True)
        assert task_client.list_tasks() == []

    def test_failed_action_shows_notice(self, board_client, task_client):
        task_client.create_task("Comprar leche")

        response = _fetch(board_client, "/tasks/12345/delete", {})

        html = response.get_data(as_text=True)
        assert 'data-notice="Failed to delete task"' in html
        # The current board is still shown under the notice
        assert "Comprar leche" in html
