"""Board pages and form endpoints."""

from flask import Blueprint, current_app, render_template, request

from taskboard.board.state import BoardController, BoardState


board_bp = Blueprint("board", __name__)

CLIENT_KEY = "taskboard.client"


def _controller() -> BoardController:
    state = BoardState(search=request.values.get("search", ""))
    return BoardController(current_app.extensions[CLIENT_KEY], state)


def _render(controller: BoardController):
    """Render the board fragment for script requests, the full page otherwise.

    A mutation that failed skipped its reload; fetch the list once so the
    notice is shown over the current board rather than an empty one.
    """
    if not controller.load_attempted:
        controller.load()

    template = "_board.html" if request.headers.get("X-Requested-With") == "fetch" else "board.html"
    return render_template(template, state=controller.state)


@board_bp.route("/", methods=["GET"])
def index():
    controller = _controller()
    controller.load()
    return render_template("board.html", state=controller.state)


@board_bp.route("/board", methods=["GET"])
def board_fragment():
    """Re-render the columns for the current search (search-as-you-type)."""
    controller = _controller()
    controller.load()
    return render_template("_board.html", state=controller.state)


@board_bp.route("/tasks", methods=["POST"])
def create_task():
    controller = _controller()
    controller.create(request.form.get("name", ""))
    return _render(controller)


@board_bp.route("/tasks/<int:task_id>/move", methods=["POST"])
def move_task(task_id: int):
    controller = _controller()
    controller.move(task_id, request.form.get("completed") == "true")
    return _render(controller)


@board_bp.route("/tasks/<int:task_id>/delete", methods=["POST"])
def delete_task(task_id: int):
    controller = _controller()
    controller.delete(task_id)
    return _render(controller)
