"""Flask CLI commands for the task store."""

import click
from flask import Flask
from flask.cli import with_appcontext

from taskboard import services


@click.command("seed")
@click.option("--undo", is_flag=True, help="Remove all tasks instead of inserting the demo set.")
@with_appcontext
def seed_command(undo: bool) -> None:
    """Insert the demo tasks (or remove every task with --undo)."""
    if undo:
        count = services.delete_all_tasks()
        click.echo(f"Removed {count} tasks.")
        return

    tasks = services.seed_demo_tasks()
    click.echo(f"Inserted {len(tasks)} demo tasks.")


def register_commands(app: Flask) -> None:
    """Attach the store commands to ``flask --app taskboard``."""
    app.cli.add_command(seed_command)
