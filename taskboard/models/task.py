"""Task model."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.extensions import db


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(db.Model):
    """A to-do item with a name and a completion flag."""

    __tablename__ = "Tasks"
    # Without AUTOINCREMENT, SQLite hands out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    completed: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), default=_utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Task {self.id} completed={self.completed}>"
