"""Database models."""

from taskboard.models.task import Task


__all__ = ["Task"]
