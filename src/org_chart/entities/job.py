from org_chart import models
from .base import Entity


class Job(Entity, model=models.Job):
    """A job title that people can hold. ``title`` is required at creation."""

    id: int | None
    title: str | None
