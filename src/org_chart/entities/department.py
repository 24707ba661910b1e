from org_chart import models
from .base import Entity


class Department(Entity, model=models.Department):
    """A department of the organisation. ``name`` is required at creation."""

    id: int | None
    name: str | None
