from org_chart import models
from .base import Entity


class User(Entity, model=models.User):
    """
    An API user.

    ``username`` and ``password`` are both required at creation. The password is
    whatever the auth layer stores (a hash); it is emitted by ``to_json`` like any
    other present field, so controllers strip it before responding.
    """

    id: int | None
    username: str | None
    password: str | None

    def __repr__(self) -> str:
        # Keep credentials out of logs and tracebacks
        shown = "***" if self.is_present("password") else None
        return f"User(id={self.id!r}, username={self.username!r}, password={shown!r})"
