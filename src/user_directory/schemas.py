from ninja import Schema
from pydantic import ConfigDict


class UserOut(Schema):
    """A user record. Frozen: built once when the store is created."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
