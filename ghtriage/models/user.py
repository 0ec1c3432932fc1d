"""GitHub user model."""

from pydantic import BaseModel


class User(BaseModel):
    """GitHub account (only the fields triage needs)."""

    model_config = {"frozen": True}

    id: int
    login: str
