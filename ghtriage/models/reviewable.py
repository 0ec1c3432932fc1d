"""Pull request and issue models.

Both expose a lifecycle ``state`` and a human-facing ``html_url`` and so
satisfy :class:`Reviewable`. Code that has to tell them apart works on
:data:`ReviewableItem` and checks ``isinstance``.
"""

from enum import Enum
from typing import List, Protocol

from pydantic import BaseModel

from ghtriage.models.user import User


class ItemState(str, Enum):
    """Lifecycle state of a pull request or issue."""

    OPEN = "open"
    CLOSED = "closed"


class Reviewable(Protocol):
    """Anything with a lifecycle state and a page a human can open."""

    @property
    def state(self) -> ItemState: ...

    @property
    def html_url(self) -> str: ...


class PullRequest(BaseModel):
    """Pull request details (GET /repos/{owner}/{repo}/pulls/{number})."""

    model_config = {"frozen": True}

    url: str
    id: int
    number: int
    state: ItemState
    locked: bool
    title: str
    html_url: str
    requested_reviewers: List[User]

    def is_review_requested_from(self, user: User) -> bool:
        """True when ``user`` is personally listed as a requested reviewer."""
        return any(reviewer.id == user.id for reviewer in self.requested_reviewers)


class Issue(BaseModel):
    """Issue details (GET /repos/{owner}/{repo}/issues/{number})."""

    model_config = {"frozen": True}

    url: str
    id: int
    number: int
    state: ItemState
    locked: bool
    title: str
    html_url: str


ReviewableItem = PullRequest | Issue
