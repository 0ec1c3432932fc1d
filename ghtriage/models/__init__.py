"""Data models for users, pull requests, issues and notifications (Pydantic)."""

from ghtriage.models.level import NotificationLevel
from ghtriage.models.notification import (
    Notification,
    NotificationReason,
    NotificationSubject,
    SubjectType,
)
from ghtriage.models.reviewable import Issue, ItemState, PullRequest, Reviewable, ReviewableItem
from ghtriage.models.user import User

__all__ = [
    "Issue",
    "ItemState",
    "Notification",
    "NotificationLevel",
    "NotificationReason",
    "NotificationSubject",
    "PullRequest",
    "Reviewable",
    "ReviewableItem",
    "SubjectType",
    "User",
]
