"""Notification models (GET /notifications).

Reason codes: https://docs.github.com/en/rest/activity/notifications
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator


class NotificationReason(str, Enum):
    """Why GitHub generated the notification."""

    ASSIGN = "assign"  # You were assigned to the issue.
    AUTHOR = "author"  # You created the thread.
    COMMENT = "comment"  # You commented on the thread.
    CI_ACTIVITY = "ci_activity"  # A workflow run you triggered completed.
    INVITATION = "invitation"  # You accepted an invitation to contribute.
    MANUAL = "manual"  # You subscribed to the thread.
    MENTION = "mention"  # You were @mentioned.
    REVIEW_REQUESTED = "review_requested"  # You, or one of your teams, were asked to review.
    SECURITY_ALERT = "security_alert"  # A vulnerability was found in your repository.
    STATE_CHANGE = "state_change"  # You changed the thread state.
    SUBSCRIBED = "subscribed"  # You're watching the repository.
    TEAM_MENTION = "team_mention"  # A team you're on was mentioned.
    OTHER = "other"


def _coerce_reason(value: Any) -> Any:
    """Map reason codes GitHub adds in the future to OTHER instead of failing."""
    if isinstance(value, NotificationReason):
        return value
    if isinstance(value, str):
        try:
            return NotificationReason(value)
        except ValueError:
            return NotificationReason.OTHER
    return value


class SubjectType(str, Enum):
    """Kind of object a notification subject URL points to."""

    PULL_REQUEST = "PullRequest"
    ISSUE = "Issue"


class NotificationSubject(BaseModel):
    """The thread a notification is about."""

    model_config = {"frozen": True}

    title: str
    url: str
    latest_comment_url: str | None = None
    type: SubjectType


class Notification(BaseModel):
    """One entry of the authenticated user's notification list."""

    model_config = {"frozen": True}

    id: str
    reason: Annotated[NotificationReason, BeforeValidator(_coerce_reason)]
    subject: NotificationSubject
    unread: bool
    updated_at: datetime
    last_read_at: datetime | None = None
    url: str
