"""Triage level derived from a notification (never persisted)."""

from enum import Enum


class NotificationLevel(str, Enum):
    """How directly a notification concerns the user, most personal first."""

    OWNED = "Owned"
    SUBSCRIBED = "Subscribed"
    TAGGED = "Tagged"
    TEAM_TAGGED = "TeamTagged"
    OTHER = "Other"
