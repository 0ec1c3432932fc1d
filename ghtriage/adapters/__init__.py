"""Notification source adapters."""

from ghtriage.adapters.base import NotificationsAdapter
from ghtriage.adapters.github import GitHubClient

__all__ = ["GitHubClient", "NotificationsAdapter"]
