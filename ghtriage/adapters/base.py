"""Abstract base for notification sources."""

from abc import ABC, abstractmethod
from typing import List

from ghtriage.errors import DecodeError, GitHubError, StorageError, TransportError
from ghtriage.models import Notification, NotificationSubject, ReviewableItem, User

__all__ = [
    "DecodeError",
    "GitHubError",
    "NotificationsAdapter",
    "StorageError",
    "TransportError",
]


class NotificationsAdapter(ABC):
    """What triage needs from a notification source."""

    @abstractmethod
    def current_user(self) -> User:
        """Return the authenticated user."""
        ...

    @abstractmethod
    def list_notifications(self) -> List[Notification]:
        """Return the authenticated user's notifications."""
        ...

    @abstractmethod
    def resolve_subject(self, subject: NotificationSubject) -> ReviewableItem:
        """Fetch the pull request or issue a notification subject points to."""
        ...
