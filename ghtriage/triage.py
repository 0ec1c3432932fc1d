"""Build the triage list: each notification with its level and resolved item."""

import logging
from typing import List

from pydantic import BaseModel

from ghtriage.adapters.base import NotificationsAdapter
from ghtriage.classifier import classify
from ghtriage.models import ItemState, Notification, NotificationLevel, ReviewableItem

LOG = logging.getLogger("ghtriage.triage")


class TriageEntry(BaseModel):
    """Everything the renderer needs for one notification."""

    model_config = {"frozen": True}

    notification: Notification
    level: NotificationLevel
    item: ReviewableItem

    @property
    def title(self) -> str:
        return self.notification.subject.title

    @property
    def state(self) -> ItemState:
        return self.item.state

    @property
    def html_url(self) -> str:
        return self.item.html_url


def build_triage(adapter: NotificationsAdapter) -> List[TriageEntry]:
    """Fetch notifications and classify them in order.

    Any failure aborts the whole batch.
    """
    notifications = adapter.list_notifications()
    LOG.info("Fetched %s notifications", len(notifications))
    entries: List[TriageEntry] = []
    for notification in notifications:
        level = classify(notification, adapter)
        item = adapter.resolve_subject(notification.subject)
        entries.append(TriageEntry(notification=notification, level=level, item=item))
    return entries
