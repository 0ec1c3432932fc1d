"""Classify notifications by how directly they concern the user.

Every reason maps straight to a level except ``review_requested``: the
payload looks the same whether the user or one of their teams was asked
to review, so the pull request's requested reviewers are checked against
the current user.
"""

import logging

from ghtriage.adapters.base import NotificationsAdapter
from ghtriage.models import Notification, NotificationLevel, NotificationReason, PullRequest

LOG = logging.getLogger("ghtriage.classifier")

R = NotificationReason
L = NotificationLevel

REASON_LEVELS: dict[NotificationReason, NotificationLevel] = {
    R.AUTHOR: L.OWNED,
    R.CI_ACTIVITY: L.OWNED,
    R.SECURITY_ALERT: L.OWNED,
    R.COMMENT: L.SUBSCRIBED,
    R.MANUAL: L.SUBSCRIBED,
    R.SUBSCRIBED: L.SUBSCRIBED,
    R.ASSIGN: L.TAGGED,
    R.MENTION: L.TAGGED,
    R.TEAM_MENTION: L.TEAM_TAGGED,
    R.INVITATION: L.OTHER,
    R.STATE_CHANGE: L.OTHER,
    R.OTHER: L.OTHER,
}


def _review_request_level(notification: Notification, adapter: NotificationsAdapter) -> NotificationLevel:
    item = adapter.resolve_subject(notification.subject)
    if not isinstance(item, PullRequest):
        return L.TAGGED
    me = adapter.current_user()
    if item.is_review_requested_from(me):
        return L.TAGGED
    LOG.debug("Review on %s requested from a team of %s", item.html_url, me.login)
    return L.TEAM_TAGGED


def classify(notification: Notification, adapter: NotificationsAdapter) -> NotificationLevel:
    """Return the triage level for ``notification``.

    Only ``review_requested`` touches ``adapter``; errors from it propagate.
    """
    if notification.reason is R.REVIEW_REQUESTED:
        return _review_request_level(notification, adapter)
    return REASON_LEVELS[notification.reason]
