"""Tests for ghtriage.triage (batch assembly over a mocked GitHub API)."""

import json
from typing import Any
from unittest.mock import Mock, patch

import pytest

from ghtriage.adapters.github import GitHubClient
from ghtriage.cache import ResourceCache
from ghtriage.errors import TransportError
from ghtriage.models import ItemState, NotificationLevel
from ghtriage.triage import build_triage

API = "https://api.github.com"


def _resp(data: Any, status_code: int = 200) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = json.dumps(data)
    resp.json.return_value = data
    return resp


@pytest.fixture
def client(cache: ResourceCache) -> GitHubClient:
    return GitHubClient(token="test-token", cache=cache)


def test_build_triage(client: GitHubClient, notification_payload, pull_request_payload, issue_payload, user_payload) -> None:
    routes = {
        f"{API}/notifications": [
            notification_payload("review_requested", "PullRequest", 7, id="1"),
            notification_payload("review_requested", "PullRequest", 8, id="2"),
            notification_payload("subscribed", "Issue", 3, id="3"),
        ],
        f"{API}/user": user_payload(42),
        f"{API}/repos/owner/repo/pulls/7": pull_request_payload(7, [42]),
        f"{API}/repos/owner/repo/pulls/8": pull_request_payload(8, [99], state="closed"),
        f"{API}/repos/owner/repo/issues/3": issue_payload(3),
    }
    requested = []

    def fake_request(method: str, url: str, **kwargs: Any) -> Mock:
        requested.append(url)
        return _resp(routes[url])

    with patch.object(client._session, "request", side_effect=fake_request):
        entries = build_triage(client)

    assert [e.level for e in entries] == [
        NotificationLevel.TAGGED,
        NotificationLevel.TEAM_TAGGED,
        NotificationLevel.SUBSCRIBED,
    ]
    assert [e.title for e in entries] == ["Subject 7", "Subject 8", "Subject 3"]
    assert entries[1].state is ItemState.CLOSED
    assert entries[2].html_url == "https://github.com/owner/repo/issues/3"
    # User and subjects come from cache after the first fetch
    assert requested.count(f"{API}/user") == 1
    assert requested.count(f"{API}/repos/owner/repo/pulls/7") == 1


def test_failure_aborts_batch(client: GitHubClient, notification_payload) -> None:
    def fake_request(method: str, url: str, **kwargs: Any) -> Mock:
        if url == f"{API}/notifications":
            return _resp([notification_payload("review_requested")])
        return _resp({"message": "Bad credentials"}, status_code=401)

    with patch.object(client._session, "request", side_effect=fake_request):
        with pytest.raises(TransportError) as exc_info:
            build_triage(client)
    assert exc_info.value.status_code == 401
