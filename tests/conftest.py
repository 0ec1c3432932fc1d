"""Shared fixtures: GitHub API payload builders and a cache in tmp_path."""

from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from ghtriage.cache import ResourceCache

API = "https://api.github.com"


def _user(id: int = 42, login: str = "octocat") -> Dict[str, Any]:
    return {"id": id, "login": login, "type": "User"}


def _pull_request(number: int = 7, reviewer_ids: List[int] | None = None, state: str = "open") -> Dict[str, Any]:
    return {
        "url": f"{API}/repos/owner/repo/pulls/{number}",
        "id": 1000 + number,
        "number": number,
        "state": state,
        "locked": False,
        "title": f"PR {number}",
        "html_url": f"https://github.com/owner/repo/pull/{number}",
        "requested_reviewers": [_user(i, f"user{i}") for i in (reviewer_ids or [])],
        "requested_teams": [],
    }


def _issue(number: int = 3, state: str = "open") -> Dict[str, Any]:
    return {
        "url": f"{API}/repos/owner/repo/issues/{number}",
        "id": 2000 + number,
        "number": number,
        "state": state,
        "locked": False,
        "title": f"Issue {number}",
        "html_url": f"https://github.com/owner/repo/issues/{number}",
        "labels": [{"name": "bug"}],
    }


def _notification(
    reason: str = "mention",
    subject_type: str = "PullRequest",
    number: int = 7,
    id: str = "1",
) -> Dict[str, Any]:
    kind = "pulls" if subject_type == "PullRequest" else "issues"
    return {
        "id": id,
        "reason": reason,
        "unread": True,
        "updated_at": "2024-01-16T12:00:00Z",
        "last_read_at": None,
        "url": f"{API}/notifications/threads/{id}",
        "subject": {
            "title": f"Subject {number}",
            "url": f"{API}/repos/owner/repo/{kind}/{number}",
            "latest_comment_url": None,
            "type": subject_type,
        },
        "repository": {"full_name": "owner/repo"},
    }


@pytest.fixture
def user_payload() -> Callable[..., Dict[str, Any]]:
    return _user


@pytest.fixture
def pull_request_payload() -> Callable[..., Dict[str, Any]]:
    return _pull_request


@pytest.fixture
def issue_payload() -> Callable[..., Dict[str, Any]]:
    return _issue


@pytest.fixture
def notification_payload() -> Callable[..., Dict[str, Any]]:
    return _notification


@pytest.fixture
def cache(tmp_path: Path) -> ResourceCache:
    return ResourceCache(tmp_path / "cache")
