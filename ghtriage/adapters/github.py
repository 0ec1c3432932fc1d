"""GitHub API client with a per-URL disk cache."""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Any, List, Tuple, Type, TypeVar

import requests
from pydantic import TypeAdapter, ValidationError

from ghtriage.adapters.base import NotificationsAdapter
from ghtriage.cache import ResourceCache, Ttl
from ghtriage.errors import DecodeError, StorageError, TransportError
from ghtriage.models import (
    Issue,
    Notification,
    NotificationSubject,
    PullRequest,
    ReviewableItem,
    SubjectType,
    User,
)

T = TypeVar("T")

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "ghtriage"
USER_TTL = timedelta(hours=24)
SUBJECT_TTL = timedelta(seconds=60)
# Never served from cache, but still written so the last response can be inspected
NOTIFICATIONS_TTL = timedelta(0)

LOG = logging.getLogger("ghtriage.adapters.github")


@lru_cache(maxsize=None)
def _type_adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def _format_loc(loc: Tuple[Any, ...]) -> str:
    """Render a pydantic error location as a field path, e.g. [0].subject.type."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "<root>"


def decode(url: str, body: str, shape: Type[T]) -> T:
    """Validate a JSON body against ``shape``; raises DecodeError with the failing path."""
    try:
        return _type_adapter(shape).validate_json(body)
    except ValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        raise DecodeError(
            url,
            _format_loc(tuple(first.get("loc", ()))),
            first.get("msg", str(e)),
            errors=errors,
        ) from e


class GitHubClient(NotificationsAdapter):
    """GitHub API implementation backed by a ResourceCache."""

    def __init__(
        self,
        token: str,
        cache: ResourceCache,
        api_url: str = DEFAULT_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: int = 30,
        user_ttl: Ttl = USER_TTL,
        subject_ttl: Ttl = SUBJECT_TTL,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._cache = cache
        self._timeout = timeout
        self._user_ttl = user_ttl
        self._subject_ttl = subject_ttl
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"Bearer {token}"
        self._session.headers["User-Agent"] = user_agent
        self._session.headers["Accept"] = "application/vnd.github+json"

    @property
    def cache(self) -> ResourceCache:
        return self._cache

    def _download(self, url: str) -> str:
        try:
            resp = self._session.request("GET", url, timeout=self._timeout)
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except (ValueError, AttributeError):
                pass
            raise TransportError(f"GET {url}: {resp.status_code}: {msg}", status_code=resp.status_code)
        return resp.text

    def fetch(self, url: str, shape: Type[T], ttl: Ttl = None) -> T:
        """Return ``url`` decoded as ``shape``, from cache when fresh under ``ttl``.

        A cache write failure after a successful download is logged and
        otherwise ignored; transport, decode and cache read errors propagate.
        """
        if self._cache.is_fresh(url, ttl):
            LOG.debug("Cache hit: %s", url)
            body = self._cache.read(url)
        else:
            LOG.debug("Cache miss: %s", url)
            body = self._download(url)
            try:
                self._cache.write(url, body)
            except StorageError as e:
                LOG.warning("Couldn't save response for %s: %s", url, e)
        return decode(url, body, shape)

    def current_user(self) -> User:
        return self.fetch(f"{self._api_url}/user", User, self._user_ttl)

    def list_notifications(self) -> List[Notification]:
        return self.fetch(f"{self._api_url}/notifications", List[Notification], NOTIFICATIONS_TTL)

    def get_pull_request(self, url: str) -> PullRequest:
        return self.fetch(url, PullRequest, self._subject_ttl)

    def get_issue(self, url: str) -> Issue:
        return self.fetch(url, Issue, self._subject_ttl)

    def resolve_subject(self, subject: NotificationSubject) -> ReviewableItem:
        if subject.type is SubjectType.PULL_REQUEST:
            return self.get_pull_request(subject.url)
        return self.get_issue(subject.url)
