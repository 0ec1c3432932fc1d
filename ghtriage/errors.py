"""Errors raised while fetching, caching and decoding GitHub resources."""

from typing import Any, List


class GitHubError(Exception):
    """Base for every failure surfaced by the fetch client."""

    pass


class TransportError(GitHubError):
    """Network failure, timeout, or non-success HTTP status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(GitHubError):
    """Response body does not match the expected shape.

    ``path`` points at the first failing field, e.g. ``[3].subject.type``.
    """

    def __init__(self, url: str, path: str, message: str, errors: List[Any] | None = None) -> None:
        super().__init__(f"{url}: {path}: {message}")
        self.url = url
        self.path = path
        self.errors = errors or []


class StorageError(GitHubError):
    """Cache directory or cache file could not be used."""

    pass
