"""Configuration loading from YAML and environment.

The GitHub token is taken from the config file, the GITHUB_TOKEN
environment variable, or a file named by GITHUB_TOKEN_FILE (Docker
secrets). Never put real tokens in config files committed to a repo.
"""

import tempfile
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so properties can read env/file
_current_env: dict[str, str] = {}


CACHE_SUBDIR = "github-notifications"


def _default_cache_dir() -> Path:
    return Path(tempfile.gettempdir())


class GitHubConfig(BaseSettings):
    """GitHub API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT with repo scope; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    user_agent: str = Field(default="ghtriage", description="User-Agent header sent with every request")
    timeout: int = Field(default=30, ge=1, description="Request timeout in seconds")


class CacheConfig(BaseSettings):
    """Response cache settings."""

    model_config = SettingsConfigDict(env_prefix="CACHE_", extra="ignore")

    directory: Path = Field(default_factory=_default_cache_dir, description="Parent of the github-notifications cache dir")
    user_ttl_seconds: int = Field(default=60 * 60 * 24, ge=0, description="TTL for the authenticated user")
    subject_ttl_seconds: int = Field(default=60, ge=0, description="TTL for pull request / issue details")
    hashed_keys: bool = Field(default=False, description="Append a URL digest to cache file names")

    @property
    def path(self) -> Path:
        """Dedicated cache directory; only ghtriage writes (and clears) files here."""
        return self.directory / CACHE_SUBDIR


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t.strip()
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file is not an error: defaults plus environment are used.
    Secrets: GITHUB_TOKEN or GITHUB_TOKEN_FILE.
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    github = GitHubConfig(**(raw.get("github") or {}))
    cache = CacheConfig(**(raw.get("cache") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))

    return AppConfig(github=github, cache=cache, logging=logging)
