"""Configuration loading for rfcs.

Settings live in a YAML file, ``config.yaml`` inside the configuration
directory (``~/.config/rfcs`` unless ``RFCS_CONFIG_DIR`` says otherwise)::

    git:
      repo: /path/to/local/rfcs/checkout
      url: https://example.com/org/rfcs.git

A `.env` file is loaded with `python-dotenv` if present, and the following
environment variables override the file:

- RFCS_CONFIG_DIR (configuration directory)
- RFCS_GIT_REPO (local checkout path)
- RFCS_GIT_URL (URL to clone when no local checkout is configured)
- LOG_LEVEL (default: 'INFO')

The loaded ``Config`` is passed explicitly to the operations that need it;
nothing below the CLI reads the environment or the file on its own.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .constants import (
    CONFIG_DIR_ENV,
    CONFIG_FILENAME,
    CONFIG_KEYS,
    DEFAULT_LOG_LEVEL,
    GIT_REPO_ENV,
    GIT_URL_ENV,
    RFC_EXTENSIONS,
)
from .errors import ConfigError

logger = logging.getLogger(__name__)


def default_config_dir() -> Path:
    """Return the configuration directory, honouring ``RFCS_CONFIG_DIR``."""
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "rfcs"


@dataclass
class Config:
    """Configuration values for one invocation."""

    config_dir: Path
    git_repo: Path | None = None
    git_url: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    extensions: tuple[str, ...] = field(default_factory=lambda: tuple(sorted(RFC_EXTENSIONS)))

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    @classmethod
    def load(cls, config_dir: Path | None = None, apply_env: bool = True) -> Config:
        """Load the configuration file, creating it with defaults if missing.

        With ``apply_env`` the ``RFCS_GIT_*`` environment variables take
        precedence over the file.  Raises ``ConfigError`` if the file cannot
        be read or is not a YAML mapping.
        """
        load_dotenv()
        config = cls(config_dir=Path(config_dir) if config_dir else default_config_dir())

        path = config.config_path
        if not path.exists():
            logger.info("No configuration at %s, writing defaults", path)
            config.save()
        else:
            config._read(path)

        if apply_env:
            repo = os.getenv(GIT_REPO_ENV)
            if repo:
                config.git_repo = Path(repo).expanduser()
            url = os.getenv(GIT_URL_ENV)
            if url:
                config.git_url = url
        config.log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return config

    def _read(self, path: Path) -> None:
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Unexpected error when reading config file from {path}: {exc}") from exc
        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        git = data.get("git") or {}
        if not isinstance(git, dict):
            raise ConfigError(f"Config file {path}: 'git' must be a mapping")
        repo = git.get("repo")
        self.git_repo = Path(str(repo)).expanduser() if repo else None
        url = git.get("url")
        self.git_url = str(url) if url else None

    def to_dict(self) -> dict[str, object]:
        return {
            "git": {
                "repo": str(self.git_repo) if self.git_repo is not None else None,
                "url": self.git_url,
            }
        }

    def save(self) -> Path:
        """Write the configuration file and return its path."""
        path = self.config_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as exc:
            raise ConfigError(f"Unable to write config file {path}: {exc}") from exc
        return path

    def set_value(self, key: str, value: str) -> None:
        """Set a configuration key.  Known keys: ``git.url``, ``git.repo``."""
        if key == "git.url":
            self.git_url = value
        elif key == "git.repo":
            if not value.strip():
                raise ConfigError(
                    f"Was not able to convert given value '{value}' into a file path, "
                    "please supply a valid path."
                )
            self.git_repo = Path(value).expanduser()
        else:
            raise ConfigError(
                f"Unknown configuration key '{key}', known keys: {', '.join(CONFIG_KEYS)}"
            )
