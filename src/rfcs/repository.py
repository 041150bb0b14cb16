"""Locating the local RFC checkout.

The checkout is either a path configured by the user (``git.repo``) or a
clone of the configured ``git.url`` kept under the configuration directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import Config
from .constants import CLONE_DIRNAME
from .errors import ConfigError, ScanIOError
from .git.repo_ops import clone_repository, is_git_checkout
from .git.runner import GitRunner

logger = logging.getLogger(__name__)

_NOT_CONFIGURED = (
    "No local git repo configured, and no git URL given, can't do anything.\n"
    "To configure, run `rfcs configure git.url <git URL>`, "
    "or `rfcs configure git.repo /path/to/rfcs`."
)


@dataclass
class RepositoryCheckout:
    """Handle to a local git working tree, owned by the caller for one operation."""

    path: Path
    git: GitRunner = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.git = GitRunner(self.path)


def open_checkout(path: Path) -> RepositoryCheckout:
    """Return a checkout handle for ``path`` after checking it is a git work tree."""
    path = Path(path).expanduser()
    if not path.exists():
        raise ScanIOError(f"Repository path {path} does not exist")
    if not path.is_dir():
        raise ScanIOError(f"Repository path {path} is not a directory")
    if not is_git_checkout(path):
        raise ScanIOError(f"Failed to open git repository at {path}: not a git work tree")
    return RepositoryCheckout(path)


def ensure_local_repo(config: Config) -> RepositoryCheckout:
    """Resolve the configured repository to a local checkout.

    A configured ``git.repo`` path always wins.  Otherwise ``git.url`` is
    cloned into the configuration directory, or the existing clone there is
    reused.
    """
    if config.git_repo is not None:
        return open_checkout(config.git_repo)

    if config.git_url:
        target = config.config_dir / CLONE_DIRNAME
        if target.exists():
            logger.debug("Reusing existing clone at %s", target)
        else:
            clone_repository(config.git_url, config.config_dir, CLONE_DIRNAME)
        return open_checkout(target)

    raise ConfigError(_NOT_CONFIGURED)
