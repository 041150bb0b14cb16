"""Git repository operations.

Thin wrappers over git plumbing and porcelain commands executed through
``GitRunner``.  Branch creation relies on git itself to refuse an existing
branch name; that refusal is the only serialization point between
contributors allocating RFC numbers at the same time.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..constants import CLONE_TIMEOUT_S, DEFAULT_START_POINT
from ..errors import BranchCreationConflict, GitError
from .runner import GitRunner

logger = logging.getLogger(__name__)


def is_git_checkout(path: Path) -> bool:
    """Return ``True`` if ``path`` is a directory inside a git work tree."""
    if not path.is_dir():
        return False
    result = GitRunner(path).run(["rev-parse", "--is-inside-work-tree"])
    return result.ok and result.stdout.strip() == "true"


def list_local_branches(git: GitRunner) -> list[str]:
    """List local branch names.  Remote-tracking branches are not included."""
    result = git.check(["for-each-ref", "--format=%(refname:short)", "refs/heads/"])
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def current_branch(git: GitRunner) -> str | None:
    """Return the checked out branch name, or ``None`` on a detached HEAD."""
    result = git.run(["symbolic-ref", "--quiet", "--short", "HEAD"])
    if not result.ok:
        return None
    return result.stdout.strip() or None


def branch_exists(git: GitRunner, branch_name: str) -> bool:
    result = git.run(["show-ref", "--verify", "--quiet", f"refs/heads/{branch_name}"])
    return result.ok


def check_branch_name(git: GitRunner, branch_name: str) -> bool:
    """Ask git whether ``branch_name`` is a valid branch name."""
    if not branch_name:
        return False
    result = git.run(["check-ref-format", "--branch", branch_name])
    return result.ok


def create_and_checkout_branch(
    git: GitRunner,
    branch_name: str,
    start_point: str = DEFAULT_START_POINT,
) -> None:
    """Work like ``git checkout -b branch_name start_point``.

    Git creates the branch and moves HEAD in one step, and refuses without
    touching the repository if the branch already exists.  That refusal is
    raised as ``BranchCreationConflict`` with git's message; any other
    failure is raised as ``GitError``.
    """
    args = ["checkout", "-b", branch_name]
    # An unborn HEAD has no commit to name, but checkout -b still works
    if start_point != DEFAULT_START_POINT:
        args.append(start_point)

    result = git.run(args)
    if result.ok:
        logger.debug("Created and checked out branch %s", branch_name)
        return

    if branch_exists(git, branch_name):
        raise BranchCreationConflict(branch_name, result.message)
    raise GitError(f"Failed to create branch '{branch_name}': {result.message}")


def clone_repository(url: str, parent: Path, dirname: str) -> Path:
    """Clone ``url`` into ``parent / dirname`` and return the checkout path."""
    parent.mkdir(parents=True, exist_ok=True)
    logger.info("Cloning git repository from URL: '%s'", url)
    result = GitRunner(parent).run(["clone", url, dirname], timeout_s=CLONE_TIMEOUT_S)
    if not result.ok:
        raise GitError(
            f"Error while cloning repository from URL {url}: {result.message}\n"
            "Can't proceed any further without a repository present."
        )
    target = parent / dirname
    logger.info("Successfully cloned git repository to path '%s'", target)
    return target
