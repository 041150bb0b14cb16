"""
Exceptions raised by rfcs operations.

Every failure is reported to the operator; nothing is retried automatically.
"""

from __future__ import annotations


class RfcsError(Exception):
    """Base exception for rfcs operations."""


class ConfigError(RfcsError):
    """Configuration is missing, unreadable or invalid."""


class GitError(RfcsError):
    """A git command failed."""


class ScanIOError(RfcsError):
    """The repository path is unreadable or not a valid git checkout."""


class BranchCreationConflict(GitError):
    """Git refused to create the branch because it already exists."""

    def __init__(self, branch_name: str, detail: str) -> None:
        super().__init__(detail or f"a branch named '{branch_name}' already exists")
        self.branch_name = branch_name


class TitleSanitizationError(RfcsError):
    """A title cannot be turned into a valid branch name fragment."""


class AmbiguousIdentifierWarning(UserWarning):
    """Two or more files, or two or more branches, claim the same identifier."""
