"""Git command-line integration."""

from .branch_strategy import decide_branch_name, sanitize_title
from .repo_ops import (
    branch_exists,
    check_branch_name,
    clone_repository,
    create_and_checkout_branch,
    current_branch,
    is_git_checkout,
    list_local_branches,
)
from .runner import GitResult, GitRunner

__all__ = [
    "GitResult",
    "GitRunner",
    "branch_exists",
    "check_branch_name",
    "clone_repository",
    "create_and_checkout_branch",
    "current_branch",
    "decide_branch_name",
    "is_git_checkout",
    "list_local_branches",
    "sanitize_title",
]
