"""Branch scanner.

Reports the local branches whose names claim an RFC identifier.  Only local
branches are visible: a draft pushed by someone else is not seen until it
has been fetched and checked out locally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import GitError, ScanIOError
from ..git.repo_ops import list_local_branches
from ..identifiers import CandidateIdentifier, IdentifierSource, extract_identifier
from ..repository import RepositoryCheckout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RfcBranch:
    """A local branch and the identifier its name claims."""

    name: str
    identifier: CandidateIdentifier


def scan_branches(checkout: RepositoryCheckout) -> list[RfcBranch]:
    """Return the local branches of ``checkout`` that claim an identifier."""
    try:
        names = list_local_branches(checkout.git)
    except GitError as exc:
        raise ScanIOError(
            f"Failed listing local branches from git repository at {checkout.path}: {exc}"
        ) from exc

    branches: list[RfcBranch] = []
    for name in names:
        identifier = extract_identifier(name, IdentifierSource.BRANCH)
        if identifier is not None:
            branches.append(RfcBranch(name=name, identifier=identifier))
    logger.debug("Found %d RFC branches out of %d local branches", len(branches), len(names))
    return branches
