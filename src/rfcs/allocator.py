"""Identifier allocation.

The next RFC number is the lowest positive integer that neither an RFC file
nor a local branch claims.  Gaps are filled first: with ``001`` and ``003``
present the next RFC is ``002``, and a stray legacy ``9999`` does not push
new RFCs past it.

Allocation is advisory.  Between the scan and the branch creation another
contributor may claim the same number; git's refusal to create an existing
branch is what finally settles that race.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from .constants import RFC_EXTENSIONS
from .identifiers import CandidateIdentifier, IdentifierSource
from .repository import RepositoryCheckout
from .scan import RfcBranch, RfcDocument, scan_branches, scan_documents

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClaimedIdentifiers:
    """Identifiers claimed in one snapshot of a checkout."""

    documents: tuple[RfcDocument, ...] = ()
    branches: tuple[RfcBranch, ...] = ()

    @property
    def candidates(self) -> tuple[CandidateIdentifier, ...]:
        return tuple(doc.identifier for doc in self.documents) + tuple(
            branch.identifier for branch in self.branches
        )

    @property
    def values(self) -> frozenset[int]:
        return frozenset(candidate.value for candidate in self.candidates)

    def ambiguous(self) -> dict[int, list[str]]:
        """Return identifiers claimed by several files or by several branches.

        A file and a branch sharing an identifier is the normal state of an
        RFC under review and is not reported.
        """
        claims: dict[tuple[IdentifierSource, int], list[str]] = defaultdict(list)
        for doc in self.documents:
            claims[(IdentifierSource.FILE, doc.identifier.value)].append(doc.path.as_posix())
        for branch in self.branches:
            claims[(IdentifierSource.BRANCH, branch.identifier.value)].append(branch.name)

        result: dict[int, list[str]] = {}
        for (_source, value), names in sorted(claims.items(), key=lambda item: item[0][1]):
            if len(names) > 1:
                result.setdefault(value, []).extend(names)
        return result


def allocate_identifier(claimed: Iterable[int]) -> int:
    """Return the smallest positive integer not in ``claimed``."""
    taken = {value for value in claimed if value > 0}
    candidate = 1
    while candidate in taken:
        candidate += 1
    return candidate


def snapshot_claims(
    checkout: RepositoryCheckout,
    extensions: Iterable[str] = RFC_EXTENSIONS,
) -> ClaimedIdentifiers:
    """Scan ``checkout`` afresh.  Snapshots are never cached between calls."""
    documents = scan_documents(checkout.path, extensions)
    branches = scan_branches(checkout)
    claims = ClaimedIdentifiers(documents=tuple(documents), branches=tuple(branches))
    logger.debug(
        "Snapshot of %s: %d files, %d branches, %d distinct identifiers",
        checkout.path,
        len(documents),
        len(branches),
        len(claims.values),
    )
    return claims


def next_identifier(checkout: RepositoryCheckout, extensions: Iterable[str] = RFC_EXTENSIONS) -> int:
    """Scan ``checkout`` and return the next free identifier."""
    return allocate_identifier(snapshot_claims(checkout, extensions).values)
