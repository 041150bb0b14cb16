"""RFC creation workflow.

Turns a title into a checked-out draft branch::

    IDLE -> ALLOCATING -> BRANCHING -> DONE

Any step may end in FAILED instead.  Every check happens before or at
``git checkout -b``; once git has created the branch the workflow is done.
A branch that already exists (another contributor got there between the
scan and the creation) is reported as ``BranchCreationConflict``.  The
workflow never retries with the next number.
"""

from __future__ import annotations

import enum
import logging
import warnings
from collections.abc import Iterable
from dataclasses import dataclass

from .allocator import allocate_identifier, snapshot_claims
from .constants import DEFAULT_START_POINT, RFC_EXTENSIONS
from .errors import AmbiguousIdentifierWarning, TitleSanitizationError
from .git.branch_strategy import decide_branch_name
from .git.repo_ops import check_branch_name, create_and_checkout_branch, current_branch
from .identifiers import format_identifier, printable_name
from .repository import RepositoryCheckout

logger = logging.getLogger(__name__)


class WorkflowState(str, enum.Enum):
    IDLE = "idle"
    ALLOCATING = "allocating"
    BRANCHING = "branching"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class RfcDraft:
    """A newly allocated RFC and its draft branch."""

    identifier: int
    prefix: str
    title: str
    branch_name: str
    current_branch: str | None = None

    @property
    def created(self) -> bool:
        return self.current_branch == self.branch_name


class RfcCreationWorkflow:
    """One create request against one checkout.

    ``state`` records how far the request got; after an exception it is
    ``FAILED``.
    """

    def __init__(
        self,
        checkout: RepositoryCheckout,
        extensions: Iterable[str] = RFC_EXTENSIONS,
        start_point: str = DEFAULT_START_POINT,
    ) -> None:
        self.checkout = checkout
        self.extensions = tuple(extensions)
        self.start_point = start_point
        self.state = WorkflowState.IDLE

    def _allocate(self, title: str) -> RfcDraft:
        self.state = WorkflowState.ALLOCATING
        claims = snapshot_claims(self.checkout, self.extensions)
        for value, names in claims.ambiguous().items():
            shown = ", ".join(printable_name(name) for name in names)
            message = f"Identifier {format_identifier(value)} is claimed by several names: {shown}"
            logger.warning(message)
            warnings.warn(message, AmbiguousIdentifierWarning, stacklevel=3)

        identifier = allocate_identifier(claims.values)
        branch_name = decide_branch_name(identifier, title)
        if not check_branch_name(self.checkout.git, branch_name):
            raise TitleSanitizationError(
                f"Title {title!r} gives '{branch_name}', which git does not accept as a branch name."
            )
        return RfcDraft(
            identifier=identifier,
            prefix=format_identifier(identifier),
            title=title,
            branch_name=branch_name,
        )

    def plan(self, title: str) -> RfcDraft:
        """Allocate an identifier and name the branch without touching git."""
        try:
            draft = self._allocate(title)
        except Exception:
            self.state = WorkflowState.FAILED
            raise
        self.state = WorkflowState.IDLE
        return draft

    def run(self, title: str) -> RfcDraft:
        """Allocate, create and check out the draft branch for ``title``."""
        try:
            draft = self._allocate(title)
            logger.info("Branch will be named %s", draft.branch_name)

            self.state = WorkflowState.BRANCHING
            create_and_checkout_branch(self.checkout.git, draft.branch_name, self.start_point)
        except Exception:
            self.state = WorkflowState.FAILED
            raise

        self.state = WorkflowState.DONE
        return RfcDraft(
            identifier=draft.identifier,
            prefix=draft.prefix,
            title=draft.title,
            branch_name=draft.branch_name,
            current_branch=current_branch(self.checkout.git),
        )


def create_rfc(
    checkout: RepositoryCheckout,
    title: str,
    extensions: Iterable[str] = RFC_EXTENSIONS,
    start_point: str = DEFAULT_START_POINT,
) -> RfcDraft:
    """Create and check out the draft branch for a new RFC titled ``title``."""
    return RfcCreationWorkflow(checkout, extensions, start_point).run(title)


def plan_rfc(
    checkout: RepositoryCheckout,
    title: str,
    extensions: Iterable[str] = RFC_EXTENSIONS,
) -> RfcDraft:
    """Return the draft ``create_rfc`` would create, without creating it."""
    return RfcCreationWorkflow(checkout, extensions).plan(title)
