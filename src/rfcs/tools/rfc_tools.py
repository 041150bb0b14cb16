"""RFC tool implementations.

Each tool loads the configuration, resolves the local checkout and returns a
JSON-serializable dictionary.  The same operations back the command-line
interface in ``rfcs.cli``.
"""

from __future__ import annotations

import logging

from ..allocator import allocate_identifier, snapshot_claims
from ..config import Config
from ..constants import DEFAULT_START_POINT
from ..identifiers import format_identifier, printable_name
from ..repository import ensure_local_repo
from ..workflow import create_rfc, plan_rfc

logger = logging.getLogger(__name__)


def rfc_list(include_branches: bool = False) -> dict[str, object]:
    """List RFC documents in the repository, and optionally in-flight branches."""
    config = Config.load()
    checkout = ensure_local_repo(config)
    claims = snapshot_claims(checkout, config.extensions)

    result: dict[str, object] = {
        "repo_path": str(checkout.path),
        "documents": [
            {"path": printable_name(doc.path.as_posix()), "identifier": doc.identifier.display}
            for doc in claims.documents
        ],
        "ambiguous": {
            format_identifier(value): [printable_name(name) for name in names]
            for value, names in claims.ambiguous().items()
        },
    }
    if include_branches:
        result["branches"] = [
            {"name": printable_name(branch.name), "identifier": branch.identifier.display}
            for branch in claims.branches
        ]
    return result


def rfc_next_identifier() -> dict[str, object]:
    """Return the identifier the next ``rfc_create`` would allocate."""
    config = Config.load()
    checkout = ensure_local_repo(config)
    identifier = allocate_identifier(snapshot_claims(checkout, config.extensions).values)
    return {"identifier": identifier, "prefix": format_identifier(identifier)}


def rfc_create(title: str, dry_run: bool = False, start_point: str = DEFAULT_START_POINT) -> dict[str, object]:
    """Create and check out the draft branch for a new RFC.

    With ``dry_run`` the branch name is computed but nothing is created.
    """
    config = Config.load()
    checkout = ensure_local_repo(config)
    if dry_run:
        draft = plan_rfc(checkout, title, config.extensions)
    else:
        draft = create_rfc(checkout, title, config.extensions, start_point=start_point)
    return {
        "identifier": draft.identifier,
        "prefix": draft.prefix,
        "branch_name": draft.branch_name,
        "created": draft.created,
        "current_branch": draft.current_branch,
    }


def config_dump() -> dict[str, object]:
    """Return the configuration location and the configured repository."""
    config = Config.load()
    return {
        "config_path": str(config.config_path),
        **config.to_dict(),
    }
