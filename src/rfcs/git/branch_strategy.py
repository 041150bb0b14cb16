"""Branch naming for new RFC drafts.

A draft branch is named ``<padded-id>-<title>``, e.g. ``004-New-Thing``.
Titles keep their case; whitespace becomes ``-`` and punctuation git would
reject (or that would nest the branch under a ``/`` namespace) is replaced.
"""

from __future__ import annotations

import re

from ..errors import TitleSanitizationError
from ..identifiers import format_identifier

_DROPPED = re.compile(r"[,.?!]")
_WHITESPACE = re.compile(r"\s+")
# Characters git refuses in ref names, plus "/" and the "@{" sequence
_UNSAFE = re.compile(r"@\{|[\x00-\x1f\x7f~^:*\[\\/]")
_DASHES = re.compile(r"-{2,}")


def sanitize_title(title: str) -> str:
    """Return ``title`` as a branch-name fragment.

    Raises ``TitleSanitizationError`` if nothing usable remains.
    """
    fragment = _WHITESPACE.sub("-", title.strip())
    fragment = _DROPPED.sub("", fragment)
    fragment = _UNSAFE.sub("-", fragment)
    fragment = _DASHES.sub("-", fragment).strip("-")
    if not fragment:
        raise TitleSanitizationError(
            f"Title {title!r} does not contain any characters usable in a branch name."
        )
    return fragment


def decide_branch_name(identifier: int, title: str) -> str:
    """Combine an allocated identifier and a title into a draft branch name."""
    return f"{format_identifier(identifier)}-{sanitize_title(title)}"
