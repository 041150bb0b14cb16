"""Identifier grammar shared by the document and branch scanners.

A name claims an RFC identifier when it contains a run of three or more ASCII
digits (``011-caches.rst``, ``002-other-draft``), or an explicit ``rfc``
marker followed by digits (``rfc_2.org``, ``RFC-7``).  When a name carries
several candidates, the leftmost one wins.  Extraction is purely syntactic:
both scanners call ``extract_identifier`` so files and branches are always
parsed by the same rules.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from .constants import IDENTIFIER_MIN_DIGITS, IDENTIFIER_PAD_WIDTH

_IDENTIFIER_RE = re.compile(
    r"(?<![a-z0-9])rfc[-_ ]?(?P<marked>[0-9]+)"
    r"|(?P<run>[0-9]{%d,})" % IDENTIFIER_MIN_DIGITS,
    re.IGNORECASE,
)


class IdentifierSource(str, enum.Enum):
    """Where a candidate identifier was found."""

    FILE = "file"
    BRANCH = "branch"


@dataclass(frozen=True)
class CandidateIdentifier:
    """An identifier extracted from a file or branch name.

    ``value`` is used for comparison; ``width`` is the number of digits as
    written in ``name`` and only matters for display.
    """

    value: int
    width: int
    source: IdentifierSource
    name: str

    @property
    def display(self) -> str:
        return str(self.value).zfill(self.width)


def extract_identifier(name: str, source: IdentifierSource = IdentifierSource.FILE) -> CandidateIdentifier | None:
    """Return the leftmost identifier claimed by ``name``, or ``None``."""
    match = _IDENTIFIER_RE.search(name)
    if match is None:
        return None
    digits = match.group("marked") or match.group("run")
    return CandidateIdentifier(value=int(digits), width=len(digits), source=source, name=name)


def format_identifier(value: int) -> str:
    """Zero-pad ``value`` to three digits; wider values are never truncated."""
    if value < 0:
        raise ValueError(f"identifier must not be negative: {value}")
    return f"{value:0{IDENTIFIER_PAD_WIDTH}d}"


def printable_name(name: str) -> str:
    """Return ``name`` safe to print, with undecodable bytes shown as U+FFFD.

    File names from the filesystem and branch names from git keep bytes that
    are not valid UTF-8 as surrogate escapes; those cannot be written to a
    text stream as they are.
    """
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
