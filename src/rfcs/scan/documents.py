"""Document scanner.

Walks a repository's working tree and reports every RFC document: a file
whose extension is one of the recognized text formats and whose base name
claims an identifier.  The walk is recursive, so RFCs kept in nested
directories are counted too; the ``.git`` directory is never entered.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..constants import RFC_EXTENSIONS, SKIPPED_DIRS
from ..errors import ScanIOError
from ..identifiers import CandidateIdentifier, IdentifierSource, extract_identifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RfcDocument:
    """An RFC file and the identifier its name claims."""

    path: Path
    identifier: CandidateIdentifier


def is_text_document(path: Path, extensions: Iterable[str] = RFC_EXTENSIONS) -> bool:
    suffix = path.suffix[1:].lower()
    return bool(suffix) and suffix in {ext.lower() for ext in extensions}


def scan_documents(root: Path, extensions: Iterable[str] = RFC_EXTENSIONS) -> list[RfcDocument]:
    """Return the RFC documents under ``root``, sorted by relative path.

    Files that are not RFCs (READMEs, configs, sources) are skipped without
    complaint.  Two files claiming the same identifier are both returned.
    """
    root = Path(root)
    if not root.is_dir():
        raise ScanIOError(f"Cannot scan {root}: not a readable directory")

    wanted = {ext.lower() for ext in extensions}

    def _on_error(err: OSError) -> None:
        if Path(err.filename or "") == root:
            raise ScanIOError(f"Cannot scan {root}: {err}") from err
        logger.warning("Error while reading %s: %s", err.filename, err.strerror)

    documents: list[RfcDocument] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIPPED_DIRS)
        for filename in filenames:
            path = Path(dirpath) / filename
            if not is_text_document(path, wanted):
                continue
            identifier = extract_identifier(filename, IdentifierSource.FILE)
            if identifier is None:
                continue
            documents.append(RfcDocument(path=path.relative_to(root), identifier=identifier))

    documents.sort(key=lambda doc: doc.path.as_posix())
    logger.debug("Found %d RFC documents under %s", len(documents), root)
    return documents
