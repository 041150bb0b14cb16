"""Scanners that collect claimed RFC identifiers from a checkout."""

from .branches import RfcBranch, scan_branches
from .documents import RfcDocument, is_text_document, scan_documents

__all__ = [
    "RfcBranch",
    "RfcDocument",
    "is_text_document",
    "scan_branches",
    "scan_documents",
]
