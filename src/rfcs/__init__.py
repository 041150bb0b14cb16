"""Top‑level package for rfcs.

This package manages a directory of numbered engineering‑decision documents
("RFCs") kept in a git repository.  It allocates the next free RFC number
from the documents and local branches of a checkout and creates the draft
branch for a new RFC.  See ``rfcs.cli`` for the command line interface.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
