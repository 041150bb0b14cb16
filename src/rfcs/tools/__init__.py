"""Tool module exports for rfcs.

Usage:

    from rfcs.tools import rfc_tools
    rfc_tools.rfc_next_identifier()

The MCP server imports these modules and dispatches requests accordingly.
"""

from . import rfc_tools  # noqa: F401

__all__ = ["rfc_tools"]
