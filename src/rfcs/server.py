"""MCP stdio server entrypoint for rfcs.

The server runs over standard input/output using the Model Context Protocol
and registers the RFC tools so that clients can list RFCs, preview the next
identifier and create draft branches.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .constants import DEFAULT_LOG_LEVEL
from .telemetry import configure_logging
from .tools import rfc_tools


def build_tools_dispatch() -> dict[str, Callable[..., dict[str, Any]]]:
    """Return a mapping from tool names to callables.

    Each callable accepts keyword arguments and returns a JSON-serializable
    dictionary.
    """
    return {
        "rfc_list": rfc_tools.rfc_list,
        "rfc_next_identifier": rfc_tools.rfc_next_identifier,
        "rfc_create": rfc_tools.rfc_create,
        "config_dump": rfc_tools.config_dump,
    }


def main() -> None:
    """Entrypoint for the rfcs MCP server."""
    # stdout is used for the MCP protocol
    configure_logging(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))
    logger = logging.getLogger("rfcs.server")
    logger.info("Starting rfcs MCP server")

    mcp = FastMCP("rfcs-mcp")

    dispatch = build_tools_dispatch()
    for name, func in dispatch.items():
        mcp.add_tool(func, name=name)

    logger.info("Registered %d tools", len(dispatch))

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
