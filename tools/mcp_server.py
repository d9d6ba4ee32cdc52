# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server and registers the Dragon Ball tools.  Each tool
#   is a thin wrapper around core/: it calls DragonBallClient, builds the text
#   summary, and returns the upstream body untouched as structured content.
#
# HOW IT WORKS (the flow):
#   1. An MCP client calls a tool by name (e.g., "dragonball-characters")
#   2. FastMCP validates the arguments against the input schema, which it
#      derives from the annotated signature (positive ints, defaults)
#   3. The decorated function calls core/dragonball_api.py
#   4. core/formatting.py turns the payload into a summary line
#   5. The client receives ToolResult(content=summary, structured_content=body)
#
# TOOLS:
#   - dragonball-characters        → one page of the character listing
#   - dragonball-character-detail  → one character with planet + transformations
#
# ERRORS:
#   Invalid arguments never reach the tool function: FastMCP rejects them.
#   Upstream failures (core.errors.DragonBallAPIError) are re-raised as
#   ToolError with the original message embedded.  No partial result is
#   ever returned.
#
# RUNNING THIS SERVER:
#   a) python main.py
#   b) python -m tools.mcp_server
#   c) dragonball-mcp   (console script, after `pip install -e .`)
#   All three speak MCP over stdio.
# =============================================================================

import logging
import sys
from typing import Annotated, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from core.config import ServerConfig
from core.dragonball_api import DragonBallClient
from core.errors import DragonBallAPIError
from core.formatting import summarize_character, summarize_character_page
from core.models import CharacterDetail, CharacterPage, json_schema

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: stdout is the MCP transport, and anything else written
# there would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for the response summary
#     - YELLOW for intermediate status/progress messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr with the [MCP] prefix."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, summary: str) -> None:
    """Log the text channel of a tool response in GREEN."""
    flat = summary.replace("\n", " | ")
    logging.info(f"{_GREEN}  ← {tool_name} response: {flat}{_RESET}")


# =============================================================================
# Server factory
# =============================================================================
# There is no module-level server instance.  main() builds a ServerConfig
# once and passes it here; tests build their own server around a
# DragonBallClient that talks to an httpx.MockTransport.
# =============================================================================
def create_server(
    config: ServerConfig,
    client: Optional[DragonBallClient] = None,
) -> FastMCP:
    """Create the FastMCP server with both Dragon Ball tools registered.

    Args:
        config: Server identity and upstream settings.
        client: API client to use.  Built from `config` when omitted.

    Returns:
        A FastMCP server, ready for `run()` or an in-memory fastmcp.Client.
    """
    api = client or DragonBallClient(
        base_url=config.api_base,
        timeout=config.http_timeout,
    )
    mcp = FastMCP(config.server_name, version=config.server_version)

    # =========================================================================
    # TOOL 1: dragonball-characters
    # =========================================================================
    # page/limit defaults live here and only here: FastMCP copies them into
    # the input schema.  Upper bounds are left to the upstream API.
    # =========================================================================
    @mcp.tool(
        name="dragonball-characters",
        title="Dragon Ball Characters Fetcher",
        description="Get Dragon Ball characters data from the Dragon Ball API",
        output_schema=json_schema(CharacterPage),
    )
    async def dragonball_characters(
        page: Annotated[int, Field(gt=0, description="Page number, starting at 1")] = 1,
        limit: Annotated[int, Field(gt=0, description="Characters per page")] = 10,
    ) -> ToolResult:
        _log_request("dragonball-characters", page=page, limit=limit)

        try:
            data = await api.list_characters(page=page, limit=limit)
        except DragonBallAPIError as exc:
            _log_status(f"Upstream failure: {exc}")
            raise ToolError(f"Failed to fetch Dragon Ball characters: {exc}") from exc

        summary = summarize_character_page(data, page)
        _log_response("dragonball-characters", summary)
        return ToolResult(content=summary, structured_content=data)

    # =========================================================================
    # TOOL 2: dragonball-character-detail
    # =========================================================================
    @mcp.tool(
        name="dragonball-character-detail",
        title="Dragon Ball Character Detail Fetcher",
        description=(
            "Get detailed information about a specific Dragon Ball character "
            "including their origin planet and transformations"
        ),
        output_schema=json_schema(CharacterDetail),
    )
    async def dragonball_character_detail(
        id: Annotated[int, Field(gt=0, description="Character id")],
    ) -> ToolResult:
        _log_request("dragonball-character-detail", id=id)

        try:
            data = await api.get_character(id)
        except DragonBallAPIError as exc:
            _log_status(f"Upstream failure: {exc}")
            raise ToolError(f"Failed to fetch Dragon Ball character {id}: {exc}") from exc

        summary = summarize_character(data)
        _log_response("dragonball-character-detail", summary)
        return ToolResult(content=summary, structured_content=data)

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
# Startup order: .env → ServerConfig → logging → server → stdio transport.
# Anything that escapes (bad config, transport failure) is logged and the
# process exits with status 1.
# =============================================================================
def main() -> None:
    load_dotenv()
    try:
        config = ServerConfig.from_env()
        configure_logging(config.log_level)
        server = create_server(config)
        logging.info("Dragon Ball MCP Server running on stdio")
        server.run(transport="stdio")
    except Exception:
        logging.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
