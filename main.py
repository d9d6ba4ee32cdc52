# =============================================================================
# main.py  —  Entry Point for the Dragon Ball MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (DRAGONBALL_API_BASE, DRAGONBALL_LOG_LEVEL, ...)
#   2. Builds a ServerConfig from the environment (core/config.py)
#   3. Creates the FastMCP server with both tools (tools/mcp_server.py)
#   4. Serves MCP over stdin/stdout until the client disconnects
#
# Point an MCP client (Claude Desktop, MCP Inspector, an agent framework)
# at this command with stdio transport.  Logs appear on stderr.
# =============================================================================

from tools.mcp_server import main

if __name__ == "__main__":
    main()
