# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server and its tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients and core/.  It:
#     1. Declares each tool's name, title, description and schemas
#     2. Calls core/dragonball_api.py for the data
#     3. Pairs the core/formatting.py summary with the raw payload
#     4. Turns upstream failures into MCP tool errors
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or talk HTTP (that's core/dragonball_api.py)
#   - They do NOT reshape the upstream JSON (it is passed through as-is)
#   - They do NOT keep state between calls
# =============================================================================
