# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything the Dragon Ball tools do besides speaking
# MCP: the record shapes, the upstream HTTP client, the text summaries and the
# server configuration.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  The tools/ layer imports core/,
#   never the other way round.  Every module here can be exercised from a
#   plain pytest run with a mocked HTTP transport.
# =============================================================================
