# =============================================================================
# core/errors.py  —  Failures of the upstream Dragon Ball API
# =============================================================================
#
# Two things can go wrong once a tool has valid input:
#   - the API answers with a non-2xx status  → UpstreamHttpError
#   - the request never completes, or the body is not JSON → TransportError
#
# Both share DragonBallAPIError so the tools/ layer can catch them in one
# place and turn them into an MCP tool error.  Input validation failures are
# not here: FastMCP rejects those before any tool code runs.
# =============================================================================


class DragonBallAPIError(Exception):
    """Base class for every failure talking to the Dragon Ball API."""


class UpstreamHttpError(DragonBallAPIError):
    """The API responded, but with a non-2xx status code."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API error: {status_code}")


class TransportError(DragonBallAPIError):
    """Network failure, timeout, or a response body that is not valid JSON."""
