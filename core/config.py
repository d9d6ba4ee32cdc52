# =============================================================================
# core/config.py  —  Server Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds the one ServerConfig value the process runs with.  It is created
#   once at startup (tools/mcp_server.py → main) and handed to create_server;
#   nothing else reads the environment.
#
# ENVIRONMENT VARIABLES (all optional, a .env file works too):
#   DRAGONBALL_MCP_NAME       → MCP server name         (default "dragon-ball")
#   DRAGONBALL_MCP_VERSION    → MCP server version      (default "1.0.0")
#   DRAGONBALL_API_BASE       → upstream base URL       (default public API)
#   DRAGONBALL_HTTP_TIMEOUT   → per-request timeout, s  (default 5.0)
#   DRAGONBALL_LOG_LEVEL      → logging level name      (default "INFO")
#
#   The .env file is loaded by the entry point with python-dotenv, before
#   from_env() runs, so values there show up in os.environ.
# =============================================================================

from dataclasses import dataclass
import os
from typing import Mapping, Optional

DEFAULT_API_BASE = "https://dragonball-api.com/api"

# Same value httpx uses when no timeout is given.
DEFAULT_HTTP_TIMEOUT = 5.0


@dataclass(frozen=True)
class ServerConfig:
    """Settings for one server process."""

    server_name: str = "dragon-ball"
    server_version: str = "1.0.0"
    api_base: str = DEFAULT_API_BASE
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from.  Defaults to os.environ.

        Raises:
            ValueError: If DRAGONBALL_HTTP_TIMEOUT is not a positive number.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("DRAGONBALL_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(
                f"DRAGONBALL_HTTP_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from None
        if timeout <= 0:
            raise ValueError(f"DRAGONBALL_HTTP_TIMEOUT must be positive, got {timeout}")

        return cls(
            server_name=env.get("DRAGONBALL_MCP_NAME", cls.server_name),
            server_version=env.get("DRAGONBALL_MCP_VERSION", cls.server_version),
            api_base=env.get("DRAGONBALL_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            http_timeout=timeout,
            log_level=env.get("DRAGONBALL_LOG_LEVEL", cls.log_level).upper(),
        )
