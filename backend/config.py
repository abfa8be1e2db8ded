"""
Application configuration.

Responsibilities:
- Load deployment-specific configuration
- Read environment variables
- Provide a typed, immutable config object

Non-responsibilities:
- No connection logic
- No wire or palette constants (see constants.py)
- No runtime mutation
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes"}


def _env_optional_float(name: str, default: str) -> float | None:
    raw = os.environ.get(name, default).strip()
    if raw == "" or raw.lower() == "none":
        return None
    return float(raw)


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable application configuration.

    Constructed once at process startup.
    Passed downward to the picker session and connection manager.
    """

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    env: str = "dev"
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    enable_json_logs: bool = True

    # ------------------------------------------------------------------
    # Sync connection
    # ------------------------------------------------------------------

    default_endpoint: str = ""
    auto_connect: bool = False
    # Transport keepalive; None disables pings. Handshakes never time out.
    ws_ping_interval_s: float | None = 20.0

    # ------------------------------------------------------------------
    # HTTP server
    # ------------------------------------------------------------------

    host: str = "127.0.0.1"
    port: int = 8000

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @staticmethod
    def load_from_env() -> AppConfig:
        """
        Load configuration from environment variables.

        Raises:
            ValueError if a numeric variable cannot be parsed.
        """
        return AppConfig(
            env=os.environ.get("ENV", "dev"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),

            enable_json_logs=_env_flag("ENABLE_JSON_LOGS", "1"),

            default_endpoint=os.environ.get("PICKER_DEFAULT_ENDPOINT", ""),
            auto_connect=_env_flag("PICKER_AUTO_CONNECT", "0"),
            ws_ping_interval_s=_env_optional_float("WS_PING_INTERVAL_S", "20"),

            host=os.environ.get("HOST", "127.0.0.1"),
            port=int(os.environ.get("PORT", "8000")),
        )
