"""
Application configuration.

Settings are read from DEVTEXT_* environment variables with defaults
suitable for a local single-user launch.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

VIEW_MODES = ("side-by-side", "inline")


class ConfigError(ValueError):
    """Raised for invalid configuration values."""


@dataclass(frozen=True)
class AppConfig:
    """
    Launch and runtime settings.

    Attributes:
        server_name: Interface the Gradio server binds to
        server_port: Port the Gradio server listens on
        default_view_mode: Initial diff view mode
        slow_operation_threshold: Seconds before an operation is logged as slow
        show_error: Forward handler errors to the browser
    """

    server_name: str = "127.0.0.1"
    server_port: int = 7860
    default_view_mode: str = "side-by-side"
    slow_operation_threshold: float = 1.0
    show_error: bool = True


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build an AppConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Validated AppConfig

    Raises:
        ConfigError: If a variable holds an invalid value
    """
    env = os.environ if environ is None else environ
    defaults = AppConfig()

    server_name = env.get("DEVTEXT_SERVER_NAME", defaults.server_name).strip()
    if not server_name:
        raise ConfigError("DEVTEXT_SERVER_NAME must not be empty")

    raw_port = env.get("DEVTEXT_SERVER_PORT")
    server_port = defaults.server_port
    if raw_port is not None:
        try:
            server_port = int(raw_port)
        except ValueError:
            raise ConfigError(f"DEVTEXT_SERVER_PORT must be an integer, got {raw_port!r}")
        if not 1 <= server_port <= 65535:
            raise ConfigError(f"DEVTEXT_SERVER_PORT out of range: {server_port}")

    view_mode = env.get("DEVTEXT_VIEW_MODE", defaults.default_view_mode)
    if view_mode not in VIEW_MODES:
        raise ConfigError(f"DEVTEXT_VIEW_MODE must be one of {list(VIEW_MODES)}, got {view_mode!r}")

    raw_threshold = env.get("DEVTEXT_SLOW_THRESHOLD")
    threshold = defaults.slow_operation_threshold
    if raw_threshold is not None:
        try:
            threshold = float(raw_threshold)
        except ValueError:
            raise ConfigError(f"DEVTEXT_SLOW_THRESHOLD must be a number, got {raw_threshold!r}")
        if threshold <= 0:
            raise ConfigError("DEVTEXT_SLOW_THRESHOLD must be positive")

    raw_show_error = env.get("DEVTEXT_SHOW_ERROR")
    show_error = defaults.show_error
    if raw_show_error is not None:
        show_error = _parse_bool("DEVTEXT_SHOW_ERROR", raw_show_error)

    return AppConfig(
        server_name=server_name,
        server_port=server_port,
        default_view_mode=view_mode,
        slow_operation_threshold=threshold,
        show_error=show_error,
    )
