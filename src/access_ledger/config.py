"""
Server configuration management.

Settings are loaded from several sources with a clear priority order:

    1. Environment variables (highest priority) - for containerized deployments
    2. Config file (config/server.ini) - for static deployments
    3. Built-in defaults (lowest priority) - sensible fallbacks

Configuration is loaded once at module import time and cached. The AppConfig
dataclass provides typed access to all settings.

Usage:
    from access_ledger.config import config

    print(config.server.host)
    print(config.ledger.genesis_seed)

Environment Variable Mapping:
    LEDGER_HOST          -> server.host
    LEDGER_PORT          -> server.port
    LEDGER_GENESIS_SEED  -> ledger.genesis_seed
    LEDGER_LOG_LEVEL     -> logging.level
    LEDGER_LOG_FORMAT    -> logging.format
"""

import configparser
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "server.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "server.example.ini"

LOG_FORMATS: dict[str, str] = {
    "simple": "%(levelname)s %(message)s",
    "detailed": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
}


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class ServerSettings:
    """Network server configuration."""

    host: str = "0.0.0.0"  # nosec B104 - intentional for server binding
    port: int = 8080


@dataclass
class LedgerSettings:
    """Ledger construction settings."""

    genesis_seed: str = "genesis"


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["simple", "detailed"] = "detailed"

    @property
    def format_string(self) -> str:
        """The ``logging`` format string for the selected style."""
        return LOG_FORMATS[self.format]


@dataclass
class AppConfig:
    """
    Complete application configuration.

    Aggregates all settings sections. Access via the module-level `config`
    singleton, or build one with `load_config()`.
    """

    server: ServerSettings = field(default_factory=ServerSettings)
    ledger: LedgerSettings = field(default_factory=LedgerSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_port(value: str) -> int:
    """Parse a TCP port number, rejecting out-of-range values."""
    port = int(value)
    if not 0 < port < 65536:
        raise ValueError(f"Port must be between 1 and 65535, got {port}.")
    return port


def _parse_level(value: str) -> str:
    """Normalise a log level name, rejecting names ``logging`` does not know."""
    level = value.strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level {value!r}.")
    return level


def _load_from_ini(parser: configparser.ConfigParser, cfg: AppConfig) -> None:
    """Load configuration from parsed INI file into AppConfig."""
    if parser.has_section("server"):
        if parser.has_option("server", "host"):
            cfg.server.host = parser.get("server", "host")
        if parser.has_option("server", "port"):
            cfg.server.port = _parse_port(parser.get("server", "port"))

    if parser.has_section("ledger"):
        if parser.has_option("ledger", "genesis_seed"):
            cfg.ledger.genesis_seed = parser.get("ledger", "genesis_seed")

    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = _parse_level(parser.get("logging", "level"))
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in LOG_FORMATS:
                cfg.logging.format = val  # type: ignore[assignment]


def _apply_env_overrides(cfg: AppConfig) -> None:
    """Apply environment variable overrides to configuration."""
    if env_host := os.getenv("LEDGER_HOST"):
        cfg.server.host = env_host
    if env_port := os.getenv("LEDGER_PORT"):
        cfg.server.port = _parse_port(env_port)

    if env_seed := os.getenv("LEDGER_GENESIS_SEED"):
        cfg.ledger.genesis_seed = env_seed

    if env_log := os.getenv("LEDGER_LOG_LEVEL"):
        cfg.logging.level = _parse_level(env_log)
    if env_format := os.getenv("LEDGER_LOG_FORMAT"):
        if env_format.lower() in LOG_FORMATS:
            cfg.logging.format = env_format.lower()  # type: ignore[assignment]


def load_config() -> AppConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/server.ini
        3. config/server.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        AppConfig: Fully populated configuration object.

    Raises:
        ValueError: If a port value is not an integer in 1-65535, or the log
                    level is not a name known to ``logging``.
    """
    cfg = AppConfig()

    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "AppConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton. It does not affect a
    server that is already running.
    """
    global config
    config = load_config()
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information.
    """
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "host": config.server.host,
        "port": config.server.port,
        "log_level": config.logging.level,
    }


def print_config_summary() -> None:
    """Print a summary of current configuration to stdout."""
    status = get_config_status()
    print("\n" + "=" * 60)
    print("LEDGER SERVER CONFIGURATION")
    print("=" * 60)
    print(f"Config file:  {status['config_file_path']}")
    print(f"File exists:  {status['config_file_exists']}")
    if status["using_example"]:
        print("WARNING: Using example config (copy to server.ini for production)")
    print("-" * 60)
    print(f"Server:       {config.server.host}:{config.server.port}")
    print(f"Genesis seed: {config.ledger.genesis_seed}")
    print(f"Log level:    {config.logging.level} ({config.logging.format})")
    print("=" * 60 + "\n")
