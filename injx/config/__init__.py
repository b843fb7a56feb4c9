"""
Configuration Module

Promotion defaults and logging setup shared by every node.
"""

from .settings import (
    InjxConfig,
    SafeCheck,
    load_config,
    load_config_from_env,
    get_config,
    set_config,
    reset_config,
    setup_logging,
    setup_logging_from_config
)

__all__ = [
    "InjxConfig",
    "SafeCheck",
    "load_config",
    "load_config_from_env",
    "get_config",
    "set_config",
    "reset_config",
    "setup_logging",
    "setup_logging_from_config"
]
