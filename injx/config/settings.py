#!/usr/bin/env python3

"""
Configuration

Process-wide defaults for service promotion and logging. Values can come
from a plain dict or from ``INJX_*`` environment variables; both paths are
validated and return Result values instead of raising.
"""

import logging
import os
from dataclasses import dataclass, asdict, fields
from enum import Enum
from typing import Dict, Any, Optional, Mapping

from ..functional.result_monad import Result, Success, Failure

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")

class SafeCheck(Enum):
    """How a safe promotion decides that an ancestor already provides a key"""
    REGISTERED = "registered"
    TRUTHY = "truthy"

@dataclass
class InjxConfig:
    """Hierarchy configuration with default values"""
    # Promotion settings
    default_safe: bool = True
    safe_check: SafeCheck = SafeCheck.REGISTERED

    # Logging settings
    logging_level: str = "WARNING"
    logging_format: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["safe_check"] = self.safe_check.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InjxConfig':
        """Create config from dictionary, using defaults for missing keys"""
        settings_dict = cls().to_dict()
        settings_dict.update(data)
        settings_dict["safe_check"] = SafeCheck(settings_dict["safe_check"])
        return cls(**settings_dict)

def _validate_config_dict(data: Dict[str, Any]) -> Result[Dict[str, Any], str]:
    known = {f.name for f in fields(InjxConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        return Failure(f"Unknown configuration keys: {unknown}")

    if "default_safe" in data and not isinstance(data["default_safe"], bool):
        return Failure(f"Field 'default_safe' must be bool, got {type(data['default_safe']).__name__}")

    if "safe_check" in data:
        value = data["safe_check"]
        if isinstance(value, SafeCheck):
            value = value.value
        if value not in [check.value for check in SafeCheck]:
            return Failure(f"Invalid safe_check: {data['safe_check']!r}")

    if "logging_level" in data:
        level = data["logging_level"]
        if not isinstance(level, str) or level.upper() not in _VALID_LEVELS:
            return Failure(f"Invalid logging_level: {level!r}")

    if data.get("logging_format") is not None and not isinstance(data["logging_format"], str):
        return Failure("Field 'logging_format' must be str")

    return Success(data)

def load_config(data: Dict[str, Any]) -> Result[InjxConfig, str]:
    """Validate a configuration dict and build an InjxConfig from it"""
    def build(valid: Dict[str, Any]) -> InjxConfig:
        normalized = dict(valid)
        if isinstance(normalized.get("safe_check"), SafeCheck):
            normalized["safe_check"] = normalized["safe_check"].value
        if "logging_level" in normalized:
            normalized["logging_level"] = normalized["logging_level"].upper()
        return InjxConfig.from_dict(normalized)

    return _validate_config_dict(data).map(build)

def load_config_from_env(environ: Optional[Mapping[str, str]] = None) -> Result[InjxConfig, str]:
    """Build a config from INJX_DEFAULT_SAFE, INJX_SAFE_CHECK and INJX_LOG_LEVEL"""
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}

    raw_safe = env.get("INJX_DEFAULT_SAFE")
    if raw_safe is not None:
        lowered = raw_safe.strip().lower()
        if lowered in _TRUE_VALUES:
            data["default_safe"] = True
        elif lowered in _FALSE_VALUES:
            data["default_safe"] = False
        else:
            return Failure(f"Invalid INJX_DEFAULT_SAFE: {raw_safe!r}")

    if env.get("INJX_SAFE_CHECK") is not None:
        data["safe_check"] = env["INJX_SAFE_CHECK"].strip().lower()

    if env.get("INJX_LOG_LEVEL") is not None:
        data["logging_level"] = env["INJX_LOG_LEVEL"].strip()

    return load_config(data)

# Process-wide config
_config: Optional[InjxConfig] = None

def get_config() -> InjxConfig:
    """Get the process-wide config, created with defaults on first use"""
    global _config

    if _config is None:
        _config = InjxConfig()

    return _config

def set_config(config: InjxConfig) -> None:
    global _config
    _config = config
    logger.debug(f"Config replaced: {config.to_dict()}")

def reset_config() -> None:
    """Drop the process-wide config so the next get_config() returns defaults"""
    global _config
    _config = None

def setup_logging(level: str = "WARNING", format_string: Optional[str] = None) -> None:
    """Configure the root logger with the project format"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger.info(f"Logging configured at {level} level")

def setup_logging_from_config(config: Optional[InjxConfig] = None) -> None:
    config = config or get_config()
    setup_logging(config.logging_level, config.logging_format)
