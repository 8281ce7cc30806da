"""
Configuration Module
====================

Immutable, environment-aware configuration for SafeBytes.

Features:
- Frozen dataclasses validated on construction
- Environment variable overrides (SAFEBYTES_ prefix, "__" for nesting)
- Sensitive-looking keys are never read from the environment
- Process-wide singleton with a reset hook for tests

Examples:
    SAFEBYTES_MEMORY__WIPE_PASSES=1
    SAFEBYTES_MEMORY__LOCK_MEMORY=true
    SAFEBYTES_LOGGING__LEVEL=DEBUG
"""

from __future__ import annotations

import hashlib
import logging
import os
from dataclasses import dataclass
from typing import Any, Final, Optional

from safebytes.utils.validators import ValidationError, validate_bool, validate_int


_log = logging.getLogger("safebytes.config")

_SENSITIVE_KEYS: Final[frozenset[str]] = frozenset({
    "password", "secret", "key", "token", "private", "credential", "salt"
})

_VALID_LEVELS: Final[frozenset[str]] = frozenset({
    "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
})

MIN_WIPE_PASSES: Final[int] = 1
MAX_WIPE_PASSES: Final[int] = 7


def _is_sensitive_key(key: str) -> bool:
    """Check if a configuration key might contain sensitive data."""
    key_lower = key.lower()
    return any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS)


@dataclass(frozen=True, slots=True)
class MemoryConfig:
    """How secrets are wiped and held."""

    # Overwrite passes: 0x00, 0xFF, ... always ending on 0x00
    wipe_passes: int = 3
    # Try mlock/VirtualLock on secret buffers
    lock_memory: bool = False

    def __post_init__(self) -> None:
        if not MIN_WIPE_PASSES <= self.wipe_passes <= MAX_WIPE_PASSES:
            raise ValidationError(
                f"wipe_passes must be between {MIN_WIPE_PASSES} and {MAX_WIPE_PASSES}"
            )


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Library logging defaults. The library only logs at DEBUG."""

    level: str = "WARNING"
    enable_console: bool = False
    enable_json: bool = False
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    def __post_init__(self) -> None:
        if self.level.upper() not in _VALID_LEVELS:
            raise ValidationError(f"Invalid log level: {self.level}")


class SafeBytesConfig:
    """
    Immutable configuration holder.

    Usage:
        config = SafeBytesConfig.get_instance()
        passes = config.memory.wipe_passes
    """

    __slots__ = ("_memory", "_logging", "_frozen", "_config_hash")

    _instance: Optional[SafeBytesConfig] = None

    def __init__(
        self,
        memory: Optional[MemoryConfig] = None,
        logging: Optional[LoggingConfig] = None,
    ) -> None:
        """Initialize configuration. Use SafeBytesConfig.load() to read the environment."""
        object.__setattr__(self, "_frozen", False)
        object.__setattr__(self, "_memory", memory or MemoryConfig())
        object.__setattr__(self, "_logging", logging or LoggingConfig())
        object.__setattr__(self, "_config_hash", self._compute_hash())
        object.__setattr__(self, "_frozen", True)

    def _compute_hash(self) -> str:
        config_str = f"{self._memory}|{self._logging}"
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]

    @property
    def memory(self) -> MemoryConfig:
        return self._memory

    @property
    def logging(self) -> LoggingConfig:
        return self._logging

    @property
    def config_hash(self) -> str:
        return self._config_hash

    @classmethod
    def load(cls, env_prefix: str = "SAFEBYTES") -> SafeBytesConfig:
        """
        Load configuration with environment variable overrides.

        Args:
            env_prefix: Prefix for environment variables

        Raises:
            ValidationError: If an override has the wrong type or range
        """
        env_overrides = cls._parse_env_overrides(env_prefix)

        memory_kwargs: dict[str, Any] = {}
        if "memory.wipe_passes" in env_overrides:
            memory_kwargs["wipe_passes"] = validate_int(
                env_overrides["memory.wipe_passes"], field_name="memory.wipe_passes"
            )
        if "memory.lock_memory" in env_overrides:
            memory_kwargs["lock_memory"] = validate_bool(
                env_overrides["memory.lock_memory"], field_name="memory.lock_memory"
            )

        logging_kwargs: dict[str, Any] = {}
        if "logging.level" in env_overrides:
            logging_kwargs["level"] = env_overrides["logging.level"].upper()
        if "logging.enable_console" in env_overrides:
            logging_kwargs["enable_console"] = validate_bool(
                env_overrides["logging.enable_console"], field_name="logging.enable_console"
            )
        if "logging.enable_json" in env_overrides:
            logging_kwargs["enable_json"] = validate_bool(
                env_overrides["logging.enable_json"], field_name="logging.enable_json"
            )

        if memory_kwargs or logging_kwargs:
            _log.debug(
                "Applied environment overrides: %s",
                ", ".join(sorted(env_overrides)),
            )

        return cls(
            memory=MemoryConfig(**memory_kwargs) if memory_kwargs else None,
            logging=LoggingConfig(**logging_kwargs) if logging_kwargs else None,
        )

    @staticmethod
    def _parse_env_overrides(prefix: str) -> dict[str, str]:
        """Parse environment variables with the given prefix."""
        overrides: dict[str, str] = {}
        prefix_upper = f"{prefix.upper()}_"

        for key, value in os.environ.items():
            if key.startswith(prefix_upper):
                # SAFEBYTES_SECTION__KEY -> section.key
                config_key = key[len(prefix_upper):].lower().replace("__", ".")

                if _is_sensitive_key(config_key):
                    continue

                overrides[config_key] = value

        return overrides

    @classmethod
    def get_instance(cls) -> SafeBytesConfig:
        """Get or create the process-wide configuration."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def set_instance(cls, config: SafeBytesConfig) -> None:
        """Install an explicit configuration (application start-up, tests)."""
        cls._instance = config

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next access reloads it. Tests only."""
        cls._instance = None

    def __repr__(self) -> str:
        return f"SafeBytesConfig(hash={self._config_hash})"

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_frozen") and self._frozen:
            raise AttributeError("SafeBytesConfig is immutable after initialization")
        super().__setattr__(name, value)


__all__ = [
    "MemoryConfig",
    "LoggingConfig",
    "SafeBytesConfig",
    "MIN_WIPE_PASSES",
    "MAX_WIPE_PASSES",
]
