"""
Core module - Contains configuration, logging, encoding and memory components.
"""

from safebytes.core.config import SafeBytesConfig
from safebytes.core.logging import get_secure_logger, SecureLogFilter

__all__ = ["SafeBytesConfig", "get_secure_logger", "SecureLogFilter"]
