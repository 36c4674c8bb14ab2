"""Configuration module for varprio.

Policy tables are available via: from varprio.config.constants import ...
Logging: from varprio.config.debug import get_logger
"""

from varprio.config.debug import LOG_LEVEL_ENV_VAR, get_logger

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "get_logger",
]
