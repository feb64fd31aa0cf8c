"""
Logger factory and helpers.

Provides:
- get_logger(): Get a configured logger instance
- hash_ip(): Hash IP addresses for privacy (None-tolerant)
"""

from __future__ import annotations

from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from siteverify.shared.logging_config import (
    configure_structlog,
    hash_ip as _hash_ip,
    setup_logging,
)

__all__ = [
    "get_logger",
    "hash_ip",
    "configure_structlog",
    "setup_logging",
]


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Example:
        >>> from siteverify.shared.logging import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("captcha_verified", hostname="example.com")
    """
    return structlog.get_logger(name)


def hash_ip(ip_address: Optional[str]) -> Optional[str]:
    """Hash a client IP in production; pass None and "" through unchanged."""
    if not ip_address:
        return ip_address
    return _hash_ip(ip_address)
