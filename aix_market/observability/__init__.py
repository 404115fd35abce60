"""
aix_market.observability — structured logging setup.
"""
from .logging_config import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "LogContext",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
