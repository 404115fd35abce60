"""
Structured Logging - structlog on top of the standard library.

Library modules log through ``logging.getLogger(__name__)``; configure_logging
routes those records through structlog processors so both styles render the
same way:
- JSON output for log aggregation, console output for terminals
- Context variables bound per command/request are merged into every entry
"""
import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, unbind_contextvars


def configure_logging(
    service_name: str,
    log_level: str = "INFO",
    json_output: bool = False,
) -> None:
    """
    Configure structured logging for the process.

    Args:
        service_name: Name added to every log entry as ``service``
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: Whether to output JSON (True) or human-readable (False)
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_service_info(service_name),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Logs go to stderr so command output on stdout stays machine-readable
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    ))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def _add_service_info(service_name: str):
    """Processor to add service information to all log entries."""
    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict
    return processor


def get_logger(name: str = None) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """
    Bind key-value pairs to the logging context.

    Usage:
        bind_context(command="convert", task_name="demo")
        logger.info("Converting")  # includes command and task_name
    """
    bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear the logging context."""
    clear_contextvars()


class LogContext:
    """
    Context manager for scoped logging context.

    Usage:
        with LogContext(command="valuate"):
            logger.info("Starting")
        # bound keys are removed after the block
    """

    def __init__(self, **kwargs):
        self.context = kwargs

    def __enter__(self):
        bind_context(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        unbind_contextvars(*self.context.keys())
        return False
