"""
Structured logging for the SMS Sender.

Call sites use the stdlib shape ``logger.info("msg", extra={...})``; the
``extra`` mapping is lifted into top-level keys so JSON lines carry
``event_id``, ``phone_number``, ``partition`` and ``offset`` directly.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping

import structlog

SERVICE_NAME = "sms-sender"

# Third-party loggers that are noisy at INFO.
_QUIET_LOGGERS = ("confluent_kafka", "uvicorn.access")


def lift_extra(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Merge ``extra={...}`` into the event; keys already set by the call win."""
    extra = event_dict.pop("extra", None)
    if isinstance(extra, dict):
        for key, value in extra.items():
            event_dict.setdefault(key, value)
    return event_dict


class ServiceContext:
    """Stamps every event with the service name and deployment environment."""

    def __init__(self, service: str, environment: str) -> None:
        self.service = service
        self.environment = environment

    def __call__(self, logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        event_dict.setdefault("service", self.service)
        event_dict.setdefault("environment", self.environment)
        return event_dict


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    *,
    service: str = SERVICE_NAME,
    environment: str = "local",
) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        lift_extra,
        ServiceContext(service, environment),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    processors.append(
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Replace the per-request context (request_id, method, path)."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
