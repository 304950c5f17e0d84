"""Tracing and structured logging for the Auth0 SDK.

The SDK keeps its own structlog logger instead of touching the global
structlog configuration. Until ``configure_telemetry`` runs, that logger
filters at ``DEFAULT_LOG_LEVEL`` so per-request debug lines stay quiet.
State here is process-wide and shared by every client.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

if TYPE_CHECKING:
    from collections.abc import Generator

    from .config import TelemetryConfig

SDK_NAME = "auth0-sdk"
SDK_VERSION = "0.1.0"

# Same as TelemetryConfig.log_level
DEFAULT_LOG_LEVEL = "INFO"

_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}

_tracer: trace.Tracer | None = None
_logger: structlog.BoundLogger | None = None
_trace_requests: bool = True


def _log_level_to_int(level: str) -> int:
    """Convert log level string to integer (unknown names map to INFO)."""
    return _LEVELS.get(level.upper(), 20)


def _build_logger(name: str, level: str) -> structlog.BoundLogger:
    """Create a JSON logger writing to stdout that drops events below ``level``."""
    return structlog.wrap_logger(
        structlog.PrintLogger(sys.stdout),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_log_level_to_int(level)),
        context_class=dict,
        logger_name=name,
    )


def get_tracer() -> trace.Tracer:
    """Get or create the SDK tracer."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(SDK_NAME, SDK_VERSION)
    return _tracer


def get_logger() -> structlog.BoundLogger:
    """Get the SDK logger, creating one at the default level if unconfigured."""
    global _logger
    if _logger is None:
        _logger = _build_logger(SDK_NAME, DEFAULT_LOG_LEVEL)
    return _logger


def configure_telemetry(config: TelemetryConfig) -> None:
    """Apply a telemetry configuration to the SDK logger and tracer.

    Args:
        config: Telemetry configuration. ``enabled=False`` installs a no-op
            tracer; ``trace_requests=False`` skips request spans only.
    """
    global _tracer, _logger, _trace_requests

    _trace_requests = config.trace_requests
    _logger = _build_logger(config.service_name, config.log_level)

    if not config.enabled:
        _tracer = trace.NoOpTracer()
    else:
        _tracer = trace.get_tracer(config.service_name, SDK_VERSION)


@contextmanager
def trace_operation(
    name: str,
    *,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """Run the enclosed block inside a span named ``name``.

    Yields a non-recording span when request tracing is switched off.
    Exceptions are recorded on the span and re-raised.
    """
    if not _trace_requests:
        yield trace.INVALID_SPAN
        return

    with get_tracer().start_as_current_span(name) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)
        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR, str(e)))
            span.record_exception(e)
            raise
