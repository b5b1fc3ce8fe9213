"""Structured logging helpers with correlation IDs.

Module-level loggers carry a ``NullHandler`` so the library stays silent until
an application configures handlers (for example with :func:`setup_logging`).
Every record emitted through :class:`LoggerAdapter` carries ``operation`` and
``status`` fields plus the active correlation ID, if any.

Examples
--------
>>> from namedoc.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.debug("Built model", extra={"operation": "build_documentation", "status": "success"})
"""

from __future__ import annotations

import contextvars
import json
import logging
import sys
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping
    from types import TracebackType

__all__ = [
    "CorrelationContext",
    "JsonFormatter",
    "LoggerAdapter",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
    "setup_logging",
    "with_fields",
]

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "namedoc_correlation_id", default=None
)

_STRUCTURED_FIELDS = ("correlation_id", "operation", "status", "symbol_kind", "symbol_name")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    The payload carries ``ts``, ``level``, ``name`` and ``message`` plus any
    structured fields supplied through ``extra`` or the correlation context.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Return ``record`` encoded as a JSON string."""
        data: dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S") + "Z",
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for field in _STRUCTURED_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                data[field] = value
        if "correlation_id" not in data:
            ctx_correlation_id = _correlation_id.get()
            if ctx_correlation_id is not None:
                data["correlation_id"] = ctx_correlation_id
        for key, value in record.__dict__.items():
            if (
                key not in _RECORD_ATTRIBUTES
                and key not in data
                and not key.startswith("_")
                and isinstance(value, str | int | float | bool | list | dict)
            ):
                data[key] = value
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


class LoggerAdapter(logging.LoggerAdapter):  # type: ignore[type-arg]
    """Logger adapter that injects structured context fields.

    Fields bound on the adapter are merged underneath the per-call ``extra``
    mapping, the correlation ID comes from the context variable, and
    ``operation``/``status`` default from the call when absent.
    """

    logger: logging.Logger

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Merge bound fields and the correlation ID into ``kwargs['extra']``."""
        extra = dict(kwargs.get("extra") or {})
        for key, value in (self.extra or {}).items():
            extra.setdefault(key, value)
        if "correlation_id" not in extra:
            ctx_correlation_id = _correlation_id.get()
            if ctx_correlation_id is not None:
                extra["correlation_id"] = ctx_correlation_id
        extra.setdefault("operation", "unknown")
        extra.setdefault("status", "success")
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> LoggerAdapter:
    """Return a structured logger adapter for ``name``.

    A ``NullHandler`` is attached when the underlying logger has no handlers so
    library use never prints "no handler" warnings.

    Parameters
    ----------
    name : str
        Logger name, typically ``__name__``.

    Returns
    -------
    LoggerAdapter
        Adapter injecting structured fields into every record.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return LoggerAdapter(logger, {})


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the root logger to emit JSON lines on stdout."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)


def set_correlation_id(correlation_id: str | None) -> None:
    """Set (or clear, with ``None``) the correlation ID for the current context."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> str | None:
    """Return the correlation ID of the current context, if any."""
    return _correlation_id.get()


class CorrelationContext:
    """Context manager that sets a correlation ID and restores the previous one.

    Parameters
    ----------
    correlation_id : str | None
        Correlation ID active inside the block.

    Examples
    --------
    >>> with CorrelationContext("req-123"):
    ...     assert get_correlation_id() == "req-123"
    """

    def __init__(self, correlation_id: str | None) -> None:
        self.correlation_id = correlation_id
        self._token: contextvars.Token[str | None] | None = None

    def __enter__(self) -> Self:
        self._token = _correlation_id.set(self.correlation_id)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _correlation_id.reset(self._token)
        del exc_type, exc_val, exc_tb


class _WithFieldsContext(AbstractContextManager[LoggerAdapter]):
    def __init__(
        self, logger: logging.Logger | LoggerAdapter, fields: Mapping[str, object]
    ) -> None:
        self._logger = logger
        self._fields = dict(fields)
        self._token: contextvars.Token[str | None] | None = None

    def __enter__(self) -> LoggerAdapter:
        base_logger = (
            self._logger.logger if isinstance(self._logger, LoggerAdapter) else self._logger
        )
        correlation_id = self._fields.get("correlation_id")
        if isinstance(correlation_id, str):
            self._token = _correlation_id.set(correlation_id)
        return LoggerAdapter(base_logger, dict(self._fields))

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _correlation_id.reset(self._token)
        del exc_type, exc_value, exc_tb


def with_fields(
    logger: logging.Logger | LoggerAdapter,
    **fields: object,
) -> AbstractContextManager[LoggerAdapter]:
    """Bind structured ``fields`` to every record logged inside the block.

    A ``correlation_id`` field is also published to the correlation context for
    the duration of the block.

    Examples
    --------
    >>> logger = get_logger(__name__)
    >>> with with_fields(logger, correlation_id="req-1", operation="render") as log:
    ...     log.debug("Rendering entries")
    """
    return _WithFieldsContext(logger, fields)
