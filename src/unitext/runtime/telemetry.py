"""Telelog-backed logging for text operations.

``get_logger`` hands out cached loggers, ``record_failure`` reports a failed
conversion, and ``operation_span`` profiles a single ``MutableText`` write,
attaching its arguments and, when it raises, the failing offset or needle.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "UNITEXT_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "unitext")
COMPONENT = "mutable_text"
MAX_ARGUMENT_LENGTH = 64

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def build_config() -> Any:
    """Config from ``UNITEXT_LOG_LEVEL``, ``UNITEXT_LOG_FILE`` and
    ``UNITEXT_DISABLE_CONSOLE``; text operations log quietly by default."""

    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    quiet = (_env("DISABLE_CONSOLE") or "").strip().lower() in {"1", "true", "yes"}
    config.with_console_output(not quiet)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(config: Optional[Any] = None) -> None:
    """Adopt ``config`` (or rebuild from the environment) and drop cached loggers."""

    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = build_config() if config is None else config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = build_config()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def describe(value: Any) -> str:
    """Render an operation argument for log context, clipped to a fixed width."""

    if isinstance(value, (bytes, bytearray)):
        rendered = bytes(value).hex()
    elif isinstance(value, str):
        rendered = value
    else:
        rendered = repr(value)
    if len(rendered) > MAX_ARGUMENT_LENGTH:
        rendered = rendered[: MAX_ARGUMENT_LENGTH - 3] + "..."
    return rendered


def error_details(error: BaseException) -> Dict[str, str]:
    """Error kind and message plus whichever of offset/needle/source it carries."""

    details = {"error": type(error).__name__, "reason": str(error)}
    for attribute in ("offset", "needle", "source"):
        if hasattr(error, attribute):
            details[attribute] = describe(getattr(error, attribute))
    return details


def _emit(log: Any, message: str, payload: Mapping[str, str]) -> None:
    with_data = getattr(log, "debug_with", None)
    if with_data is not None:
        with_data(message, list(payload.items()))
    else:
        log.debug(f"{message} {dict(payload)}")


def record_failure(
    operation: str, error: BaseException, *, logger_name: Optional[str] = None
) -> None:
    _emit(get_logger(logger_name), f"text::{operation}::failed", error_details(error))


@dataclass
class OperationSpan:
    """Handle yielded by ``operation_span``."""

    logger: Any
    operation: str
    arguments: Dict[str, str] = field(default_factory=dict)

    def note(self, key: str, value: Any) -> None:
        self.arguments[key] = describe(value)

    def fail(self, error: BaseException) -> None:
        payload = {"operation": self.operation, **self.arguments}
        payload.update(error_details(error))
        _emit(self.logger, "span::fail", payload)


@contextmanager
def operation_span(
    operation: str,
    *,
    arguments: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[OperationSpan]:
    """Profile one text operation as part of the ``mutable_text`` component.

    ``arguments`` are pushed as logger context for the duration of the block.
    An exception is reported on the span and re-raised unchanged.
    """

    log = get_logger(logger_name)
    described = {key: describe(value) for key, value in (arguments or {}).items()}
    for key, value in described.items():
        log.add_context(key, value)

    handle = OperationSpan(logger=log, operation=operation, arguments=dict(described))
    try:
        with log.track_component(COMPONENT), log.profile(f"text::{operation}"):
            try:
                yield handle
            except Exception as exc:
                handle.fail(exc)
                raise
    finally:
        for key in described:
            log.remove_context(key)


__all__ = [
    "OperationSpan",
    "build_config",
    "configure",
    "describe",
    "error_details",
    "get_logger",
    "operation_span",
    "record_failure",
]
