"""Telemetry helpers for editor_extents, backed by telelog.

Public surface:

``configure(...)`` -- adopt an explicit telelog config or rebuild from env
``get_logger(name)`` -- cached, configured logger lookup
``record_event(name, ...)`` -- structured event at a chosen level
``span(name, ...)`` -- profiled block with optional component tracking
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "EDITOR_EXTENTS_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "editor_extents")
DEFAULT_LOG_LEVEL = "WARNING"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)
    except Exception as exc:
        return f"<unprintable {type(value).__name__}: {exc}>"


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def resolve_level() -> str:
    return (_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def build_config() -> Any:
    """Build a ``telelog.Config`` from ``EDITOR_EXTENTS_*`` variables."""

    config = tl.Config()
    config.with_min_level(resolve_level())
    config.with_console_output(not _env_flag("DISABLE_CONSOLE", False))

    if _env_flag("LOG_JSON", False):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    return config


def configure(*, config: Optional[Any] = None) -> None:
    """Adopt ``config``, or rebuild it from the environment when omitted.

    Cached loggers are dropped so the next lookup picks up the new settings.
    """

    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = config if config is not None else build_config()
    _LOGGER_CACHE.clear()


def _ensure_config() -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = build_config()
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ensure_config()
        )
    return _LOGGER_CACHE[logger_name]


def _resolve_level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_attr = getattr(logger, f"{name}_with", None)
    if with_attr is not None:
        return with_attr, True

    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    method, accepts_data = _resolve_level_method(log, level)
    message = f"event::{name}"
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for attaching metadata mid-block."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, "reason": reason, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        method, accepts = _resolve_level_method(self.logger, "error")
        if accepts:
            method("span::fail", _format_pairs(payload))
        else:
            method(f"span::fail {payload}")


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and optionally track it as a telelog component.

    ``component=True`` reuses ``name`` as the component id; a string sets it
    explicitly. ``metadata`` is pushed as logger context for the duration of
    the block and removed afterwards. Exceptions are logged via
    ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (
        component if isinstance(component, str) else None
    )

    context_keys = []
    metadata_payload: Dict[str, str] = {}
    for key, value in (metadata or {}).items():
        serialized = _stringify(value)
        metadata_payload[key] = serialized
        log.add_context(key, serialized)
        context_keys.append(key)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=metadata_payload,
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


configure()

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "ENV_PREFIX",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "resolve_level",
    "span",
]
