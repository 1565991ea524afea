"""String helpers for rendering values to editor clients."""

from __future__ import annotations

from typing import Any, Optional, Protocol, TypeVar

from editor_extents.runtime import telemetry


class TextSink(Protocol):
    def write(self, text: str, /) -> Any:
        ...


SinkT = TypeVar("SinkT", bound=TextSink)


def safe_stringify(value: object) -> str:
    """Return ``str(value)``, or a placeholder when the conversion raises."""

    try:
        return str(value)
    except Exception as exc:
        placeholder = f"<Error converting property value to string - {_describe(exc)}>"
        try:
            telemetry.record_event(
                "text.stringify_failed",
                level="debug",
                data={"type": type(value).__name__, "error": type(exc).__name__},
                logger_name="editor_extents.text",
            )
        except Exception:
            pass  # a broken log sink must not surface here
        return placeholder


def _describe(exc: Exception) -> str:
    try:
        return str(exc)
    except Exception:
        return type(exc).__name__


def append_line_lf(builder: SinkT, text: Optional[str] = None) -> SinkT:
    """Write ``text`` and a bare ``\\n`` to ``builder``; returns ``builder``.

    Clients that mis-render CRLF get LF regardless of the host platform.
    """

    if text:
        builder.write(text)
    builder.write("\n")
    return builder


__all__ = ["TextSink", "append_line_lf", "safe_stringify"]
