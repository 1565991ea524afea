"""Runtime services shared across editor_extents."""

from . import telemetry

__all__ = ["telemetry"]
