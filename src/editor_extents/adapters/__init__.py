"""Host adapters translating editor widget state into extents."""

from .textual import Location, position_from_location, span_from_selection

__all__ = ["Location", "position_from_location", "span_from_selection"]
