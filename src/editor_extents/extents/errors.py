"""Errors raised by extent helpers."""

from __future__ import annotations


class ExtentArgumentError(ValueError):
    """Raised when a helper receives a missing or unsupported argument."""

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument
