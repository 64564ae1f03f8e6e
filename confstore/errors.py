"""Exceptions raised by the configuration store."""

from __future__ import annotations

from pathlib import Path


class StoreError(RuntimeError):
    """Base class for errors raised by :mod:`confstore`."""


class ApplicationNameError(StoreError, ValueError):
    """Raised when a store is used without a valid application name."""


class UnknownFormatError(StoreError, KeyError):
    """Raised when no codec is registered for a file extension."""

    def __init__(self, extension: str, available: list[str] | None = None) -> None:
        self.extension = extension
        self.available = list(available or [])
        label = f"'.{extension}'" if extension else "files without an extension"
        message = f"Unknown configuration format for {label}."
        if self.available:
            message += f" Available: {', '.join(self.available)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])


class CodecError(StoreError, ValueError):
    """Raised when settings cannot be encoded to or decoded from a file."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = str(path)
        super().__init__(f"{self.path}: {message}")
