from __future__ import annotations

"""Exception classes raised by the conversion pipeline.

A conversion either produces a complete package or fails as a whole; none
of these errors are recovered from inside the core.
"""

from typing import Optional

__all__ = [
    "Psd2FguiError",
    "MalformedNodeError",
    "DocumentReadError",
    "PackageWriteError",
]


class Psd2FguiError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.cause = cause


class MalformedNodeError(Psd2FguiError):
    """Raised when a document node lacks its name or geometry.

    This points at a defect in the document reader, not in the user's file,
    so the run is aborted on the first occurrence.
    """

    def __init__(self, node_path: str, detail: str) -> None:
        self.node_path = node_path
        self.detail = detail
        super().__init__(f"Malformed node '{node_path}': {detail}")


class DocumentReadError(Psd2FguiError):
    """Raised when the layered document cannot be opened or parsed."""

    def __init__(self, file_path: str, cause: Optional[Exception] = None) -> None:
        self.file_path = file_path
        message = f"Cannot read document '{file_path}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, cause)


class PackageWriteError(Psd2FguiError):
    """Raised when an asset, descriptor or archive cannot be written."""

    def __init__(self, target: str, cause: Optional[Exception] = None) -> None:
        self.target = target
        message = f"Failed to write '{target}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, cause)
