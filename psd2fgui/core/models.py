from __future__ import annotations

"""Shared data structures used across the psd2fgui core.

This module is intentionally free of I/O code so that the contained objects
can be reused in any context (unit-tests, CLI, other front-ends).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

__all__ = [
    "TextRun",
    "RasterImage",
    "DocumentNode",
    "ResourceEntry",
    "ConvertOptions",
    "ConversionResult",
]


@dataclass(frozen=True)
class TextRun:
    """First style run of a text layer.

    Attributes
    ----------
    value
        Text content.
    alignment
        One of ``left``, ``right``, ``center`` or ``justify``.
    font
        Font family (PostScript name as stored in the document).
    size
        Font size in document units.
    color
        RGBA tuple, each channel 0-255.
    """

    value: str
    alignment: str = "left"
    font: str = ""
    size: float = 12
    color: Tuple[int, int, int, int] = (0, 0, 0, 255)


@dataclass(frozen=True)
class RasterImage:
    """Raw pixel buffer of a layer, in a PIL-compatible *mode*."""

    width: int
    height: int
    mode: str
    pixels: bytes


@dataclass
class DocumentNode:
    """One layer or group of the layered document.

    ``children`` are stored back-to-front, the way the document stores them.
    Geometry fields are ``None`` only when the reader failed to provide them;
    the translator rejects such nodes.
    """

    name: Optional[str]
    left: Optional[int] = 0
    top: Optional[int] = 0
    width: Optional[int] = 0
    height: Optional[int] = 0
    opacity: int = 255
    is_group: bool = False
    children: List["DocumentNode"] = field(default_factory=list)
    text: Optional[TextRun] = None
    image: Optional[RasterImage] = None

    @property
    def is_empty(self) -> bool:
        """Return True when the layer carries no visible pixels."""
        if self.image is None or not self.image.pixels:
            return True
        return not self.width or not self.height

    def descendants(self) -> List["DocumentNode"]:
        """Return every node below this one, depth-first in document order."""
        result: List[DocumentNode] = []
        for child in self.children:
            result.append(child)
            result.extend(child.descendants())
        return result


@dataclass
class ResourceEntry:
    """A deduplicated unit of output, listed in the package manifest."""

    type: str  # "image" | "component"
    id: str
    name: str
    data: Any
    scale: Optional[str] = None
    scale9_grid: Optional[str] = None


@dataclass(frozen=True)
class ConvertOptions:
    """Caller options for one conversion run."""

    ignore_font: bool = False
    no_pack: bool = False


@dataclass
class ConversionResult:
    """Outcome of :meth:`ConversionService.convert`."""

    build_id: str
    package_id: str
    output_path: Path
    resources: List[ResourceEntry] = field(default_factory=list)
