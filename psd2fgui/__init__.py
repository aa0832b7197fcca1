"""Top-level package of psd2fgui.

Converts layered PSD documents into FairyGUI packages. Front-ends (CLI,
scripts) should only depend on the public API exposed here rather than
importing internal modules directly.
"""

from .core.models import ConversionResult, ConvertOptions, DocumentNode
from .core.services import ConversionService

__all__: list[str] = [
    "ConversionResult",
    "ConversionService",
    "ConvertOptions",
    "DocumentNode",
]
