from __future__ import annotations

"""Per-run conversion context.

Every translator call receives the context explicitly, so two conversions
running in the same process never share a content store.
"""

from dataclasses import dataclass, field

from psd2fgui.core.models import ConvertOptions
from psd2fgui.core.naming import DEFAULT_CONVENTIONS, NamingConventions
from psd2fgui.core.package import UIPackage

__all__ = ["ConversionContext"]


@dataclass
class ConversionContext:
    """State shared by the translator, component builder and button assembler.

    Attributes
    ----------
    package
        Content store receiving every image and component of the run.
    options
        Caller options (font suppression, packing).
    conventions
        Layer naming conventions used for classification.
    """

    package: UIPackage
    options: ConvertOptions = field(default_factory=ConvertOptions)
    conventions: NamingConventions = DEFAULT_CONVENTIONS

    @classmethod
    def for_build(cls, build_id: str, options: ConvertOptions | None = None,
                  conventions: NamingConventions | None = None) -> "ConversionContext":
        return cls(
            package=UIPackage(build_id),
            options=options or ConvertOptions(),
            conventions=conventions or DEFAULT_CONVENTIONS,
        )
