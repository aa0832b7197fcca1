from __future__ import annotations

"""Reading PSD files into :class:`DocumentNode` trees.

Built on *psd-tools*. Only the attributes the converter consumes are
extracted: name, bounding box, opacity, the first text style run and the
raw RGBA pixels of leaf layers.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import logging

from psd_tools import PSDImage
from psd_tools.api.layers import Layer

from psd2fgui.core.exceptions import DocumentReadError
from psd2fgui.core.models import DocumentNode, RasterImage, TextRun

logger = logging.getLogger(__name__)

__all__ = ["read_psd", "layer_to_node", "extract_text_run"]

# ParagraphSheet Justification codes
_JUSTIFICATION = {0: "left", 1: "right", 2: "center"}


def read_psd(psd_path: str | Path, name: Optional[str] = None) -> DocumentNode:
    """Open *psd_path* and return its root node.

    The root spans the whole canvas at the origin and is named *name*
    (default: the file stem).
    """
    psd_path = Path(psd_path)
    try:
        psd = PSDImage.open(psd_path)
    except Exception as exc:
        # psd-tools surfaces corrupt input as assorted low-level errors
        raise DocumentReadError(str(psd_path), exc) from exc

    logger.debug("PSD %s: %dx%d, %d top-level layer(s)", psd_path, psd.width, psd.height, len(psd))
    root = DocumentNode(
        name=name or psd_path.stem,
        left=0,
        top=0,
        width=psd.width,
        height=psd.height,
        is_group=True,
        children=[layer_to_node(layer) for layer in psd],
    )
    return root


def layer_to_node(layer: Layer) -> DocumentNode:
    """Convert one psd-tools layer (recursively for groups)."""
    left, top, right, bottom = layer.bbox
    node = DocumentNode(
        name=layer.name,
        left=left,
        top=top,
        width=right - left,
        height=bottom - top,
        opacity=layer.opacity,
        is_group=layer.is_group(),
    )
    if node.is_group:
        node.children = [layer_to_node(child) for child in layer]
        return node

    if layer.kind == "type":
        node.text = extract_text_run(layer)
    if node.text is None and node.width and node.height:
        node.image = _extract_pixels(layer)
    return node


def _extract_pixels(layer: Layer) -> Optional[RasterImage]:
    image = layer.topil()
    if image is None:
        return None
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return RasterImage(width=image.width, height=image.height, mode=image.mode, pixels=image.tobytes())


def _first_run(engine: Dict[str, Any], key: str) -> Dict[str, Any]:
    run_array = engine.get(key, {}).get("RunArray", [{}])
    return run_array[0] if run_array else {}


def _color_from_values(values: Optional[List[float]]) -> Tuple[int, int, int, int]:
    # FillColor values are ARGB floats in 0..1
    if not values or len(values) < 4:
        return (0, 0, 0, 255)
    a, r, g, b = (max(0, min(255, round(float(v) * 255))) for v in values[:4])
    return (r, g, b, a)


def extract_text_run(layer: Layer) -> Optional[TextRun]:
    """Return the first style run of a type layer, or ``None``."""
    text = layer.text
    if text is None:
        return None

    engine = layer.engine_dict or {}
    style = _first_run(engine, "StyleRun").get("StyleSheet", {}).get("StyleSheetData", {})
    paragraph = _first_run(engine, "ParagraphRun").get("ParagraphSheet", {}).get("Properties", {})

    font = ""
    font_set = (layer.resource_dict or {}).get("FontSet", [])
    font_index = int(style.get("Font", 0))
    if 0 <= font_index < len(font_set):
        font = str(font_set[font_index].get("Name", "")).strip("'\"")

    # Raw style-run size; the layer transform is not applied
    size = float(style.get("FontSize", 12))

    justification = int(paragraph.get("Justification", 0))
    return TextRun(
        value=str(text),
        alignment=_JUSTIFICATION.get(justification, "justify"),
        font=font,
        size=round(size, 2),
        color=_color_from_values(style.get("FillColor", {}).get("Values")),
    )
