from __future__ import annotations

"""Simple reusable helper functions.

These helpers are side-effect-free and contain no disk I/O; they can be used
across all layers of the converter.
"""

from typing import Sequence
import re

from lxml import etree as ET

__all__ = [
    "sanitize_file_name",
    "to_base36",
    "convert_to_html_color",
    "format_alpha",
    "xml_to_string",
]

_UNSAFE_CHARS = re.compile(r"[@'\"\\/\b\f\n\r\t$%*:?<>|]")
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def sanitize_file_name(base_name: str) -> str:
    """Replace characters that are unsafe in file names with ``_``."""
    return _UNSAFE_CHARS.sub("_", base_name)


def to_base36(value: int) -> str:
    """Return the lower-case base-36 representation of a non-negative int."""
    if value < 0:
        raise ValueError("to_base36 expects a non-negative integer")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def convert_to_html_color(rgba: Sequence[int], including_alpha: bool = False) -> str:
    """Format an RGBA sequence as ``#rrggbb`` (or ``#aarrggbb``).

    >>> convert_to_html_color((255, 0, 16, 128))
    '#ff0010'
    >>> convert_to_html_color((255, 0, 16, 128), including_alpha=True)
    '#80ff0010'
    """
    channels = list(rgba[:3])
    if including_alpha:
        channels.insert(0, rgba[3])
    return "#" + "".join(f"{int(c):02x}" for c in channels)


def format_alpha(opacity: int) -> str:
    """Return *opacity* (0-255) as a 0-1 fraction with two decimals."""
    return f"{opacity / 255:.2f}"


def xml_to_string(element: ET._Element) -> str:
    """Serialise *element* as a pretty-printed UTF-8 XML document string."""
    xml_bytes = ET.tostring(
        element,
        pretty_print=True,
        xml_declaration=True,
        encoding="UTF-8",
    )
    return xml_bytes.decode("utf-8")
