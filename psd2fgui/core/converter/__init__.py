from __future__ import annotations

"""Layered document to FairyGUI markup conversion.

Key modules:
- translator: recursive node walk and component building
- button: multi-state button assembly
"""

from .translator import (
    ElementObserver,
    build_display_list,
    check_node,
    create_component,
    parse_node,
)
from .button import create_button, find_state_layers, resolve_button_pages

__all__ = [
    "ElementObserver",
    "build_display_list",
    "check_node",
    "create_component",
    "parse_node",
    "create_button",
    "find_state_layers",
    "resolve_button_pages",
]
