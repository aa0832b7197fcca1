from __future__ import annotations

"""Button assembly.

A button group holds up to four state layers, recognised by name suffix
(``@up``, ``@down``, ``@over``, ``@selectedOver``) anywhere in its subtree.
The generated component carries a ``button`` controller with one page per
state and binds each state layer to its pages through ``gearDisplay``.
States without a layer of their own are shown through another layer's
page: ``selectedOver`` borrows ``down`` when there is one, everything else
borrows ``up``.
"""

from typing import Dict, List, Optional, Sequence, Tuple
import logging

from lxml import etree as ET

from psd2fgui.core.context import ConversionContext
from psd2fgui.core.converter.translator import build_display_list, check_node
from psd2fgui.core.models import DocumentNode, ResourceEntry
from psd2fgui.core.naming import ButtonState, GroupKind, SlotRole, classify_group, slot_role
from psd2fgui.core.utils import xml_to_string

logger = logging.getLogger(__name__)

__all__ = [
    "BUTTON_CONTROLLER",
    "find_state_layers",
    "resolve_button_pages",
    "create_button",
]

BUTTON_CONTROLLER = "button"


def find_state_layers(node: DocumentNode, ctx: ConversionContext) -> List[Optional[DocumentNode]]:
    """Return the layer found for each :class:`ButtonState`, or ``None``."""
    layers: List[Optional[DocumentNode]] = [None] * len(ButtonState)
    suffixes = ctx.conventions.button_state_suffixes
    for descendant in node.descendants():
        check_node(descendant)
        for state in ButtonState:
            if suffixes[state.value] in descendant.name:
                layers[state.value] = descendant
    return layers


def resolve_button_pages(found: Sequence[bool]) -> List[int]:
    """Map every state to the page index of the layer that displays it.

    >>> resolve_button_pages([True, True, False, False])
    [0, 1, 0, 1]
    """
    pages = []
    for state in ButtonState:
        if found[state.value]:
            pages.append(state.value)
        elif state is ButtonState.SELECTED_OVER and found[ButtonState.DOWN.value]:
            pages.append(ButtonState.DOWN.value)
        else:
            pages.append(ButtonState.UP.value)
    return pages


class _ButtonObserver:
    """Binds state layers to the controller and lifts title/icon content."""

    def __init__(self, layers: Sequence[Optional[DocumentNode]], pages: Sequence[int],
                 ctx: ConversionContext) -> None:
        self._layers = layers
        self._gear_pages: Dict[int, str] = {}
        for index in range(len(layers)):
            self._gear_pages[index] = ",".join(
                str(state) for state, owner in enumerate(pages) if owner == index
            )
        self._ctx = ctx

    def __call__(self, element: ET._Element, node: DocumentNode) -> Dict[str, str]:
        for index, layer in enumerate(self._layers):
            if layer is node:
                gear = ET.SubElement(element, "gearDisplay")
                gear.set("controller", BUTTON_CONTROLLER)
                gear.set("pages", self._gear_pages[index])
                break

        role = slot_role(node.name, self._ctx.conventions)
        if role is SlotRole.TITLE and "text" in element.attrib:
            return {"title": element.attrib.pop("text")}
        if role is SlotRole.ICON and "url" in element.attrib:
            return {"icon": element.attrib.pop("url")}
        return {}


def create_button(node: DocumentNode, ctx: ConversionContext) -> Tuple[ResourceEntry, Dict[str, str]]:
    """Build a button component from *node* and register it.

    Returns the registered resource and the instance properties the
    referencing element must carry (``title``, ``icon``, ``checked``).
    """
    check_node(node)
    component = ET.Element("component")
    component.set("size", f"{node.width},{node.height}")
    component.set("extention", "Button")

    layers = find_state_layers(node, ctx)
    found = [layer is not None for layer in layers]
    pages = resolve_button_pages(found)

    controller = ET.SubElement(component, "controller")
    controller.set("name", BUTTON_CONTROLLER)
    controller.set("pages", ",".join(f"{s.value},{s.page_name}" for s in ButtonState))

    display_list = ET.SubElement(component, "displayList")
    inst_props = build_display_list(node, display_list, ctx, _ButtonObserver(layers, pages, ctx))

    extension = ET.SubElement(component, "Button")
    kind = classify_group(node.name, ctx.conventions)
    if kind is GroupKind.CHECK_BUTTON:
        extension.set("mode", "Check")
        inst_props["checked"] = "true"
    elif kind is GroupKind.RADIO_BUTTON:
        extension.set("mode", "Radio")

    state_count = sum(found)
    if state_count == 1:
        extension.set("downEffect", "scale")
        extension.set("downEffectValue", "1.1")

    logger.debug("Button '%s': %d state layer(s), pages=%s", node.name, state_count, pages)
    item = ctx.package.register_component(xml_to_string(component), f"{node.name}.xml")
    return item, inst_props
