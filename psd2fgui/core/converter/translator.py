from __future__ import annotations

"""Recursive translation of document nodes into FairyGUI markup.

A component's ``displayList`` is built front-to-back while the document
stores layers back-to-front, so children are always visited in reverse.
Plain groups produce no element of their own: their children are flattened
into the display list of the enclosing component, positioned relative to
that component's origin.
"""

from typing import Callable, Dict, Optional
import logging

from lxml import etree as ET

from psd2fgui.core.context import ConversionContext
from psd2fgui.core.exceptions import MalformedNodeError
from psd2fgui.core.models import DocumentNode, ResourceEntry
from psd2fgui.core.naming import GroupKind, SlotRole, classify_group, slot_role
from psd2fgui.core.utils import convert_to_html_color, format_alpha, xml_to_string

logger = logging.getLogger(__name__)

__all__ = [
    "ElementObserver",
    "parse_node",
    "build_display_list",
    "create_component",
    "check_node",
]

# Called for every element before it joins its display list. May decorate the
# element in place and returns instance-property overrides for the caller.
ElementObserver = Callable[[ET._Element, DocumentNode], Optional[Dict[str, str]]]

_TEXT_PADDING = 4


def check_node(node: DocumentNode) -> None:
    """Raise :class:`MalformedNodeError` if *node* lacks name or geometry."""
    if not isinstance(node.name, str):
        raise MalformedNodeError("<unnamed>", "missing layer name")
    for attr in ("left", "top", "width", "height"):
        if getattr(node, attr) is None:
            raise MalformedNodeError(node.name, f"missing {attr}")


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _start_element(tag: str, display_list: ET._Element, ctx: ConversionContext,
                   role: SlotRole) -> ET._Element:
    """Create *tag* with the ``id``/``name`` pair of the next list position."""
    element = ET.Element(tag)
    generated = f"n{len(display_list) + 1}"
    element.set("id", f"{generated}_{ctx.package.item_id_base}")
    element.set("name", role.value if role is not SlotRole.NONE else generated)
    return element


def _component_reference(node: DocumentNode, root: DocumentNode, item: ResourceEntry,
                         display_list: ET._Element, ctx: ConversionContext,
                         role: SlotRole) -> ET._Element:
    element = _start_element("component", display_list, ctx, role)
    element.set("src", item.id)
    element.set("fileName", item.name)
    element.set("xy", f"{node.left - root.left},{node.top - root.top}")
    return element


def _text_element(node: DocumentNode, root: DocumentNode, display_list: ET._Element,
                  ctx: ConversionContext, role: SlotRole) -> ET._Element:
    text = node.text
    element = _start_element("text", display_list, ctx, role)
    element.set("text", text.value)
    pad = _TEXT_PADDING
    if role is SlotRole.TITLE:
        element.set("xy", f"0,{node.top - root.top - pad}")
        element.set("size", f"{root.width},{node.height + pad * 2}")
        element.set("align", "center")
    else:
        element.set("xy", f"{node.left - root.left - pad},{node.top - root.top - pad}")
        element.set("size", f"{node.width + pad * 2},{node.height + pad * 2}")
        if text.alignment and text.alignment != "left":
            element.set("align", text.alignment)
    element.set("vAlign", "middle")
    element.set("autoSize", "none")
    if not ctx.options.ignore_font:
        element.set("font", text.font)
    element.set("fontSize", _format_number(text.size))
    element.set("color", convert_to_html_color(text.color))
    return element


def _image_element(node: DocumentNode, root: DocumentNode, display_list: ET._Element,
                   ctx: ConversionContext, role: SlotRole) -> ET._Element:
    item = ctx.package.register_image(node.image, f"{node.name}.png")
    if role is SlotRole.ICON:
        element = _start_element("loader", display_list, ctx, role)
    else:
        element = _start_element("image", display_list, ctx, role)
    element.set("xy", f"{node.left - root.left},{node.top - root.top}")
    if role is SlotRole.ICON:
        element.set("size", f"{node.width},{node.height}")
        element.set("url", f"ui://{ctx.package.id}{item.id}")
    else:
        element.set("src", item.id)
    element.set("fileName", item.name)
    return element


def parse_node(node: DocumentNode, root: DocumentNode, display_list: ET._Element,
               ctx: ConversionContext, observer: Optional[ElementObserver] = None) -> Dict[str, str]:
    """Translate *node* into *display_list*, positioned relative to *root*.

    Appends at most one element for *node* itself (plain groups append the
    elements of their children instead). Returns the instance-property
    overrides reported by *observer* for everything appended.
    """
    check_node(node)
    overrides: Dict[str, str] = {}
    role = slot_role(node.name, ctx.conventions)
    element: Optional[ET._Element] = None

    if node.is_group:
        kind = classify_group(node.name, ctx.conventions)
        if kind is GroupKind.COMPONENT:
            item = create_component(node, ctx)
            element = _component_reference(node, root, item, display_list, ctx, role)
        elif kind.is_button:
            from psd2fgui.core.converter.button import create_button

            item, inst_props = create_button(node, ctx)
            element = _component_reference(node, root, item, display_list, ctx, role)
            ET.SubElement(element, "Button", inst_props)
        else:
            for child in reversed(node.children):
                overrides.update(parse_node(child, root, display_list, ctx, observer))
            return overrides
    elif node.text is not None:
        element = _text_element(node, root, display_list, ctx, role)
    elif not node.is_empty:
        element = _image_element(node, root, display_list, ctx, role)

    if element is None:
        return overrides

    if node.opacity < 255:
        element.set("alpha", format_alpha(node.opacity))

    if observer is not None:
        overrides.update(observer(element, node) or {})

    display_list.append(element)
    return overrides


def build_display_list(node: DocumentNode, display_list: ET._Element, ctx: ConversionContext,
                       observer: Optional[ElementObserver] = None) -> Dict[str, str]:
    """Translate the children of *node* with *node* as coordinate origin."""
    overrides: Dict[str, str] = {}
    for child in reversed(node.children):
        overrides.update(parse_node(child, node, display_list, ctx, observer))
    return overrides


def create_component(node: DocumentNode, ctx: ConversionContext,
                     name: Optional[str] = None) -> ResourceEntry:
    """Build *node* as a self-contained component and register it.

    *name* replaces the node name in the file name; the document root uses
    it to be named after the source file.
    """
    check_node(node)
    component = ET.Element("component")
    component.set("size", f"{node.width},{node.height}")
    display_list = ET.SubElement(component, "displayList")
    build_display_list(node, display_list, ctx)

    file_name = f"{name or node.name}.xml"
    logger.debug("Component '%s': %d element(s)", file_name, len(display_list))
    return ctx.package.register_component(xml_to_string(component), file_name)
