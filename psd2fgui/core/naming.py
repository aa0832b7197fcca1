from __future__ import annotations

"""Layer naming conventions.

Designers mark the role of a group through its name prefix (``Com...`` for
a component, ``Button...`` for a button) and the role of a layer inside a
button or component through a marker substring (``@title``, ``@icon``).
Group kind and slot role are independent classifications.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

__all__ = [
    "GroupKind",
    "SlotRole",
    "ButtonState",
    "NamingConventions",
    "classify_group",
    "slot_role",
]


class GroupKind(Enum):
    PLAIN_GROUP = "plain"
    COMPONENT = "component"
    COMMON_BUTTON = "button"
    CHECK_BUTTON = "check"
    RADIO_BUTTON = "radio"

    @property
    def is_button(self) -> bool:
        return self in (GroupKind.COMMON_BUTTON, GroupKind.CHECK_BUTTON, GroupKind.RADIO_BUTTON)


class SlotRole(Enum):
    NONE = ""
    TITLE = "title"
    ICON = "icon"


class ButtonState(Enum):
    """Button controller pages, in page-index order."""

    UP = 0
    DOWN = 1
    OVER = 2
    SELECTED_OVER = 3

    @property
    def page_name(self) -> str:
        return ("up", "down", "over", "selectedOver")[self.value]


@dataclass(frozen=True)
class NamingConventions:
    component_prefix: str = "Com"
    common_button_prefix: str = "Button"
    check_button_prefix: str = "CheckButton"
    radio_button_prefix: str = "RadioButton"
    title_marker: str = "@title"
    icon_marker: str = "@icon"
    button_state_suffixes: Tuple[str, str, str, str] = field(
        default=("@up", "@down", "@over", "@selectedOver")
    )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "NamingConventions":
        """Build conventions from the ``naming`` configuration section.

        Unknown keys are ignored; missing keys keep their defaults.
        """
        values: Dict[str, Any] = {}
        for key in cls.__dataclass_fields__:
            if key in config and config[key] is not None:
                values[key] = config[key]
        suffixes = values.get("button_state_suffixes")
        if suffixes is not None:
            suffixes = tuple(str(s) for s in suffixes)
            if len(suffixes) != len(ButtonState):
                raise ValueError(
                    f"button_state_suffixes needs {len(ButtonState)} entries, got {len(suffixes)}"
                )
            values["button_state_suffixes"] = suffixes
        return cls(**values)


DEFAULT_CONVENTIONS = NamingConventions()


def classify_group(name: str, conventions: NamingConventions = DEFAULT_CONVENTIONS) -> GroupKind:
    """Return the kind of a group from its name prefix.

    Check and radio prefixes are tested before the generic button prefix.
    """
    if name.startswith(conventions.component_prefix):
        return GroupKind.COMPONENT
    if name.startswith(conventions.check_button_prefix):
        return GroupKind.CHECK_BUTTON
    if name.startswith(conventions.radio_button_prefix):
        return GroupKind.RADIO_BUTTON
    if name.startswith(conventions.common_button_prefix):
        return GroupKind.COMMON_BUTTON
    return GroupKind.PLAIN_GROUP


def slot_role(name: str, conventions: NamingConventions = DEFAULT_CONVENTIONS) -> SlotRole:
    """Return the slot a node fills inside its button/component parent."""
    if conventions.title_marker in name:
        return SlotRole.TITLE
    if conventions.icon_marker in name:
        return SlotRole.ICON
    return SlotRole.NONE
