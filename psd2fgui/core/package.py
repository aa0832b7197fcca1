from __future__ import annotations

"""In-memory FairyGUI package: the content store of one conversion run.

Every image and component produced by the translator is registered here.
Identical content (same md5 of the pixel buffer or of the serialised
markup) collapses to a single resource, so a layer reused across the
document yields one file and one id.
"""

import hashlib
import logging
from typing import Dict, List, Optional

from psd2fgui.core.build_id import split_build_id
from psd2fgui.core.models import RasterImage, ResourceEntry
from psd2fgui.core.utils import sanitize_file_name, to_base36

logger = logging.getLogger(__name__)

__all__ = ["UIPackage"]


class UIPackage:
    """Resources of a package in first-registration order."""

    def __init__(self, build_id: str) -> None:
        self.build_id = build_id
        self.id, self.item_id_base = split_build_id(build_id)
        self.resources: List[ResourceEntry] = []
        self._next_item_index = 0
        self._by_hash: Dict[str, ResourceEntry] = {}
        self._name_counters: Dict[str, int] = {}

    def next_item_id(self) -> str:
        item_id = self.item_id_base + to_base36(self._next_item_index)
        self._next_item_index += 1
        return item_id

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register_image(self, image: RasterImage, file_name: str,
                       scale9_grid: Optional[str] = None) -> ResourceEntry:
        """Register a layer's pixel buffer as an ``image`` resource.

        The grid only applies when the pixels are new; a duplicate returns the
        stored entry as it was first registered.
        """
        if scale9_grid:
            return self._register("image", file_name, image, image.pixels,
                                  scale="9grid", scale9_grid=scale9_grid)
        return self._register("image", file_name, image, image.pixels)

    def register_component(self, xml_text: str, file_name: str) -> ResourceEntry:
        """Register serialised component markup as a ``component`` resource."""
        return self._register("component", file_name, xml_text, xml_text.encode("utf-8"))

    def _register(self, item_type: str, file_name: str, data, hash_input: bytes,
                  **attrs: Optional[str]) -> ResourceEntry:
        digest = hashlib.md5(hash_input).hexdigest()
        item = self._by_hash.get(digest)
        if item is not None:
            logger.debug("Dedup: %s '%s' reuses %s (%s)", item_type, file_name, item.id, item.name)
            return item

        item = ResourceEntry(
            type=item_type,
            id=self.next_item_id(),
            name=self._unique_file_name(file_name),
            data=data,
            **attrs,
        )
        self.resources.append(item)
        self._by_hash[digest] = item
        logger.debug("Registered %s id=%s name=%s", item_type, item.id, item.name)
        return item

    def _unique_file_name(self, file_name: str) -> str:
        i = file_name.rfind(".")
        if i == -1:
            base_name, ext = file_name, ""
        else:
            base_name, ext = file_name[:i], file_name[i:]
        base_name = sanitize_file_name(base_name)
        while True:
            used = self._name_counters.get(base_name)
            if used is None:
                self._name_counters[base_name] = 1
                break
            self._name_counters[base_name] = used + 1
            base_name = f"{base_name}_{used}"
        return base_name + ext

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    @property
    def images(self) -> List[ResourceEntry]:
        return [r for r in self.resources if r.type == "image"]

    @property
    def components(self) -> List[ResourceEntry]:
        return [r for r in self.resources if r.type == "component"]

    def __len__(self) -> int:
        return len(self.resources)
