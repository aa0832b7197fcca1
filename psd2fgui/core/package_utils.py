"""Package utilities for FairyGUI package output.

These utilities handle the final stages of a conversion, once the node walk
has completed and the resource list is final:
- Building the ``package.xml`` manifest
- Writing images (PNG) and component descriptors (XML) to disk
- Zipping the package folder into a ``.fairypackage`` archive
"""

from __future__ import annotations

import logging
import os
import zipfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List

from lxml import etree as ET
from PIL import Image

from psd2fgui.core.exceptions import PackageWriteError
from psd2fgui.core.models import RasterImage, ResourceEntry
from psd2fgui.core.package import UIPackage

logger = logging.getLogger(__name__)

__all__ = [
    "MANIFEST_FILE_NAME",
    "build_manifest",
    "save_fairy_package",
    "write_archive",
]

MANIFEST_FILE_NAME = "package.xml"


def build_manifest(package: UIPackage) -> ET._Element:
    """Return the ``packageDescription`` element listing every resource."""
    pkg_desc = ET.Element("packageDescription")
    pkg_desc.set("id", package.id)
    resources_node = ET.SubElement(pkg_desc, "resources")
    for item in package.resources:
        res_node = ET.SubElement(resources_node, item.type)
        res_node.set("id", item.id)
        res_node.set("name", item.name)
        res_node.set("path", "/")
        if item.type == "image" and item.scale9_grid:
            res_node.set("scale", item.scale or "9grid")
            res_node.set("scale9Grid", item.scale9_grid)
    return pkg_desc


def _save_png(image: RasterImage, path: str) -> None:
    Image.frombytes(image.mode, (image.width, image.height), image.pixels).save(path, "PNG")


def _save_text(text: str, path: str) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(text)


def _writer_for(item: ResourceEntry, path: str) -> Callable[[], None]:
    if item.type == "image":
        return lambda: _save_png(item.data, path)
    return lambda: _save_text(item.data, path)


def save_fairy_package(package: UIPackage, output_dir: str | Path, *, max_workers: int = 4) -> List[str]:
    """Write every resource of *package* plus ``package.xml`` to *output_dir*.

    Writes run concurrently; all of them are awaited and the first failure
    is re-raised as :class:`PackageWriteError`. Returns the written file
    names in manifest order.
    """
    output_dir = str(output_dir)
    os.makedirs(output_dir, exist_ok=True)

    manifest_xml = ET.tostring(build_manifest(package), pretty_print=True,
                               xml_declaration=True, encoding="UTF-8").decode("utf-8")
    jobs = [(item.name, _writer_for(item, os.path.join(output_dir, item.name)))
            for item in package.resources]
    manifest_path = os.path.join(output_dir, MANIFEST_FILE_NAME)
    jobs.append((MANIFEST_FILE_NAME, lambda: _save_text(manifest_xml, manifest_path)))

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [(name, pool.submit(job)) for name, job in jobs]
    errors = []
    for name, future in futures:
        exc = future.exception()
        if exc is not None:
            logger.error("I/O FAIL: write %s", name, exc_info=exc)
            errors.append((name, exc))
    if errors:
        name, exc = errors[0]
        raise PackageWriteError(os.path.join(output_dir, name), exc) from exc

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("I/O: wrote %d file(s) to %s", len(jobs), output_dir)
    return [name for name, _ in jobs]


def write_archive(source_dir: str | Path, output_file: str | Path) -> Path:
    """Zip the files directly under *source_dir* into *output_file*."""
    source_dir = Path(source_dir)
    output_file = Path(output_file)
    try:
        with zipfile.ZipFile(output_file, "w", zipfile.ZIP_DEFLATED) as zf:
            for file_path in sorted(source_dir.iterdir()):
                if file_path.is_file():
                    zf.write(file_path, file_path.name)
    except (OSError, zipfile.BadZipFile) as exc:
        logger.error("I/O FAIL: archive %s", output_file, exc_info=True)
        raise PackageWriteError(str(output_file), exc) from exc
    logger.debug("I/O: archive %s size_bytes=%d", output_file, output_file.stat().st_size)
    return output_file
