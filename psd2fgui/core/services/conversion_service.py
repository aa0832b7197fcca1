from __future__ import annotations

"""High-level conversion service for PSD to FairyGUI package transformation.

Entry-point for any front-end (CLI, scripts, tests) that needs to turn a
layered document into a package directory or ``.fairypackage`` archive.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from psd2fgui.config import ConfigManager
from psd2fgui.core.build_id import gen_build_id
from psd2fgui.core.context import ConversionContext
from psd2fgui.core.converter import create_component
from psd2fgui.core.models import ConversionResult, ConvertOptions, DocumentNode
from psd2fgui.core.naming import NamingConventions
from psd2fgui.core.package import UIPackage
from psd2fgui.core.package_utils import save_fairy_package, write_archive
from psd2fgui.core.parser import read_psd

logger = logging.getLogger(__name__)

__all__ = ["ConversionService"]


class ConversionService:
    """Business-logic façade: read, translate, emit."""

    def __init__(self, conventions: Optional[NamingConventions] = None) -> None:
        self.logger = logger
        if conventions is None:
            conventions = NamingConventions.from_config(ConfigManager().get_naming())
        self.conventions = conventions

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def build_package(self, root: DocumentNode, build_id: Optional[str] = None,
                      options: Optional[ConvertOptions] = None,
                      name: Optional[str] = None) -> UIPackage:
        """Translate a whole document tree into an in-memory package.

        No file is touched; the returned package holds every resource in
        manifest order.
        """
        build_id = build_id or gen_build_id()
        ctx = ConversionContext.for_build(build_id, options, self.conventions)
        self.logger.info("Convert: translating layers")
        create_component(root, ctx, name)
        package = ctx.package
        self.logger.info(
            "Convert OK: %d image(s), %d component(s)", len(package.images), len(package.components)
        )
        return package

    def convert(self, psd_file: str | Path, output_file: Optional[str | Path] = None,
                options: Optional[ConvertOptions] = None,
                build_id: Optional[str] = None) -> ConversionResult:
        """Convert *psd_file* into a FairyGUI package.

        Args:
            psd_file: Path to the source document
            output_file: Archive path, or output directory with ``no_pack``.
                Defaults to ``<name>.fairypackage`` (or ``<name>-fairypackage``)
                next to the source.
            options: Conversion options
            build_id: Reuse a previous build id to keep resource ids stable

        Returns:
            ConversionResult echoing the effective build id

        Raises:
            FileNotFoundError: If the source does not exist
            Psd2FguiError: If reading, translating or writing fails
        """
        psd_file = Path(psd_file)
        options = options or ConvertOptions()
        if not psd_file.exists():
            raise FileNotFoundError(f"Input file not found: {psd_file}")
        if not psd_file.is_file():
            raise ValueError(f"Path is not a file: {psd_file}")

        self.logger.info("Convert: parsing document")
        self.logger.debug("Converting PSD -> FairyGUI: %s", psd_file)
        root = read_psd(psd_file)

        build_id = build_id or gen_build_id()
        package = self.build_package(root, build_id, options, name=psd_file.stem)

        if options.no_pack:
            output_dir = Path(output_file) if output_file else psd_file.with_name(f"{psd_file.stem}-fairypackage")
            self.logger.info("Export: writing package folder")
            save_fairy_package(package, output_dir)
            output_path = output_dir
        else:
            output_path = Path(output_file) if output_file else psd_file.with_name(f"{psd_file.stem}.fairypackage")
            self.write_package(package, output_path, psd_file.with_name(f"{psd_file.stem}~temp"))

        self.logger.info("%s -> %s", psd_file, output_path)
        return ConversionResult(
            build_id=build_id,
            package_id=package.id,
            output_path=output_path,
            resources=list(package.resources),
        )

    def write_package(self, package: UIPackage, output_file: str | Path,
                      temp_dir: str | Path) -> Path:
        """Write *package* into *temp_dir*, zip it to *output_file*, clean up."""
        output_file = Path(output_file)
        temp_dir = Path(temp_dir)
        self.logger.info("Export: writing package archive")
        self.logger.debug("Destination: %s (staging in %s)", output_file, temp_dir)
        if temp_dir.exists():
            shutil.rmtree(temp_dir)
        try:
            save_fairy_package(package, temp_dir)
            write_archive(temp_dir, output_file)
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)
        return output_file
