"""Shared fixtures for psd2fgui tests.

Document trees are built in memory from :class:`DocumentNode` values, so
no PSD file is needed outside the reader tests.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lxml import etree as ET

from psd2fgui.config import ConfigManager
from psd2fgui.core.context import ConversionContext
from psd2fgui.core.models import ConvertOptions, DocumentNode, RasterImage, TextRun

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

BUILD_ID = "pkg12345ab"


def _pixels(seed: int, width: int, height: int) -> RasterImage:
    data = bytes((seed + i) % 256 for i in range(width * height * 4))
    return RasterImage(width=width, height=height, mode="RGBA", pixels=data)


@pytest.fixture
def build_id():
    return BUILD_ID


@pytest.fixture
def ctx():
    """Fresh conversion context with a fixed build id."""
    return ConversionContext.for_build(BUILD_ID)


@pytest.fixture
def ctx_no_font():
    return ConversionContext.for_build(BUILD_ID, ConvertOptions(ignore_font=True))


@pytest.fixture
def make_image():
    """Factory for image layers; equal *seed* and size give identical pixels."""
    def _make(name, left=0, top=0, width=4, height=4, seed=0, opacity=255):
        return DocumentNode(
            name=name, left=left, top=top, width=width, height=height,
            opacity=opacity, image=_pixels(seed, width, height),
        )
    return _make


@pytest.fixture
def make_text():
    def _make(name, value="Hello", left=0, top=0, width=40, height=20,
              alignment="left", font="Arial", size=24, color=(255, 0, 16, 255), opacity=255):
        return DocumentNode(
            name=name, left=left, top=top, width=width, height=height, opacity=opacity,
            text=TextRun(value=value, alignment=alignment, font=font, size=size, color=color),
        )
    return _make


@pytest.fixture
def make_group():
    def _make(name, children=None, left=0, top=0, width=200, height=100, opacity=255):
        return DocumentNode(
            name=name, left=left, top=top, width=width, height=height,
            opacity=opacity, is_group=True, children=list(children or []),
        )
    return _make


@pytest.fixture
def parse_xml():
    """Parse serialised component markup back into an element."""
    def _parse(xml_text):
        return ET.fromstring(xml_text.encode("utf-8"))
    return _parse


@pytest.fixture
def display_list():
    return ET.Element("displayList")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user overrides at an empty folder and reload config per test."""
    monkeypatch.setenv("PSD2FGUI_CONFIG_DIR", str(tmp_path / "user-config"))
    ConfigManager.reset()
    yield
    ConfigManager.reset()
