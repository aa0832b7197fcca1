from __future__ import annotations

"""Readers turning layered documents into :class:`DocumentNode` trees."""

from .psd_reader import extract_text_run, layer_to_node, read_psd

__all__ = [
    "read_psd",
    "layer_to_node",
    "extract_text_run",
]
