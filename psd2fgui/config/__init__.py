"""Configuration files (YAML) and the helper that reads them.

Default files are shipped in this folder; ``ConfigManager`` merges them with
user overrides.
"""

from .manager import ConfigManager

__all__ = [
    "ConfigManager",
]
