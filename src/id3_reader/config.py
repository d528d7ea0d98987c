"""Configuration management for ID3 Reader.

Handles saving and loading user preferences: how tags are read and how the
`id3r show` line is formatted.
"""

import copy
import logging
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, List, Optional

import tomli_w

from .constants import DEFAULT_OUTPUT_FIELDS

CONFIG_DIR_ENV = "ID3R_CONFIG_DIR"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory ($ID3R_CONFIG_DIR, or ~/.id3r)
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    config_dir = Path(override) if override else Path.home() / ".id3r"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for reader and output settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "reader": {
            # Fall back to the ID3v1 footer when there is no ID3v2 header
            "try_id3v1": True,
            # Decode tag sizes with the conformant 0x7F synch-safe mask
            # instead of the legacy 0xEF mask
            "strict_size": False,
        },
        "output": {
            "separator": ",",
            "fields": list(DEFAULT_OUTPUT_FIELDS),
        },
    }

    def __init__(self, path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            path: Config file to use instead of the default location
        """
        self.config_path = Path(path) if path is not None else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
            # Merge with defaults (in case new keys were added)
            self._merge_config(self.data, loaded_data)
            self._check_fields()
            self._dirty = False
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.warning("Error loading config %s: %s", self.config_path, e)
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logging.warning("Error saving config %s: %s", self.config_path, e)
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _check_fields(self) -> None:
        """Drop output fields loaded from the file that Tag doesn't have."""
        fields = self.data["output"].get("fields")
        if not isinstance(fields, list):
            logging.warning("Invalid output fields in %s: %r", self.config_path, fields)
            self.data["output"]["fields"] = list(DEFAULT_OUTPUT_FIELDS)
            return

        unknown = [f for f in fields if not (isinstance(f, str) and f in KNOWN_FIELDS)]
        if unknown:
            logging.warning(
                "Ignoring unknown output fields in %s: %s",
                self.config_path,
                ", ".join(map(str, unknown)),
            )
            known = [f for f in fields if f not in unknown]
            self.data["output"]["fields"] = known or list(DEFAULT_OUTPUT_FIELDS)

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Reader settings
    def get_try_id3v1(self) -> bool:
        return bool(self.data["reader"].get("try_id3v1", True))

    def set_try_id3v1(self, enabled: bool) -> None:
        self.data["reader"]["try_id3v1"] = enabled
        self._dirty = True

    def get_strict_size(self) -> bool:
        return bool(self.data["reader"].get("strict_size", False))

    def set_strict_size(self, enabled: bool) -> None:
        self.data["reader"]["strict_size"] = enabled
        self._dirty = True

    # Output settings
    def get_separator(self) -> str:
        return self.data["output"].get("separator", ",")

    def set_separator(self, separator: str) -> None:
        self.data["output"]["separator"] = separator
        self._dirty = True

    def get_fields(self) -> List[str]:
        """Get the fields printed by `id3r show`, in order."""
        return list(self.data["output"].get("fields", DEFAULT_OUTPUT_FIELDS))

    def set_fields(self, fields: List[str]) -> None:
        """Set the fields printed by `id3r show`.

        Raises:
            ValueError: If a field name is unknown
        """
        unknown = [f for f in fields if not (isinstance(f, str) and f in KNOWN_FIELDS)]
        if unknown:
            raise ValueError(f"Unknown output fields: {', '.join(map(str, unknown))}")
        self.data["output"]["fields"] = list(fields)
        self._dirty = True


KNOWN_FIELDS = frozenset(DEFAULT_OUTPUT_FIELDS + ["total_tracks", "path"])
