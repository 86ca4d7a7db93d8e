"""
labelsheet/config.py

Application configuration: defaults plus an optional JSON override file.

Config keys:
    - default_template: str - preset key selected for a new session
    - qr_size: int - logical width/height of QR vector output
    - qr_border: int - QR quiet zone, in modules
    - qr_error_correction: str - "L", "M", "Q" or "H"
    - barcode_module_width: float - bar width, mm
    - barcode_module_height: float - bar height, mm
    - barcode_font_size: int - human readable text size, pt
    - barcode_text_distance: float - gap between bars and text, mm
    - barcode_quiet_zone: float - left/right quiet zone, mm
    - barcode_dpi: int - raster resolution
    - barcode_write_text: bool - print the human readable text
    - code128_max_length: int - longest accepted CODE128 payload
    - print_title: str - <title> of the print document
    - log_level: str - informational copy of LABELSHEET_LOG_LEVEL
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Final, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CONFIG",
    "CONFIG_ENV_VAR",
    "load_config",
    "get_config",
    "reset_config",
]

CONFIG_ENV_VAR: Final[str] = "LABELSHEET_CONFIG"
DEFAULT_CONFIG_FILENAME: Final[str] = "labelsheet.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "default_template": "a4_65",
    "qr_size": 200,
    "qr_border": 0,
    "qr_error_correction": "L",
    "barcode_module_width": 0.2,
    "barcode_module_height": 15.0,
    "barcode_font_size": 10,
    "barcode_text_distance": 5.0,
    "barcode_quiet_zone": 6.5,
    "barcode_dpi": 300,
    "barcode_write_text": True,
    "code128_max_length": 80,
    "print_title": "Print barcodes and labels",
    "log_level": "INFO",
}

_cached: Optional[Dict[str, Any]] = None


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file, falling back to defaults.

    The file must hold a JSON object; its keys override DEFAULT_CONFIG
    (shallow merge). A missing file, invalid JSON, an unreadable file or a
    non-object payload all log a warning and return the defaults.

    Args:
        config_path: Explicit path. If None, LABELSHEET_CONFIG is consulted,
            then ``labelsheet.json`` in the current directory.

    Returns:
        A fresh dict that always contains every default key.

    Example:
        >>> config = load_config()
        >>> config["qr_size"]
        200
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        config_path = Path(env_path) if env_path else Path(DEFAULT_CONFIG_FILENAME)

    config = DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.debug("Config file %s not found, using defaults", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"config file must contain a JSON object, "
                f"got {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info("Configuration loaded from %s", config_path)
        logger.debug("Configuration: %s", config)

    except json.JSONDecodeError as e:
        logger.warning(
            "Could not parse %s: invalid JSON at line %d, column %d. Using defaults.",
            config_path,
            e.lineno,
            e.colno,
        )
        config = DEFAULT_CONFIG.copy()
    except OSError as e:
        logger.warning("Could not read %s: %s. Using defaults.", config_path, e)
        config = DEFAULT_CONFIG.copy()
    except ValueError as e:
        logger.warning("Invalid config format: %s. Using defaults.", e)
        config = DEFAULT_CONFIG.copy()

    return config


def get_config() -> Dict[str, Any]:
    """Return the process-wide configuration, loading it on first use."""
    global _cached
    if _cached is None:
        _cached = load_config()
    return _cached


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _cached
    _cached = None
