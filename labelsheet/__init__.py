"""
labelsheet
==========

Barcode and QR label generator with printable label-sheet layout.

This package provides:
    - Automatic symbology detection (EAN13, UPC, EAN8, CODE128, QR)
    - PNG rendering of linear barcodes and SVG rendering of QR codes,
      returned as self-describing data URIs
    - Order-preserving bulk generation from comma-separated input
    - A catalog of A4 label sheets plus custom sheets
    - HTML print documents laid out on a CSS grid

Basic usage:
    >>> import asyncio
    >>> from labelsheet import LabelSession, generate_many, build_print_document
    >>>
    >>> session = LabelSession()
    >>> session.select_preset("a4_21")
    >>> asyncio.run(generate_many(session, "4221735075026, ABC123, hello"))
    >>> html = build_print_document(session).html

Logging:
    >>> import os
    >>> os.environ["LABELSHEET_LOG_LEVEL"] = "DEBUG"
    >>> from labelsheet import get_logger
    >>> get_logger(__name__).debug("debug logging enabled")

Version: 0.1.0
License: MIT
Python: 3.11+
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Dict

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__author__ = "labelsheet developers"
__description__ = "Barcode/QR label generator with printable label-sheet layout"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"labelsheet requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAME = "labelsheet"
LOG_LEVEL_ENV_VAR = "LABELSHEET_LOG_LEVEL"
LOG_DIR_ENV_VAR = "LABELSHEET_LOG_DIR"


def _setup_logging() -> None:
    """
    Configure the package logger once.

    - stderr handler for WARNING and above
    - rotating file handler for every level, only when LABELSHEET_LOG_DIR is set
    - format: [timestamp] LEVEL [module.function:line] message

    Level comes from LABELSHEET_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR,
    CRITICAL; default INFO). Repeated calls are no-ops.
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    package_logger = logging.getLogger(LOGGER_NAME)
    if package_logger.handlers:
        return

    package_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_dir_str = os.environ.get(LOG_DIR_ENV_VAR)
    if log_dir_str:
        try:
            log_dir = Path(log_dir_str)
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / "labelsheet.log",
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning(
                "Could not initialize file logging in %s: %s. Console only.",
                log_dir_str,
                e,
            )

    package_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the ``labelsheet`` namespace.

    >>> get_logger("scripts.demo").name
    'labelsheet.scripts.demo'
    >>> get_logger("__main__").name
    'labelsheet.main'
    """
    if module_name == LOGGER_NAME or module_name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAME}.main")
    return logging.getLogger(f"{LOGGER_NAME}.{module_name.lstrip('.')}")


def check_dependencies() -> Dict[str, bool]:
    """
    Report which rendering dependencies can be imported.

    Returns:
        Mapping of distribution name to availability.
    """
    dependencies: Dict[str, bool] = {}

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    try:
        import qrcode  # noqa: F401

        dependencies["qrcode"] = True
    except ImportError:
        dependencies["qrcode"] = False

    try:
        import barcode  # noqa: F401

        dependencies["python-barcode"] = True
    except ImportError:
        dependencies["python-barcode"] = False

    return dependencies


_setup_logging()

# =============================================================================
# PUBLIC API
# =============================================================================

# Imported after the logging helpers so submodules log through a configured logger.
from labelsheet.barcodegen import (  # noqa: E402
    BulkItemResult,
    detect,
    generate,
    generate_bulk,
    generate_bulk_settled,
    parse_bulk_input,
)
from labelsheet.config import get_config, load_config  # noqa: E402
from labelsheet.exceptions import (  # noqa: E402
    EmptyInputError,
    EncodingError,
    LabelSheetError,
    MalformedBulkInputError,
    TemplateError,
)
from labelsheet.layout import PrintDocument, layout  # noqa: E402
from labelsheet.model import (  # noqa: E402
    PRESET_TEMPLATES,
    ArtifactFormat,
    CustomTemplate,
    GeneratedArtifact,
    PresetTemplate,
    SheetTemplate,
    Symbology,
    resolve_template,
)
from labelsheet.session import (  # noqa: E402
    LabelSession,
    build_print_document,
    generate_many,
    generate_one,
)

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # utilities
    "get_logger",
    "load_config",
    "get_config",
    "check_dependencies",
    # model
    "Symbology",
    "ArtifactFormat",
    "GeneratedArtifact",
    "SheetTemplate",
    "PresetTemplate",
    "CustomTemplate",
    "PRESET_TEMPLATES",
    "resolve_template",
    # core operations
    "detect",
    "generate",
    "generate_bulk",
    "generate_bulk_settled",
    "parse_bulk_input",
    "BulkItemResult",
    "layout",
    "PrintDocument",
    # session
    "LabelSession",
    "generate_one",
    "generate_many",
    "build_print_document",
    # errors
    "LabelSheetError",
    "EncodingError",
    "EmptyInputError",
    "MalformedBulkInputError",
    "TemplateError",
]

_logger = get_logger(__name__)
_logger.debug("labelsheet v%s initialized", __version__)
