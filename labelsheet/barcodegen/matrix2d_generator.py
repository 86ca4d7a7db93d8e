"""
RU: Генерация QR-кодов в векторном виде (SVG) с фиксированным логическим размером.
EN: QR code generator producing vector (SVG) output at a fixed logical size.

Provides:
- QR encoding via qrcode with configurable error correction and border
- SVG path output pinned to a logical width/height (200 x 200 by default)
- Data URI packaging and an async wrapper

Requirements: qrcode
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import Any, Dict, Final, Optional
from xml.etree import ElementTree as ET

import qrcode
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)
from qrcode.exceptions import DataOverflowError
from qrcode.image.svg import SvgPathImage

from labelsheet.exceptions import EncodingError
from labelsheet.model.artifact import GeneratedArtifact
from labelsheet.model.enums import ArtifactFormat, Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "QRCodeGenerator",
    "DEFAULT_QR_SIZE",
    "ERROR_CORRECTION_LEVELS",
]

DEFAULT_QR_SIZE: Final[int] = 200
MAX_QR_SIZE: Final[int] = 10000

ERROR_CORRECTION_LEVELS: Final[Dict[str, int]] = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


class _FixedSizeSvgImage(SvgPathImage):
    """SVG path image whose outer box is a fixed number of user units.

    The viewBox stays in module units, so the code scales to fill the box.
    """

    logical_size: int = DEFAULT_QR_SIZE
    background = "white"

    def _svg(self, **kwargs: Any) -> ET.Element:
        svg = super()._svg(**kwargs)
        svg.set("width", str(self.logical_size))
        svg.set("height", str(self.logical_size))
        return svg


class QRCodeGenerator:
    """QR generator with vector output.

    Args:
        data: Source text. Empty text is valid and yields a version-1 code.
        options: qrcode options: ``error_correction`` ("L"/"M"/"Q"/"H"),
            ``border`` (modules), ``version`` (None to fit).
        size: Logical width/height of the SVG.

    Examples:
        >>> gen = QRCodeGenerator("hello, world")
        >>> svg = gen.render_svg()
        >>> art = gen.render_artifact()
    """

    def __init__(
        self,
        data: str,
        options: Optional[Dict[str, Any]] = None,
        size: int = DEFAULT_QR_SIZE,
    ) -> None:
        if not isinstance(data, str):
            logger.error("QR data must be str, got %r", type(data))
            raise TypeError("QR data must be str")
        if size <= 0 or size > MAX_QR_SIZE:
            raise ValueError(f"QR size must be in 1..{MAX_QR_SIZE}, got {size}")
        self.data = data
        self.options = options or {}
        self.size = size

    def _error_correction(self) -> int:
        level = str(self.options.get("error_correction", "L")).upper()
        if level not in ERROR_CORRECTION_LEVELS:
            raise ValueError(f"Unknown QR error correction level: {level!r}")
        return ERROR_CORRECTION_LEVELS[level]

    def _image_factory(self) -> type:
        return type(
            "QRSvgImage", (_FixedSizeSvgImage,), {"logical_size": self.size}
        )

    def render_svg(self) -> str:
        """
        Encode the data and serialize the SVG markup.

        Returns:
            SVG document text.

        Raises:
            EncodingError: if the data exceeds QR capacity.
        """
        qr = qrcode.QRCode(
            version=self.options.get("version"),
            error_correction=self._error_correction(),
            border=self.options.get("border", 0),
        )
        qr.add_data(self.data)
        try:
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as e:
            # qrcode 8.x reports overflow as "Invalid version (was 41, ...)".
            logger.warning("QR payload too large: %d chars", len(self.data))
            raise EncodingError(
                f"QR payload too large ({len(self.data)} chars)",
                symbology=Symbology.QR,
            ) from e

        img = qr.make_image(image_factory=self._image_factory())
        svg = img.to_string(encoding="unicode")
        logger.info(
            "QR code generated: version %s, %d chars", qr.version, len(self.data)
        )
        return svg

    def render_bytes(self) -> bytes:
        return self.render_svg().encode("utf-8")

    def render_data_uri(self) -> str:
        encoded = base64.b64encode(self.render_bytes()).decode("ascii")
        return f"{ArtifactFormat.SVG.data_uri_prefix}{encoded}"

    def render_artifact(self) -> GeneratedArtifact:
        return GeneratedArtifact(format=ArtifactFormat.SVG, data_uri=self.render_data_uri())

    async def render_artifact_async(self) -> GeneratedArtifact:
        """Async wrapper for render_artifact (runs in the default executor)."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.render_artifact)
