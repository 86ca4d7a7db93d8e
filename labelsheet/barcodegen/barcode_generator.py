from __future__ import annotations

import logging
from io import BytesIO
from typing import Any, Dict, Final, Optional, Set, TypedDict

import barcode as pybarcode
from barcode.ean import EuropeanArticleNumber8, EuropeanArticleNumber13
from barcode.errors import BarcodeError
from barcode.upc import UniversalProductCodeA
from barcode.writer import ImageWriter
from PIL import Image

from labelsheet.exceptions import EncodingError
from labelsheet.model.artifact import GeneratedArtifact
from labelsheet.model.enums import ArtifactFormat, Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "LinearBarcodeGenerator",
    "BarcodeRenderOptions",
    "DEFAULT_RENDER_OPTIONS",
]

DEFAULT_CODE128_MAX_LENGTH: Final[int] = 80


class BarcodeRenderOptions(TypedDict, total=False):
    """Typed ImageWriter options."""

    module_width: float  # bar width, mm
    module_height: float  # bar height, mm
    font_size: int  # human readable text, pt
    text_distance: float  # gap between bars and text, mm
    quiet_zone: float  # left/right margin, mm
    dpi: int
    write_text: bool
    background: str
    foreground: str


DEFAULT_RENDER_OPTIONS: BarcodeRenderOptions = {
    "module_width": 0.2,
    "module_height": 15.0,
    "font_size": 10,
    "text_distance": 5.0,
    "quiet_zone": 6.5,
    "dpi": 300,
    "write_text": True,
}


class LinearBarcodeGenerator:
    """
    Renders linear symbologies (CODE128, EAN13, UPC, EAN8) to PNG.

    Args:
        symbology: Linear symbology to encode with.
        data: Payload string.
        options: Extra constructor options for the python-barcode class.
        code128_max_length: Longest CODE128 payload accepted by validate().
    """

    _pybarcode_support: Dict[Symbology, str] = {
        Symbology.CODE128: "code128",
        Symbology.EAN13: "ean13",
        Symbology.UPC: "upca",
        Symbology.EAN8: "ean8",
    }

    # Accepted digit counts; the shorter one lets the encoder add the check digit.
    _digit_lengths: Dict[Symbology, tuple[int, int]] = {
        Symbology.EAN13: (12, 13),
        Symbology.UPC: (11, 12),
        Symbology.EAN8: (7, 8),
    }

    # Encoders used to recompute the check digit of full-length input.
    _checksum_classes: Dict[Symbology, type] = {
        Symbology.EAN13: EuropeanArticleNumber13,
        Symbology.UPC: UniversalProductCodeA,
        Symbology.EAN8: EuropeanArticleNumber8,
    }

    def __init__(
        self,
        symbology: Symbology,
        data: str,
        options: Optional[Dict[str, Any]] = None,
        code128_max_length: int = DEFAULT_CODE128_MAX_LENGTH,
    ) -> None:
        if not isinstance(symbology, Symbology):
            raise TypeError(f"symbology must be Symbology enum, got {type(symbology)!r}")
        if not symbology.is_linear:
            raise TypeError(f"{symbology.name} is not a linear symbology")
        self.symbology = symbology
        self.data = data
        self.options: Dict[str, Any] = dict(options) if options else {}
        self.code128_max_length = code128_max_length

    def _fail(self, message: str) -> EncodingError:
        logger.warning("Rejected %s payload: %s", self.symbology.name, message)
        return EncodingError(message, symbology=self.symbology)

    def _check_digit(self) -> None:
        """Reject full-length input whose last digit is not the encoder's check digit."""
        encoder = self._checksum_classes[self.symbology](self.data[:-1])
        expected = encoder.get_fullcode()[-1]
        if self.data[-1] != expected:
            raise self._fail(
                f"{self.symbology.name} check digit mismatch: expected {expected}, "
                f"got {self.data[-1]}."
            )

    def validate(self) -> None:
        """
        Check the payload against the symbology's rules before encoding.

        Raises:
            EncodingError: on empty, non-digit, wrong-length, wrong check digit
                or non-ASCII data.
        """
        if not isinstance(self.data, str) or not self.data.strip():
            raise self._fail("Barcode data must be non-empty string")

        lengths = self._digit_lengths.get(self.symbology)
        if lengths is not None:
            if not (self.data.isascii() and self.data.isdigit()):
                raise self._fail(f"{self.symbology.name} barcode requires digits only.")
            if len(self.data) not in lengths:
                raise self._fail(
                    f"{self.symbology.name} must be {lengths[0]} or {lengths[1]} digits, "
                    f"got {len(self.data)}."
                )
            if len(self.data) == lengths[1]:
                self._check_digit()

        elif self.symbology == Symbology.CODE128:
            if not self.data.isascii():
                raise self._fail("CODE128 supports ASCII characters only")
            if len(self.data) > self.code128_max_length:
                raise self._fail(
                    f"CODE128 data too long (max {self.code128_max_length})"
                )

    def render_image(self, options: Optional[BarcodeRenderOptions] = None) -> Image.Image:
        """
        Encode and draw the barcode.

        Args:
            options: ImageWriter options merged over DEFAULT_RENDER_OPTIONS.

        Returns:
            PIL Image.

        Raises:
            EncodingError: if validation fails or the encoder rejects the data.
        """
        self.validate()
        logger.debug("Rendering %s barcode, %d chars", self.symbology.name, len(self.data))

        barcode_name = self._pybarcode_support[self.symbology]
        try:
            bclass = pybarcode.get_barcode_class(barcode_name)
            barcode_inst = bclass(self.data, writer=ImageWriter(), **self.options)
            img = barcode_inst.render(
                writer_options={**DEFAULT_RENDER_OPTIONS, **(options or {})}
            )
        except BarcodeError as e:
            raise EncodingError(
                f"{self.symbology.name} encoder rejected data: {e}",
                symbology=self.symbology,
            ) from e
        except Exception as e:
            logger.error("Barcode image generation failed for %s: %r", self.symbology, e)
            raise EncodingError(
                f"Barcode image generation failed: {self.symbology.name}",
                symbology=self.symbology,
            ) from e

        if not isinstance(img, Image.Image):
            raise EncodingError(
                "Barcode output is not an Image.Image object", symbology=self.symbology
            )
        return img

    def render_bytes(self, options: Optional[BarcodeRenderOptions] = None) -> bytes:
        img = self.render_image(options=options)
        buf = BytesIO()
        img.save(buf, format="PNG")
        buf.seek(0)
        return buf.read()

    def render_artifact(
        self, options: Optional[BarcodeRenderOptions] = None
    ) -> GeneratedArtifact:
        """Render to a PNG data URI artifact."""
        return GeneratedArtifact.from_bytes(
            ArtifactFormat.PNG, self.render_bytes(options=options)
        )

    @classmethod
    def supported_symbologies(cls) -> Set[Symbology]:
        return set(cls._pybarcode_support.keys())

    @classmethod
    def encoder_name_map(cls) -> Dict[Symbology, str]:
        return dict(cls._pybarcode_support)
