"""
model/enums.py

(Кратко RU: Перечисления символик штрихкодов и форматов готовых изображений.)

EN: Domain enums for the label generator: the supported symbologies and the
two artifact formats they produce. No rendering logic here.

- Linear symbologies (CODE128, EAN13, UPC, EAN8) render to PNG.
- QR renders to SVG.
- "GENERAL" is a legacy tag accepted as an alias of CODE128.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Literal

_logger: Final[logging.Logger] = logging.getLogger(__name__)

GENERAL_ALIAS: Final[str] = "GENERAL"


class ArtifactFormat(str, Enum):
    PNG = "png"
    SVG = "svg"

    @property
    def mime_type(self) -> str:
        return "image/png" if self is ArtifactFormat.PNG else "image/svg+xml"

    @property
    def data_uri_prefix(self) -> str:
        return f"data:{self.mime_type};base64,"

    @property
    def file_extension(self) -> str:
        return self.value

    @property
    def is_raster(self) -> bool:
        return self is ArtifactFormat.PNG


class Symbology(str, Enum):
    CODE128 = "CODE128"
    EAN13 = "EAN13"
    UPC = "UPC"
    EAN8 = "EAN8"
    QR = "QR"

    @property
    def is_linear(self) -> bool:
        return self is not Symbology.QR

    @property
    def artifact_format(self) -> ArtifactFormat:
        return ArtifactFormat.PNG if self.is_linear else ArtifactFormat.SVG

    @classmethod
    def from_tag(cls, tag: str) -> "Symbology":
        """
        Resolve a textual tag (as sent by a form select) to a Symbology.

        Matching is case-insensitive. "GENERAL" maps to CODE128.

        Raises:
            ValueError: if the tag names no known symbology.
        """
        normalized = tag.strip().upper()
        if normalized == GENERAL_ALIAS:
            _logger.debug("Legacy tag %r resolved to CODE128", tag)
            return cls.CODE128
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown symbology tag: {tag!r}") from None

    def localized_name(self, lang: Literal["en", "pt"] = "en") -> str:
        names_en = {
            Symbology.CODE128: "Code 128",
            Symbology.EAN13: "EAN-13",
            Symbology.UPC: "UPC-A",
            Symbology.EAN8: "EAN-8",
            Symbology.QR: "QR code",
        }
        names_pt = {
            Symbology.CODE128: "Code 128",
            Symbology.EAN13: "EAN-13",
            Symbology.UPC: "UPC-A",
            Symbology.EAN8: "EAN-8",
            Symbology.QR: "Código QR",
        }
        return names_pt[self] if lang == "pt" else names_en[self]


LINEAR_SYMBOLOGIES: Final[frozenset[Symbology]] = frozenset(
    s for s in Symbology if s.is_linear
)

__all__ = [
    "GENERAL_ALIAS",
    "ArtifactFormat",
    "Symbology",
    "LINEAR_SYMBOLOGIES",
]
