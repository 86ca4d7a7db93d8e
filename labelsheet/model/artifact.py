# RU: Готовое изображение кода: PNG (линейные символики) или SVG (QR) в виде data URI.
# EN: Generated artifact: a PNG (linear symbologies) or SVG (QR) image carried as a self-describing data URI.

import base64
import binascii
import logging
import time
from dataclasses import dataclass
from typing import Optional

from .enums import ArtifactFormat

logger = logging.getLogger(__name__)

FILENAME_STEM = "Barcode"


@dataclass(frozen=True)
class GeneratedArtifact:
    """
    Rendered image of one encoded input.

    The artifact does not remember which text produced it; callers pair
    artifacts with their inputs by position.

    Examples:
        art = GeneratedArtifact.from_bytes(ArtifactFormat.PNG, png_bytes)
        art.data_uri            # "data:image/png;base64,iVBOR..."
        art.suggested_filename()  # "Barcode_1718000000000.png"
    """

    format: ArtifactFormat
    data_uri: str

    def __post_init__(self) -> None:
        if not self.data_uri.startswith(self.format.data_uri_prefix):
            raise ValueError(
                f"data URI does not match format {self.format.name}: "
                f"{self.data_uri[:32]!r}"
            )

    @classmethod
    def from_bytes(cls, fmt: ArtifactFormat, payload: bytes) -> "GeneratedArtifact":
        encoded = base64.b64encode(payload).decode("ascii")
        return cls(format=fmt, data_uri=f"{fmt.data_uri_prefix}{encoded}")

    @classmethod
    def from_data_uri(cls, uri: str) -> "GeneratedArtifact":
        """Rebuild an artifact from its data URI, branching on the prefix."""
        for fmt in ArtifactFormat:
            if uri.startswith(fmt.data_uri_prefix):
                return cls(format=fmt, data_uri=uri)
        raise ValueError(f"Unsupported artifact data URI: {uri[:32]!r}")

    @property
    def mime_type(self) -> str:
        return self.format.mime_type

    @property
    def is_raster(self) -> bool:
        return self.format.is_raster

    @property
    def is_vector(self) -> bool:
        return not self.format.is_raster

    @property
    def file_extension(self) -> str:
        return self.format.file_extension

    def payload(self) -> bytes:
        """Decode the base64 body of the data URI."""
        body = self.data_uri[len(self.format.data_uri_prefix) :]
        try:
            return base64.b64decode(body, validate=True)
        except binascii.Error as e:
            raise ValueError("Artifact data URI holds invalid base64") from e

    def suggested_filename(self, timestamp_ms: Optional[int] = None) -> str:
        """File name for downloads: ``Barcode_<epoch millis>.<png|svg>``."""
        if timestamp_ms is None:
            timestamp_ms = int(time.time() * 1000)
        return f"{FILENAME_STEM}_{timestamp_ms}.{self.file_extension}"

    def __str__(self) -> str:
        return f"GeneratedArtifact({self.format.name}, {len(self.data_uri)} chars)"
