"""
engine.py

Generation engine: one text -> one artifact, and many texts -> many artifacts
in input order.

- generate(): single text with an explicit symbology (or legacy tag).
- generate_bulk(): detect + generate every text concurrently, all-or-nothing.
- generate_bulk_settled(): same fan-out, but returns a per-index result record
  instead of failing the whole call.
- parse_bulk_input(): comma-separated form text -> list of codes.

Rendering is CPU-bound and runs in the loop's default executor; each call is
one suspension point. Generations share no mutable state.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from labelsheet.barcodegen.barcode_generator import (
    DEFAULT_CODE128_MAX_LENGTH,
    BarcodeRenderOptions,
    LinearBarcodeGenerator,
)
from labelsheet.barcodegen.detector import detect
from labelsheet.barcodegen.matrix2d_generator import DEFAULT_QR_SIZE, QRCodeGenerator
from labelsheet.config import get_config
from labelsheet.exceptions import EncodingError, MalformedBulkInputError
from labelsheet.model.artifact import GeneratedArtifact
from labelsheet.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "BULK_SEPARATOR",
    "BulkItemResult",
    "generate",
    "generate_bulk",
    "generate_bulk_settled",
    "parse_bulk_input",
    "render_artifact",
]

BULK_SEPARATOR = ","


@dataclass(frozen=True)
class BulkItemResult:
    """Outcome of one text inside generate_bulk_settled()."""

    index: int
    text: str
    artifact: Optional[GeneratedArtifact] = None
    error: Optional[EncodingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _writer_options(config: Dict[str, Any]) -> BarcodeRenderOptions:
    return {
        "module_width": float(config["barcode_module_width"]),
        "module_height": float(config["barcode_module_height"]),
        "font_size": int(config["barcode_font_size"]),
        "text_distance": float(config["barcode_text_distance"]),
        "quiet_zone": float(config["barcode_quiet_zone"]),
        "dpi": int(config["barcode_dpi"]),
        "write_text": bool(config["barcode_write_text"]),
    }


def render_artifact(
    text: str,
    symbology: Union[Symbology, str],
    config: Optional[Dict[str, Any]] = None,
) -> GeneratedArtifact:
    """
    Blocking rendering of one artifact.

    Args:
        text: Text to encode.
        symbology: Symbology or textual tag ("GENERAL" is read as CODE128).
        config: Settings dict; defaults to get_config().

    Raises:
        EncodingError: if the text is invalid for the symbology.
        ValueError: if a textual tag names no known symbology.
    """
    if not isinstance(symbology, Symbology):
        symbology = Symbology.from_tag(symbology)
    cfg = config if config is not None else get_config()

    if symbology is Symbology.QR:
        generator = QRCodeGenerator(
            text,
            options={
                "error_correction": cfg.get("qr_error_correction", "L"),
                "border": int(cfg.get("qr_border", 0)),
            },
            size=int(cfg.get("qr_size", DEFAULT_QR_SIZE)),
        )
        return generator.render_artifact()

    linear = LinearBarcodeGenerator(
        symbology,
        text,
        code128_max_length=int(
            cfg.get("code128_max_length", DEFAULT_CODE128_MAX_LENGTH)
        ),
    )
    return linear.render_artifact(options=_writer_options(cfg))


async def generate(
    text: str,
    symbology: Union[Symbology, str],
    *,
    config: Optional[Dict[str, Any]] = None,
) -> GeneratedArtifact:
    """Render one artifact without blocking the event loop.

    Raises:
        EncodingError: propagated from the generator, never replaced by a
            fallback artifact.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, lambda: render_artifact(text, symbology, config)
    )


async def _generate_indexed(
    index: int, text: str, config: Optional[Dict[str, Any]]
) -> GeneratedArtifact:
    symbology = detect(text)
    try:
        return await generate(text, symbology, config=config)
    except EncodingError as e:
        raise EncodingError(
            f"item {index}: {e}", symbology=e.symbology or symbology, index=index, cause=e
        ) from e


async def generate_bulk(
    texts: Sequence[str], *, config: Optional[Dict[str, Any]] = None
) -> List[GeneratedArtifact]:
    """
    Detect and render every text; results follow input order.

    All-or-nothing: the first failing item fails the call with an
    EncodingError whose ``index`` points at it. Items already in flight are
    not cancelled.
    """
    cfg = config if config is not None else get_config()
    artifacts = await asyncio.gather(
        *(_generate_indexed(i, text, cfg) for i, text in enumerate(texts))
    )
    logger.info("Bulk generation complete: %d items", len(artifacts))
    return list(artifacts)


async def generate_bulk_settled(
    texts: Sequence[str], *, config: Optional[Dict[str, Any]] = None
) -> List[BulkItemResult]:
    """
    Partial-success variant of generate_bulk().

    Returns one BulkItemResult per input, in input order. Only EncodingError
    is captured; any other exception propagates.
    """
    cfg = config if config is not None else get_config()
    outcomes = await asyncio.gather(
        *(_generate_indexed(i, text, cfg) for i, text in enumerate(texts)),
        return_exceptions=True,
    )

    results: List[BulkItemResult] = []
    for index, (text, outcome) in enumerate(zip(texts, outcomes)):
        if isinstance(outcome, EncodingError):
            results.append(BulkItemResult(index=index, text=text, error=outcome))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results.append(BulkItemResult(index=index, text=text, artifact=outcome))

    failed = sum(1 for r in results if not r.ok)
    if failed:
        logger.warning("Bulk generation: %d of %d items failed", failed, len(results))
    else:
        logger.info("Bulk generation complete: %d items", len(results))
    return results


def parse_bulk_input(raw: str) -> List[str]:
    """
    Split comma-separated form text into codes.

    Tokens are trimmed and empty ones dropped. A comma inside an intended
    code is always a separator.

    Raises:
        MalformedBulkInputError: if no code remains.
    """
    codes = [code.strip() for code in raw.split(BULK_SEPARATOR)]
    codes = [code for code in codes if code]
    if not codes:
        raise MalformedBulkInputError(
            "Please enter valid codes separated by commas"
        )
    logger.debug("Bulk input parsed into %d codes", len(codes))
    return codes
