"""Classify raw input text into the symbology used to render it."""

from __future__ import annotations

import logging
import re
from typing import Final, Tuple

from labelsheet.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = ["detect"]

# Order matters: later patterns are supersets of earlier ones.
_RULES: Final[Tuple[Tuple[re.Pattern[str], Symbology], ...]] = (
    (re.compile(r"[0-9]{13}"), Symbology.EAN13),
    (re.compile(r"[0-9]{12}"), Symbology.UPC),
    (re.compile(r"[0-9]{8}"), Symbology.EAN8),
    (re.compile(r"[A-Z0-9]+"), Symbology.CODE128),
)


def detect(text: str) -> Symbology:
    """
    Pick a symbology for ``text``. Total: anything unmatched, including the
    empty string, is QR.

    >>> detect("4221735075026")
    <Symbology.EAN13: 'EAN13'>
    >>> detect("ABC123")
    <Symbology.CODE128: 'CODE128'>
    >>> detect("hello, world")
    <Symbology.QR: 'QR'>
    """
    for pattern, symbology in _RULES:
        if pattern.fullmatch(text):
            logger.debug("Detected %s for %d chars", symbology.name, len(text))
            return symbology
    return Symbology.QR
