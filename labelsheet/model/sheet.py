"""
model/sheet.py

Label sheet templates: the fixed preset catalog, the custom variant built from
raw form fields, and resolution of either into one concrete SheetTemplate.

Validation happens here, at construction time. Anything that reaches the
layout engine is a valid SheetTemplate (columns >= 1, rows >= 1).
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Dict, Final, List, Literal, Mapping, Union

from labelsheet.exceptions import TemplateError

logger = logging.getLogger(__name__)

__all__ = [
    "SheetTemplate",
    "PresetTemplate",
    "CustomTemplate",
    "TemplateChoice",
    "PRESET_TEMPLATES",
    "CUSTOM_KEY",
    "coerce_count",
    "MAX_GRID_COUNT",
    "normalize_length",
    "resolve_template",
    "preset_keys",
    "localized_preset_name",
]

CUSTOM_KEY: Final[str] = "custom"
AUTO_LENGTH: Final[str] = "auto"
DEFAULT_LENGTH_UNIT: Final[str] = "in"

_LENGTH_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<number>[0-9]+(?:\.[0-9]+)?|\.[0-9]+)\s*(?P<unit>in|cm|mm|pt|pc|px)?",
    re.IGNORECASE,
)
# A CSS length as emitted into the print stylesheet: number plus unit, no spaces.
_CSS_LENGTH_RE: Final[re.Pattern[str]] = re.compile(
    r"(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:in|cm|mm|pt|pc|px)",
    re.IGNORECASE,
)
_COUNT_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
MAX_GRID_COUNT: Final[int] = 100


@dataclass(frozen=True)
class SheetTemplate:
    """Concrete per-cell size and grid of a label sheet.

    ``rows`` is informational: the layout flows cells by ``columns`` only.
    """

    name: str
    width: str
    height: str
    columns: int
    rows: int

    def __post_init__(self) -> None:
        if not isinstance(self.columns, int) or self.columns < 1:
            raise TemplateError(f"columns must be an integer >= 1, got {self.columns!r}")
        if not isinstance(self.rows, int) or self.rows < 1:
            raise TemplateError(f"rows must be an integer >= 1, got {self.rows!r}")
        for label, value in (("width", self.width), ("height", self.height)):
            if value != AUTO_LENGTH and not (
                isinstance(value, str) and _CSS_LENGTH_RE.fullmatch(value)
            ):
                raise TemplateError(f"{label} must be a CSS length or 'auto', got {value!r}")

    @property
    def capacity(self) -> int:
        return self.columns * self.rows

    def rows_for(self, count: int) -> int:
        return math.ceil(count / self.columns) if count > 0 else 0

    def sheets_for(self, count: int) -> int:
        return math.ceil(count / self.capacity) if count > 0 else 0


@dataclass(frozen=True)
class PresetTemplate:
    key: str


@dataclass(frozen=True)
class CustomTemplate:
    """Raw, unvalidated text of the four custom-sheet form fields."""

    width: str = ""
    height: str = ""
    columns: str = ""
    rows: str = ""


TemplateChoice = Union[PresetTemplate, CustomTemplate]


PRESET_TEMPLATES: Mapping[str, SheetTemplate] = {
    "a4_65": SheetTemplate("A4 65-label", "1.5in", "0.83in", 3, 11),
    "a4_21": SheetTemplate("A4 21-label", "2.5in", "1.5in", 3, 7),
    "a4_10": SheetTemplate("A4 10-label", "3.9in", "2.25in", 2, 5),
    "a4_full": SheetTemplate("A4 full-page", "8.27in", "11.7in", 1, 1),
    CUSTOM_KEY: SheetTemplate("Custom", AUTO_LENGTH, AUTO_LENGTH, 1, 1),
}

_LOCALIZED_NAMES: Dict[str, Dict[str, str]] = {
    "a4_65": {"en": "A4 65-label (38.1 x 21.2 mm)", "pt": "A4 65 Etiquetas (38.1 x 21.2 mm)"},
    "a4_21": {"en": "A4 21-label (63.5 x 38.1 mm)", "pt": "A4 21 Etiquetas (63.5 x 38.1 mm)"},
    "a4_10": {"en": "A4 10-label (99.1 x 57 mm)", "pt": "A4 10 Etiquetas (99.1 x 57 mm)"},
    "a4_full": {"en": "A4 full-page (210 x 297 mm)", "pt": "A4 Página Toda (210 x 297 mm)"},
    CUSTOM_KEY: {"en": "Custom", "pt": "Personalizado"},
}


def preset_keys() -> List[str]:
    """Catalog keys in display order (custom last)."""
    return list(PRESET_TEMPLATES)


def localized_preset_name(key: str, lang: Literal["en", "pt"] = "en") -> str:
    if key not in _LOCALIZED_NAMES:
        raise TemplateError(f"Unknown sheet preset: {key!r}")
    return _LOCALIZED_NAMES[key][lang]


def coerce_count(raw: str) -> int:
    """
    Parse a columns/rows form field.

    Only plain ASCII digits are accepted. Blank text, anything else and values
    below 1 all become 1; values above MAX_GRID_COUNT are clamped. Never raises.

    >>> coerce_count(" 4 "), coerce_count("abc"), coerce_count("0"), coerce_count("1_0")
    (4, 1, 1, 1)
    """
    text = str(raw).strip()
    if not _COUNT_RE.fullmatch(text):
        logger.debug("Count field %r is not an integer, using 1", raw)
        return 1
    digits = text.lstrip("0") or "0"
    if len(digits) > len(str(MAX_GRID_COUNT)) or int(digits) > MAX_GRID_COUNT:
        logger.warning("Count field %r exceeds %d, clamping", raw, MAX_GRID_COUNT)
        return MAX_GRID_COUNT
    value = int(digits)
    return value if value >= 1 else 1


def normalize_length(raw: str) -> str:
    """
    Turn a width/height form field into a CSS length.

    A bare number is read as inches ("2" -> "2in"); a number with a CSS
    absolute unit is kept; anything else becomes "auto".
    """
    text = str(raw).strip()
    match = _LENGTH_RE.fullmatch(text)
    if match is None:
        if text:
            logger.warning("Unrecognized sheet length %r, falling back to auto", raw)
        return AUTO_LENGTH
    unit = (match.group("unit") or DEFAULT_LENGTH_UNIT).lower()
    return f"{match.group('number')}{unit}"


def resolve_template(choice: TemplateChoice) -> SheetTemplate:
    """
    Resolve a preset or custom choice into a concrete SheetTemplate.

    Raises:
        TemplateError: if a preset key is not in the catalog.
    """
    if isinstance(choice, CustomTemplate):
        template = SheetTemplate(
            name=PRESET_TEMPLATES[CUSTOM_KEY].name,
            width=normalize_length(choice.width),
            height=normalize_length(choice.height),
            columns=coerce_count(choice.columns),
            rows=coerce_count(choice.rows),
        )
        logger.debug("Custom template resolved: %s", template)
        return template

    if isinstance(choice, PresetTemplate):
        try:
            return PRESET_TEMPLATES[choice.key]
        except KeyError:
            raise TemplateError(f"Unknown sheet preset: {choice.key!r}") from None

    raise TypeError(
        f"choice must be PresetTemplate or CustomTemplate, got {type(choice)!r}"
    )
