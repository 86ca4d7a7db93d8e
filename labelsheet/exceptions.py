# -*- coding: utf-8 -*-
"""
RU: Иерархия исключений генератора этикеток. Каждый вид ошибки отдельным подклассом,
чтобы UI-оболочка могла показать пользователю точное сообщение.

EN: Exception hierarchy for the label generator. Every error kind is its own subclass
so the UI shell can tell them apart and present a precise message.

Guidelines:
- Format detection never raises; it is not represented here.
- Generators raise EncodingError and never substitute a placeholder artifact.
- Input-shape errors (EmptyInputError, MalformedBulkInputError) are raised before
  any rendering starts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from labelsheet.model.enums import Symbology

__all__ = [
    "LabelSheetError",
    "EncodingError",
    "EmptyInputError",
    "MalformedBulkInputError",
    "TemplateError",
]


class LabelSheetError(Exception):
    """Base exception for all label generation failures."""

    def __init__(
        self, message: str = "", *, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.__cause__ = cause


class EncodingError(LabelSheetError):
    """Raised when text cannot be encoded with the requested symbology.

    Attributes:
        symbology: Symbology that rejected the text, if known.
        index: Position of the failing text inside a bulk run, if any.
    """

    def __init__(
        self,
        message: str = "",
        *,
        symbology: Optional["Symbology"] = None,
        index: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.symbology = symbology
        self.index = index


class EmptyInputError(LabelSheetError):
    """Raised when a single generation request carries blank text."""


class MalformedBulkInputError(LabelSheetError):
    """Raised when bulk text yields no non-empty codes after split/trim."""


class TemplateError(LabelSheetError):
    """Raised for unknown presets or sheet templates violating columns/rows >= 1."""
