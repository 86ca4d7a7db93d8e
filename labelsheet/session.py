from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from labelsheet.barcodegen.detector import detect
from labelsheet.barcodegen.engine import generate, generate_bulk, parse_bulk_input
from labelsheet.config import get_config
from labelsheet.exceptions import EmptyInputError
from labelsheet.layout.print_layout import PrintDocument, layout
from labelsheet.model.artifact import GeneratedArtifact
from labelsheet.model.enums import Symbology
from labelsheet.model.sheet import (
    CustomTemplate,
    PresetTemplate,
    SheetTemplate,
    TemplateChoice,
    resolve_template,
)

logger = logging.getLogger(__name__)

__all__ = [
    "LabelSession",
    "generate_one",
    "generate_many",
    "build_print_document",
]


def _default_choice() -> TemplateChoice:
    return PresetTemplate(get_config().get("default_template", "a4_65"))


def _session_config() -> Dict[str, Any]:
    return dict(get_config())


@dataclass
class LabelSession:
    """
    In-memory state of one label-printing session.

    Holds the selected sheet template and the artifacts of the latest
    generation run. Generation runs replace ``artifacts`` wholesale; callers
    must not start a new run before the previous one resolves.
    """

    template_choice: TemplateChoice = field(default_factory=_default_choice)
    artifacts: List[GeneratedArtifact] = field(default_factory=list)
    config: Dict[str, Any] = field(default_factory=_session_config)

    @property
    def template(self) -> SheetTemplate:
        """The current choice resolved to a concrete template."""
        return resolve_template(self.template_choice)

    def select_preset(self, key: str) -> SheetTemplate:
        """Select a catalog preset. Raises TemplateError for unknown keys."""
        choice = PresetTemplate(key)
        template = resolve_template(choice)
        self.template_choice = choice
        logger.info("Sheet preset selected: %s", template.name)
        return template

    def set_custom_template(
        self, width: str = "", height: str = "", columns: str = "", rows: str = ""
    ) -> SheetTemplate:
        """Use a custom sheet built from the raw form fields."""
        self.template_choice = CustomTemplate(width, height, columns, rows)
        template = self.template
        logger.info(
            "Custom sheet: %s x %s, %d x %d",
            template.width,
            template.height,
            template.columns,
            template.rows,
        )
        return template

    def clear(self) -> None:
        self.artifacts = []


async def generate_one(
    session: LabelSession,
    text: str,
    symbology: Optional[Union[Symbology, str]] = None,
) -> GeneratedArtifact:
    """
    Generate a single code and make it the session's only artifact.

    Args:
        session: Session to update.
        text: Raw input text, encoded as given.
        symbology: Explicit symbology or tag; detected from ``text`` if None.

    Raises:
        EmptyInputError: if ``text`` is blank.
        EncodingError: if ``text`` is invalid for the symbology. The session
            keeps its previous artifacts.
    """
    if not text.strip():
        raise EmptyInputError("Please enter a valid input")
    chosen = symbology if symbology is not None else detect(text)
    artifact = await generate(text, chosen, config=session.config)
    session.artifacts = [artifact]
    return artifact


async def generate_many(session: LabelSession, raw_text: str) -> List[GeneratedArtifact]:
    """
    Generate one code per comma-separated token of ``raw_text``.

    Raises:
        MalformedBulkInputError: if no token remains after split/trim.
        EncodingError: if any token fails; the session is left untouched.
    """
    codes = parse_bulk_input(raw_text)
    artifacts = await generate_bulk(codes, config=session.config)
    session.artifacts = artifacts
    return artifacts


def build_print_document(session: LabelSession, title: Optional[str] = None) -> PrintDocument:
    """Lay out the session's artifacts on its current sheet template."""
    return layout(
        session.template,
        session.artifacts,
        title=title or session.config.get("print_title"),
    )
