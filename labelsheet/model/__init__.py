"""Domain model: symbologies, generated artifacts and sheet templates."""

from labelsheet.model.artifact import GeneratedArtifact
from labelsheet.model.enums import GENERAL_ALIAS, ArtifactFormat, Symbology
from labelsheet.model.sheet import (
    CUSTOM_KEY,
    PRESET_TEMPLATES,
    CustomTemplate,
    PresetTemplate,
    SheetTemplate,
    TemplateChoice,
    resolve_template,
)

__all__ = [
    "ArtifactFormat",
    "Symbology",
    "GENERAL_ALIAS",
    "GeneratedArtifact",
    "SheetTemplate",
    "PresetTemplate",
    "CustomTemplate",
    "TemplateChoice",
    "PRESET_TEMPLATES",
    "CUSTOM_KEY",
    "resolve_template",
]
