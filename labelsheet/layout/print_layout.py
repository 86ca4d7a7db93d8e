"""
RU: Раскладка готовых кодов по листу этикеток: HTML-документ с CSS-сеткой для печати из браузера.
EN: Label sheet layout: an HTML document with a CSS grid, ready for the browser's print pipeline.

Each artifact becomes one cell of exactly template.width x template.height. The
grid has template.columns columns; rows follow from the item count. The image is
centered and scaled down to fit its cell, never cropped.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Final, Optional, Sequence

from labelsheet.model.artifact import GeneratedArtifact
from labelsheet.model.sheet import SheetTemplate

logger = logging.getLogger(__name__)

__all__ = ["PrintDocument", "layout", "DEFAULT_TITLE"]

DEFAULT_TITLE: Final[str] = "Print barcodes and labels"
IMAGE_ALT: Final[str] = "Barcode"

_DOCUMENT: Final[str] = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
      body {{ margin: 0; padding: 0; }}
      .label-container {{
        display: grid;
        grid-template-columns: repeat({columns}, 1fr);
        grid-gap: 0;
        gap: 0;
      }}
      .label {{
        width: {width};
        height: {height};
        display: flex;
        justify-content: center;
        align-items: center;
        overflow: hidden;
        page-break-inside: avoid;
        break-inside: avoid;
      }}
      .label img {{
        max-width: 100%;
        max-height: 100%;
        object-fit: contain;
      }}
      @media print {{
        @page {{ margin: 0; }}
        body {{ margin: 0.5cm; }}
      }}
    </style>
  </head>
  <body>
    <div class="label-container">{cells}
    </div>
  </body>
</html>
"""

_CELL: Final[str] = """
      <div class="label">
        <img src="{src}" alt="{alt}">
      </div>"""


@dataclass(frozen=True)
class PrintDocument:
    """Print-ready arrangement of artifacts on a sheet."""

    html: str
    template: SheetTemplate
    cell_count: int

    @property
    def columns(self) -> int:
        return self.template.columns

    @property
    def rows(self) -> int:
        return self.template.rows_for(self.cell_count)

    @property
    def sheets(self) -> int:
        return self.template.sheets_for(self.cell_count)

    def __str__(self) -> str:
        return self.html


def layout(
    template: SheetTemplate,
    artifacts: Sequence[GeneratedArtifact],
    *,
    title: Optional[str] = None,
) -> PrintDocument:
    """
    Arrange artifacts on the sheet described by ``template``.

    Args:
        template: Resolved sheet template.
        artifacts: Artifacts in print order; may be empty.
        title: Document title, DEFAULT_TITLE if omitted.

    Returns:
        PrintDocument whose ``html`` is a complete document.
    """
    cells = "".join(
        _CELL.format(
            src=html.escape(artifact.data_uri, quote=True),
            alt=html.escape(f"{IMAGE_ALT} {position}", quote=True),
        )
        for position, artifact in enumerate(artifacts, start=1)
    )
    document = _DOCUMENT.format(
        title=html.escape(title or DEFAULT_TITLE),
        columns=template.columns,
        width=template.width,
        height=template.height,
        cells=cells,
    )
    logger.debug(
        "Layout: %d cells on %s (%d columns)",
        len(artifacts),
        template.name,
        template.columns,
    )
    return PrintDocument(html=document, template=template, cell_count=len(artifacts))
