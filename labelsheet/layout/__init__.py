"""Print layout of generated artifacts on label sheets."""

from labelsheet.layout.print_layout import DEFAULT_TITLE, PrintDocument, layout

__all__ = ["PrintDocument", "layout", "DEFAULT_TITLE"]
