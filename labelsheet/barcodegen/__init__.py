"""
barcodegen

Detection and generation of barcode artifacts.

- Classifies input text into CODE128, EAN13, UPC, EAN8 or QR.
- Linear symbologies render to PNG data URIs, QR renders to SVG data URIs.
- Bulk generation keeps output order equal to input order.

Public API:
    - detect: text -> Symbology (never raises)
    - generate / generate_bulk / generate_bulk_settled: async generation
    - parse_bulk_input: comma-separated text -> list of codes
    - LinearBarcodeGenerator: PNG renderer for linear symbologies (class)
    - QRCodeGenerator: SVG renderer for QR (class)

Examples:
    >>> import asyncio
    >>> from labelsheet.barcodegen import detect, generate
    >>> art = asyncio.run(generate("ABC123", detect("ABC123")))
    >>> art.data_uri.startswith("data:image/png;base64,")
    True

Dependencies:
    Pillow, qrcode, python-barcode
"""

from labelsheet.barcodegen.barcode_generator import LinearBarcodeGenerator
from labelsheet.barcodegen.detector import detect
from labelsheet.barcodegen.engine import (
    BulkItemResult,
    generate,
    generate_bulk,
    generate_bulk_settled,
    parse_bulk_input,
)
from labelsheet.barcodegen.matrix2d_generator import QRCodeGenerator

__all__ = [
    "detect",
    "generate",
    "generate_bulk",
    "generate_bulk_settled",
    "parse_bulk_input",
    "BulkItemResult",
    "LinearBarcodeGenerator",
    "QRCodeGenerator",
]
