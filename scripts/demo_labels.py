#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Demo script for the label generator.

Generates a mixed batch of codes, writes each image next to a printable
HTML sheet.

Usage:
    python scripts/demo_labels.py [output_dir]
"""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from labelsheet import (  # noqa: E402
    LabelSession,
    build_print_document,
    check_dependencies,
    detect,
    generate_bulk_settled,
    generate_many,
    parse_bulk_input,
)
from labelsheet.model.sheet import localized_preset_name  # noqa: E402

DEMO_INPUT = "4221735075026, 036000291452, 96385074, ABC123, https://example.com/item/42"


def print_banner(text: str) -> None:
    """Print section banner."""
    print()
    print("=" * 70)
    print(f"  {text}")
    print("=" * 70)


def print_success(text: str) -> None:
    print(f"✅ {text}")


def print_info(text: str) -> None:
    print(f"ℹ️  {text}")


def check_availability() -> None:
    print_banner("🔍 Checking Rendering Dependencies")

    deps = check_dependencies()
    for name, available in deps.items():
        print_info(f"{name}: {available}")

    if not all(deps.values()):
        print()
        print("❌ Missing rendering dependencies!")
        print("   Install: pip install Pillow qrcode python-barcode")
        sys.exit(1)

    print_success("All rendering dependencies available!")


def demo_detection() -> None:
    print_banner("🔎 Demo: Format Detection")
    for code in parse_bulk_input(DEMO_INPUT):
        print(f"   {code:<32} -> {detect(code).value}")


def demo_settled() -> None:
    """Show the per-item report when some inputs are invalid."""
    print_banner("🧪 Demo: Partial Failure Report")
    texts = ["ABC123", "A" * 81, "hello"]
    results = asyncio.run(generate_bulk_settled(texts))
    for result in results:
        status = "ok" if result.ok else f"failed: {result.error}"
        print(f"   [{result.index}] {result.text[:20]:<20} {status}")


def demo_sheet(output_dir: Path) -> None:
    print_banner("🖨️  Demo: Label Sheet")

    session = LabelSession()
    template = session.select_preset("a4_21")
    print_info(f"Sheet: {localized_preset_name('a4_21')} ({template.columns} columns)")

    start = time.perf_counter()
    artifacts = asyncio.run(generate_many(session, DEMO_INPUT))
    elapsed = (time.perf_counter() - start) * 1000
    print_success(f"Generated {len(artifacts)} codes in {elapsed:.1f} ms")

    output_dir.mkdir(parents=True, exist_ok=True)
    stamp = int(time.time() * 1000)
    for offset, artifact in enumerate(artifacts):
        path = output_dir / artifact.suggested_filename(stamp + offset)
        path.write_bytes(artifact.payload())
        print(f"   {path.name} ({len(artifact.payload())} bytes)")

    document = build_print_document(session)
    sheet_path = output_dir / "labels.html"
    sheet_path.write_text(document.html, encoding="utf-8")
    print_success(f"Print sheet: {sheet_path} ({document.rows} rows, {document.sheets} sheet)")


def main() -> None:
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("labels_out")

    try:
        check_availability()
        demo_detection()
        demo_settled()
        demo_sheet(output_dir)

        print()
        print_banner("🎉 All Demos Completed Successfully!")
        print(f"   Open {output_dir / 'labels.html'} in a browser and print it.")
        print()

    except KeyboardInterrupt:
        print()
        print("❌ Demo interrupted by user")
        sys.exit(1)
    except Exception as e:
        print()
        print(f"❌ Error: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
