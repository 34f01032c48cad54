"""Command line entry point.

Usage:
    python -m asselect.cli --yaixm yaixm.json --settings settings.json --output openair.txt
    python -m asselect.cli --yaixm yaixm.json --list
"""

from __future__ import annotations

import argparse
import logging
import platform
import sys
from pathlib import Path

from asselect import __version__
from asselect.adapters.overlay_loader import load_overlays
from asselect.adapters.yaixm_loader import load_yaixm
from asselect.contracts.settings import Settings
from asselect.errors import DatasetDecodeError
from asselect.services.convert import convert
from asselect.services.features import selection_lists

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert YAIXM airspace to OpenAir")
    parser.add_argument("--yaixm", type=Path, required=True, help="Path to YAIXM JSON file")
    parser.add_argument("--settings", type=Path, help="Path to settings JSON file")
    parser.add_argument("--overlay-dir", type=Path, help="Directory holding overlay_*.txt files")
    parser.add_argument("--client-id", default=None, help="Client identifier for the header")
    parser.add_argument("--output", type=Path, help="Output file (default: suggested filename)")
    parser.add_argument("--list", action="store_true", help="List selectable names and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        yaixm = load_yaixm(args.yaixm)
    except DatasetDecodeError as exc:
        logger.error("Cannot load airspace data: %s", exc)
        return 1

    if args.list:
        lists = selection_lists(yaixm)
        print(f"AIRAC: {lists.airac_date}")
        for title, names in (
            ("Gliding sites", lists.gliding_sites),
            ("Temporary restrictions", lists.rat),
            ("Local agreements", lists.loa),
            ("Wave boxes", lists.wave),
        ):
            print(f"\n{title}:")
            for name in names:
                print(f"  {name}")
        return 0

    settings = Settings()
    if args.settings:
        try:
            settings = Settings.from_json(args.settings.read_text(encoding="utf-8"))
        except OSError as exc:
            logger.error("Cannot read settings: %s", exc)
            return 1

    overlays = load_overlays(args.overlay_dir) if args.overlay_dir else None
    client_id = args.client_id or _default_client_id()

    result = convert(yaixm, settings, client_id, overlays)
    if not result.success:
        logger.error("Conversion failed [%s]: %s", result.error.code, result.error.message)
        return 1

    output = args.output or Path(result.data.filename)
    output.write_text(result.data.text, encoding="utf-8")
    logger.info("Wrote %d volumes to %s", result.data.volume_count, output)
    return 0


def _default_client_id() -> str:
    return f"asselect-cli/{__version__} ({platform.system()})"


if __name__ == "__main__":
    sys.exit(main())
