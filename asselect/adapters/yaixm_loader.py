"""YAIXM document loader.

Decodes a YAIXM JSON document (file, text or already parsed dict) into the
immutable ``Yaixm`` contract.  Any structural problem is reported as a
single ``DatasetDecodeError``; there is no partial decode.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from asselect.contracts.yaixm import Yaixm
from asselect.errors import DatasetDecodeError

logger = logging.getLogger(__name__)


def load_yaixm(path: Path) -> Yaixm:
    """Read and decode a YAIXM JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetDecodeError(f"Cannot read {path}: {exc}") from exc
    return parse_yaixm(text)


def parse_yaixm(document: str | bytes | dict[str, Any]) -> Yaixm:
    """Decode a YAIXM document.

    Raises:
        DatasetDecodeError: invalid JSON or missing/invalid required fields.
    """
    if isinstance(document, (str, bytes)):
        try:
            document = json.loads(document)
        except ValueError as exc:
            raise DatasetDecodeError(f"Invalid JSON: {exc}") from exc

    try:
        yaixm = Yaixm.model_validate(document)
    except ValidationError as exc:
        raise DatasetDecodeError(
            f"Invalid YAIXM document ({exc.error_count()} errors): {_first_error(exc)}"
        ) from exc

    logger.info(
        "Decoded YAIXM %s: %d airspace, %d RAT, %d LOA, %d obstacles, %d services",
        yaixm.release.cycle_date,
        len(yaixm.airspace),
        len(yaixm.rat),
        len(yaixm.loa),
        len(yaixm.obstacle),
        len(yaixm.service),
    )
    return yaixm


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}"
