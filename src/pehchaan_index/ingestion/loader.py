"""Load the update-activity CSV from disk."""
from __future__ import annotations

import logging
from pathlib import Path

from config.settings import settings
from pehchaan_index.ingestion.csv_parser import ParseResult, parse_csv

logger = logging.getLogger(__name__)


def load_records(path: Path | str | None = None, strict: bool | None = None) -> ParseResult:
    """Read a CSV file and parse it into records.

    Args:
        path: CSV file. Defaults to ``settings.data_csv_path``.
        strict: Raise on malformed rows. Defaults to ``settings.strict_parsing``.

    Returns:
        ParseResult with the accepted and quarantined rows.
    """
    path = Path(path or settings.data_csv_path)
    if strict is None:
        strict = settings.strict_parsing

    if not path.is_file():
        logger.error("Data file not found: %s", path)
        raise FileNotFoundError(f"Data file not found: {path}")

    # utf-8-sig drops a leading BOM from spreadsheet exports
    text = path.read_text(encoding="utf-8-sig")
    result = parse_csv(text, strict=strict)

    logger.info(
        "Loaded %d records from %s (%d quarantined)",
        len(result.records), path, len(result.quarantined),
    )
    return result
