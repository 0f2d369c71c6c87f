"""
Helpers for pulling flat record lists out of raw reference table dumps.

The geocode tables ship as phpMyAdmin JSON exports, which wrap the rows in a
list of envelope entries:

    [
        {"type": "header", "version": "5.1.1", "comment": "Export to JSON plugin"},
        {"type": "database", "name": "bd_geocode"},
        {"type": "table", "name": "divisions", "database": "bd_geocode", "data": [...]},
    ]

Only the "table" entry carries rows; everything else is export metadata.
"""

import io
import json
from pathlib import Path
from typing import Any

import polars as pl

from bd_geocode.errors import ReferenceDataError

DISCRIMINATOR_KEY = "type"
TABLE_TAG = "table"
PAYLOAD_KEY = "data"


def extract_records(
    raw_table: Any,
    *,
    discriminator_key: str = DISCRIMINATOR_KEY,
    table_tag: str = TABLE_TAG,
    payload_key: str = PAYLOAD_KEY,
) -> list[dict[str, Any]]:
    """
    Return the row list of the first envelope entry tagged as a data table.

    params:
        raw_table: The decoded dump. Expected to be a list of envelope entries.
        discriminator_key: Envelope key holding the entry type.
        table_tag: Discriminator value marking the data table entry.
        payload_key: Envelope key holding the row list.

    returns:
        records (list[dict]): The rows, or an empty list when the dump has no
        table entry or its payload is not a list. Never raises, since a
        missing table is the normal "not loaded yet" state.
    """
    if not isinstance(raw_table, list):
        return []
    table = next(
        (
            entry for entry in raw_table
            if isinstance(entry, dict) and entry.get(discriminator_key) == table_tag
        ),
        None,
    )
    if table is None:
        return []
    payload = table.get(payload_key)
    if not isinstance(payload, list):
        return []
    return [row for row in payload if isinstance(row, dict)]


def csv_bytes_to_records(data: bytes, *, infer_schema_length: int | None = 1000) -> list[dict[str, Any]]:
    df = pl.read_csv(io.BytesIO(data), infer_schema_length=infer_schema_length)
    return df.to_dicts()


def read_table_file(path: str | Path, **envelope_keys: str) -> list[dict[str, Any]]:
    """
    Read a single reference table file into a list of records.

    .json files are treated as envelope dumps and go through extract_records.
    .csv files have no envelope and are read directly (header row required).

    Raises:
        ReferenceDataError: If the file cannot be decoded or has an unsupported suffix.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            raw = json.loads(path.read_text(encoding="utf-8"))
            return extract_records(raw, **envelope_keys)
        if suffix == ".csv":
            return csv_bytes_to_records(path.read_bytes())
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, pl.exceptions.PolarsError) as error:
        message = f"Error reading reference table: {path} Error: {error}"
        raise ReferenceDataError(message, path=str(path)) from error
    raise ReferenceDataError(f"Unsupported reference table format: {path}", path=str(path))
