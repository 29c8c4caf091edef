from __future__ import annotations

import io
import zipfile
from pathlib import PurePath
from typing import IO, Any

import pandas as pd

from ..core.exceptions import ValidationError

CSV_SUFFIXES = {".csv"}
EXCEL_SUFFIXES = {".xlsx"}


def read_tabular(stream: IO[bytes], filename: str) -> list[dict[str, Any]]:
    """Read an uploaded spreadsheet into a list of row dicts."""

    suffix = PurePath(filename or "").suffix.lower()
    if suffix not in CSV_SUFFIXES | EXCEL_SUFFIXES:
        raise ValidationError(f"Unsupported file type {suffix or filename!r}")

    data = stream.read()
    if not data:
        raise ValidationError("Uploaded file is empty")

    try:
        if suffix in CSV_SUFFIXES:
            df = pd.read_csv(io.BytesIO(data))
        else:
            df = pd.read_excel(io.BytesIO(data))
    except (ValueError, zipfile.BadZipFile) as e:
        raise ValidationError(f"Could not read {filename!r}: {e}") from e

    return df.to_dict(orient="records")
