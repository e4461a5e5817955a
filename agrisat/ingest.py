# agrisat/ingest.py
import logging
from pathlib import Path
from typing import Callable, List, Optional

import pandas as pd

from .divisions import division_dirname
from .errors import DataFileNotFoundError, DataParseError
from .schemas import RawRecord

logger = logging.getLogger(__name__)

VALUE_COLUMN = "Mean"


def division_data_dir(data_dir: str, division: str) -> Path:
    return Path(data_dir) / division_dirname(division)


def read_division_csv(data_dir: str, division: str, filename: str) -> pd.DataFrame:
    """Read ``filename`` from the division's data directory.

    The first row is the header, numeric-looking columns come back numeric
    and blank lines are skipped.
    """
    ddir = division_data_dir(data_dir, division)
    if not ddir.is_dir():
        raise DataFileNotFoundError(f"Data directory not found for {division}: {ddir}")
    path = ddir / filename
    if not path.is_file():
        raise DataFileNotFoundError(f"File not found for {division}: {filename}")

    logger.debug("reading %s", path)
    try:
        frame = pd.read_csv(path, skip_blank_lines=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataParseError(f"Could not parse {filename} for {division}: {e}") from e

    frame.columns = [str(c).strip() for c in frame.columns]
    return frame


def _opt_float(v) -> Optional[float]:
    return None if pd.isna(v) else float(v)


def _opt_int(v) -> Optional[int]:
    return None if pd.isna(v) else int(v)


def load_records(
    data_dir: str,
    division: str,
    filename: str,
    quality_labeler: Optional[Callable[[int], str]] = None,
) -> List[RawRecord]:
    """Parse a statistics file into RawRecords, in file order.

    Cells in the ``Mean`` column that are not numbers become ``mean=None``;
    callers decide whether such rows count.
    """
    frame = read_division_csv(data_dir, division, filename)
    if VALUE_COLUMN not in frame.columns:
        raise DataParseError(f"{filename} for {division} has no '{VALUE_COLUMN}' column")

    n = len(frame)
    means = pd.to_numeric(frame[VALUE_COLUMN], errors="coerce")
    dates = frame["Date"] if "Date" in frame.columns else pd.Series([None] * n)
    flags = (
        pd.to_numeric(frame["FlagCode"], errors="coerce")
        if "FlagCode" in frame.columns
        else pd.Series([None] * n, dtype="float64")
    )
    labels = frame["Quality_Simple"] if "Quality_Simple" in frame.columns else pd.Series([None] * n)

    records = []
    for date, mean, flag, label in zip(dates, means, flags, labels):
        flag_code = _opt_int(flag)
        quality = None if pd.isna(label) else str(label)
        if quality is None and flag_code is not None and quality_labeler is not None:
            quality = quality_labeler(flag_code)
        records.append(
            RawRecord(
                date="" if pd.isna(date) else str(date),
                mean=_opt_float(mean),
                flag_code=flag_code,
                quality_label=quality,
            )
        )
    return records
