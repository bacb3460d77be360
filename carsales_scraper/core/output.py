"""
CSV output for enriched vehicle records.

Classes:
    CsvRecordSink: Append-only CSV writer, one row per VehicleRecord.

Functions:
    build_output_path: Dated output file path, e.g. rentals10192026.csv.
"""

import csv
from datetime import date
from pathlib import Path
from typing import Optional, Union

from carsales_scraper.config.settings import (
    OUTPUT_DATE_FORMAT,
    OUTPUT_DIR,
    OUTPUT_FILE_PREFIX,
)
from carsales_scraper.core.models import CSV_HEADER, VehicleRecord
from carsales_scraper.utils.logger import get_logger

logger = get_logger(__name__)


def build_output_path(
    output_dir: Union[str, Path] = OUTPUT_DIR, run_date: Optional[date] = None
) -> Path:
    """Return ``<output_dir>/rentals<MMDDYYYY>.csv`` for the run date (today by default)."""
    run_date = run_date or date.today()
    return Path(output_dir) / f"{OUTPUT_FILE_PREFIX}{run_date.strftime(OUTPUT_DATE_FORMAT)}.csv"


class CsvRecordSink:
    """
    Append-only CSV writer.

    The header row is written when the sink is opened, so it always precedes
    the data rows. Every row is flushed right after it is written.

    Examples:
        >>> with CsvRecordSink(build_output_path()) as sink:
        ...     sink.write(record)
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.rows_written = 0
        self._file = None
        self._writer = None

    def open(self) -> "CsvRecordSink":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.path, mode="w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        self._writer.writerow(CSV_HEADER)
        self._file.flush()
        logger.debug(f"Opened output file {self.path}")
        return self

    def write(self, record: VehicleRecord) -> None:
        if self._writer is None:
            raise RuntimeError("CsvRecordSink is not open")
        self._writer.writerow(record.as_row())
        self._file.flush()
        self.rows_written += 1

    def close(self) -> None:
        if self._file is not None:
            self._file.flush()
            self._file.close()
            self._file = None
            self._writer = None

    def __enter__(self) -> "CsvRecordSink":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
