"""
CSV price source.

Reads OHLC(V) bars from a spreadsheet export. Expected header (any case,
any column order): date, open, high, low, close, volume. The date and
volume columns are optional; an empty volume cell means "no volume".
"""

import csv
import logging
from datetime import datetime
from pathlib import Path

from domain import OHLCBar
from ports import DataError, ParseError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("open", "high", "low", "close")
OPTIONAL_COLUMNS = ("date", "volume")


class CsvPriceSource:
    """Load bars from a CSV file, oldest first."""

    def __init__(
        self,
        path: str | Path,
        date_format: str | None = None,
        validate: bool = True,
    ):
        """
        Args:
            path: CSV file path
            date_format: strptime format for the date column (default: ISO 8601)
            validate: Check OHLC invariants and chronological order
        """
        self.path = Path(path)
        self.date_format = date_format
        self.validate = validate

    @property
    def source_name(self) -> str:
        return f"csv:{self.path.name}"

    def load(self) -> list[OHLCBar]:
        """
        Read and parse every row.

        Raises:
            ParseError: If the file or a cell cannot be parsed
            DataError: If a column is missing, the file is empty, or
                (with validate) a bar violates OHLC invariants
        """
        rows = self._read_rows()

        if self.validate:
            for row, bar in rows:
                if not bar.is_valid():
                    raise DataError.invalid_bar(self.source_name, row, bar)
            self._check_order(rows)

        bars = [bar for _, bar in rows]

        logger.info(f"Loaded {len(bars)} bars from {self.path}")
        return bars

    def invalid_rows(self) -> list[tuple[int, OHLCBar]]:
        """Return (row number, bar) for every bar that violates OHLC invariants."""
        return [(row, bar) for row, bar in self._read_rows() if not bar.is_valid()]

    def _read_rows(self) -> list[tuple[int, OHLCBar]]:
        try:
            with open(self.path, newline="", encoding="utf-8-sig") as f:
                reader = csv.DictReader(f)
                columns = self._map_columns(reader.fieldnames)
                rows = []
                # WHY: row 1 is the header, so data starts at spreadsheet row 2
                for row, record in enumerate(reader, start=2):
                    if not any(isinstance(cell, str) and cell.strip() for cell in record.values()):
                        continue
                    rows.append((row, self._parse_row(record, columns, row)))
        except OSError as e:
            raise ParseError(self.source_name, "csv", str(e), cause=e) from e
        except csv.Error as e:
            raise ParseError(self.source_name, "csv", str(e), cause=e) from e

        if not rows:
            raise DataError.empty(self.source_name, "No price rows found")
        return rows

    def _map_columns(self, fieldnames: list[str] | None) -> dict[str, str]:
        """Map lowercase column names to the header as written."""
        if not fieldnames:
            raise DataError.empty(self.source_name, "Missing header row")

        columns = {name.strip().lower(): name for name in fieldnames if name}
        for required in REQUIRED_COLUMNS:
            if required not in columns:
                raise DataError.missing(self.source_name, required)
        return {
            key: columns[key]
            for key in REQUIRED_COLUMNS + OPTIONAL_COLUMNS
            if key in columns
        }

    def _parse_row(self, record: dict[str, str], columns: dict[str, str], row: int) -> OHLCBar:
        values = {
            key: self._parse_number(record.get(columns[key]), key, row)
            for key in REQUIRED_COLUMNS
        }

        volume = None
        if "volume" in columns:
            raw_volume = (record.get(columns["volume"]) or "").strip()
            if raw_volume:
                volume = self._parse_number(raw_volume, "volume", row)

        date = None
        if "date" in columns:
            date = self._parse_date(record.get(columns["date"]), row)

        return OHLCBar(volume=volume, date=date, **values)

    def _parse_number(self, raw: str | None, field: str, row: int) -> float:
        text = (raw or "").strip().replace(",", "")
        if not text:
            raise DataError(
                self.source_name,
                f"Empty {field} cell at row {row}",
                field=field,
                row=row,
            )
        try:
            return float(text)
        except ValueError as e:
            raise ParseError(
                self.source_name, "number", f"{field}={raw!r}", row=row, cause=e
            ) from e

    def _parse_date(self, raw: str | None, row: int) -> datetime | None:
        text = (raw or "").strip()
        if not text:
            return None
        try:
            if self.date_format:
                return datetime.strptime(text, self.date_format)
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise ParseError(self.source_name, "date", repr(text), row=row, cause=e) from e

    def _check_order(self, rows: list[tuple[int, OHLCBar]]) -> None:
        """Raise DataError if dated bars are not strictly ascending."""
        previous = None
        for row, bar in rows:
            if bar.date is None:
                continue
            if previous is not None and bar.date <= previous:
                raise DataError(
                    self.source_name,
                    f"Bars not in chronological order at row {row} ({bar.date:%Y-%m-%d})",
                    field="date",
                    row=row,
                )
            previous = bar.date
