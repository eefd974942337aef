"""
Unit tests for overlay export.

Tests cover:
- CSV columns, headers and empty cells for absent values
- JSON payloads with null for absent values
"""

import csv
import io
import json
from datetime import datetime

from domain import OverlayType
from domain.overlays import OverlayResult
from presentation import (
    export_overlay_csv,
    export_overlay_json,
    overlay_to_csv,
    to_json,
    to_overlay_response,
)

DATES = [datetime(2024, 1, d) for d in (2, 3, 4)]


def single_line():
    return OverlayResult(
        name="SMA(2)",
        overlay_type=OverlayType.SMA,
        parameters={"period": 2},
        series={"sma": [None, 1.5, 2.5]},
    )


def multi_line():
    return OverlayResult(
        name="Stochastic(2,1)",
        overlay_type=OverlayType.STOCHASTIC,
        parameters={"k_period": 2, "d_period": 1},
        series={"k": [None, 50.0, 100.0], "d": [None, 50.0, 100.0]},
    )


class TestCsv:
    """Tests for CSV output."""

    def test_single_line_with_dates(self):
        text = overlay_to_csv(single_line(), DATES, precision=2)
        assert text.splitlines() == [
            "date,SMA(2)",
            "2024-01-02,",
            "2024-01-03,1.50",
            "2024-01-04,2.50",
        ]

    def test_multi_line_headers(self):
        rows = list(csv.reader(io.StringIO(overlay_to_csv(multi_line()))))
        assert rows[0] == ["Stochastic(2,1) k", "Stochastic(2,1) d"]
        assert rows[1] == ["", ""]
        assert rows[2] == ["50.000000", "50.000000"]

    def test_without_header(self):
        text = overlay_to_csv(single_line(), include_header=False, precision=1)
        rows = list(csv.reader(io.StringIO(text)))
        assert rows == [[""], ["1.5"], ["2.5"]]

    def test_date_format(self):
        text = overlay_to_csv(single_line(), DATES, date_format="%d/%m/%Y")
        assert text.splitlines()[1] == "02/01/2024,"

    def test_missing_dates_written_empty(self):
        text = overlay_to_csv(single_line(), [None, None, DATES[2]], precision=1)
        assert text.splitlines()[1:] == [",", ",1.5", "2024-01-04,2.5"]

    def test_export_file(self, tmp_path):
        path = tmp_path / "sma.csv"
        export_overlay_csv(single_line(), path, DATES, precision=3)
        assert path.read_text(encoding="utf-8").splitlines()[2] == "2024-01-03,1.500"


class TestJson:
    """Tests for JSON output."""

    def test_payload(self):
        data = to_json(multi_line(), DATES)
        assert data == {
            "name": "Stochastic(2,1)",
            "type": "stochastic",
            "parameters": {"k_period": 2, "d_period": 1},
            "dates": ["2024-01-02", "2024-01-03", "2024-01-04"],
            "series": {"k": [None, 50.0, 100.0], "d": [None, 50.0, 100.0]},
        }

    def test_rounding_keeps_none(self):
        result = OverlayResult(
            name="EMA(3)",
            overlay_type=OverlayType.EMA,
            parameters={"period": 3},
            series={"ema": [None, None, 1.23456789]},
        )
        response = to_overlay_response(result, precision=3)
        assert response.series["ema"] == [None, None, 1.235]
        assert response.dates == []

    def test_export_file_uses_null(self, tmp_path):
        path = tmp_path / "sma.json"
        export_overlay_json(single_line(), path, DATES)
        text = path.read_text(encoding="utf-8")
        assert "null" in text
        assert json.loads(text)["series"]["sma"] == [None, 1.5, 2.5]
