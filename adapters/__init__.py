from .csv_source import CsvPriceSource

__all__ = [
    "CsvPriceSource",
]
