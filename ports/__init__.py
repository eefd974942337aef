from .sources import (
    PriceSource,
    SourceError,
    ParseError,
    DataError,
)

__all__ = [
    "PriceSource",
    "SourceError",
    "ParseError",
    "DataError",
]
