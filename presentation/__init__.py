from .json_api import (
    OverlayResponse,
    to_overlay_response,
    to_json,
)
from .export import (
    overlay_to_csv,
    overlay_to_json_text,
    export_overlay_csv,
    export_overlay_json,
)

__all__ = [
    # JSON API
    "OverlayResponse",
    "to_overlay_response",
    "to_json",
    # Export
    "overlay_to_csv",
    "overlay_to_json_text",
    "export_overlay_csv",
    "export_overlay_json",
]
