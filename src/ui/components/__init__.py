"""UI components for Five-Card Draw."""

from src.ui.components.hand import render_hand
from src.ui.components.status import render_status
from src.ui.components.table_controls import render_table_controls

__all__ = [
    "render_hand",
    "render_status",
    "render_table_controls",
]
