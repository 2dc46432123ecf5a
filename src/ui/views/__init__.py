"""Page renderers for Five-Card Draw."""

from src.ui.views.table import render_table_page

__all__ = ["render_table_page"]
