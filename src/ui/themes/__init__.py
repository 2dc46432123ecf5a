"""Card table theme for Five-Card Draw."""

from src.ui.themes.animations import load_css, render_game_over, render_outcome_banner

__all__ = [
    "load_css",
    "render_game_over",
    "render_outcome_banner",
]
