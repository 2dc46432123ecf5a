"""CSS injection and HTML banner helpers for the card table theme."""

from pathlib import Path

import streamlit as st

from src.engine.models import OutcomeView


def load_css() -> None:
    """Inject the card table CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "table.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_outcome_banner(outcome: OutcomeView) -> None:
    """Render the showdown verdict with a win/lose/push style."""
    st.markdown(
        f'<div class="outcome-banner {outcome.outcome}">'
        f"<h3>{outcome.player_hand_name} vs {outcome.dealer_hand_name}</h3>"
        f"<p>{outcome.message}</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_game_over(balance: int) -> None:
    """Render the game over overlay."""
    st.markdown(
        '<div class="game-over-overlay">'
        "<h2>GAME OVER</h2>"
        f"<p>You ran out of chips. Final Score: {balance}</p>"
        "</div>",
        unsafe_allow_html=True,
    )
