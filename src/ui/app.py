"""Five-Card Draw - Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


_RULES = """\
**Goal:** Beat the dealer's five-card hand!

**Round:**
- Ante is posted and matched by the dealer
- Mark any cards (0-5) to discard, then **Draw**
- The dealer keeps pairs or better and stands pat on a straight or better
- Best hand takes the pot; a tie returns your ante

**Hand Ranks (high to low):**
| Hand | Example |
|---|---|
| Royal Flush | A K Q J 10, one suit |
| Straight Flush | 9 8 7 6 5, one suit |
| Four of a Kind | 9 9 9 9 2 |
| Full House | K K K 7 7 |
| Flush | Five of one suit |
| Straight | 5 4 3 2 A |
| Three of a Kind | 8 8 8 Q J |
| Two Pair | 7 7 4 4 A |
| One Pair | 6 6 Q 8 4 |
| High Card | A K J 9 4 |
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        st.markdown("### How to Play")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="5-Card Draw",
        page_icon="🃏",
        layout="centered",
        initial_sidebar_state="collapsed",
    )

    from src.config import get_settings, setup_logging
    from src.ui.themes import load_css
    from src.ui.views.table import render_table_page

    settings = get_settings()
    setup_logging(settings.log_level, debug=settings.debug)
    load_css()

    render_table_page()
    _render_sidebar_rules()


if __name__ == "__main__":
    main()
