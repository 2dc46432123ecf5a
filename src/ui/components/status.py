"""Status panel: chips, pot and the last message."""

from __future__ import annotations

import streamlit as st

from src.engine.models import TableSnapshot


def render_status(snapshot: TableSnapshot) -> None:
    """Render balance, pot and the current status message."""
    cols = st.columns(3)
    cols[0].metric("Chips", f"${snapshot.balance}")
    cols[1].metric("Pot", f"${snapshot.pot}")
    cols[2].metric("Rounds", snapshot.rounds_played)

    html = ['<div class="status-message">', snapshot.message, "</div>"]
    st.markdown("".join(html), unsafe_allow_html=True)
