"""Table control buttons: Deal, Draw, New Game."""

from __future__ import annotations

import streamlit as st

from src.engine.models import TableSnapshot


def render_table_controls(snapshot: TableSnapshot) -> str | None:
    """Render the buttons that are legal in the current phase.

    Returns:
        ``"deal"``, ``"draw"``, ``"new_game"``, or ``None`` if no action taken.
    """
    if snapshot.is_game_over:
        if st.button("New Game", key="btn_new_game", use_container_width=True, type="primary"):
            return "new_game"
        return None

    if snapshot.dealer_pending:
        st.caption("Dealer is drawing...")
        return None

    cols = st.columns(2)

    with cols[0]:
        if st.button(
            "Deal",
            key=f"btn_deal_{snapshot.rounds_played}",
            use_container_width=True,
            disabled=not snapshot.can_deal,
            type="primary",
        ):
            return "deal"

    with cols[1]:
        count = len(snapshot.pending_discards)
        label = f"Draw {count} Card{'s' if count != 1 else ''}" if count else "Stand Pat"
        if st.button(
            label,
            key=f"btn_draw_{snapshot.rounds_played}",
            use_container_width=True,
            disabled=not snapshot.can_draw,
        ):
            return "draw"

    return None
