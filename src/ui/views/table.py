"""Table page: the player's hand, the dealer's hand and the round controls."""

from __future__ import annotations

import streamlit as st

from src.config import get_settings
from src.engine.round import RoundController
from src.ui.components.hand import render_hand
from src.ui.components.status import render_status
from src.ui.components.table_controls import render_table_controls
from src.ui.themes.animations import render_game_over, render_outcome_banner


def get_controller() -> RoundController:
    """Return the session's controller, creating it on first use."""
    ss = st.session_state
    if "controller" not in ss:
        ss["controller"] = RoundController.from_settings(get_settings())
    return ss["controller"]


@st.fragment(run_every=0.5)
def _watch_dealer_turn() -> None:
    """Poll until the scheduled dealer turn has resolved, then rerun the app."""
    controller = get_controller()
    if not controller.is_dealer_pending:
        st.rerun(scope="app")
    st.caption("Dealer is drawing...")


def render_table_page() -> None:
    """Render the main table."""
    controller = get_controller()
    snapshot = controller.snapshot()

    st.title("5-Card Draw")
    render_status(snapshot)

    if snapshot.is_game_over:
        render_game_over(snapshot.balance)
    elif snapshot.last_outcome is not None and snapshot.phase == "round-over":
        render_outcome_banner(snapshot.last_outcome)

    render_hand(
        "Dealer",
        snapshot.dealer_hand,
        hidden_count=snapshot.dealer_card_count,
        key_prefix="dealer",
    )

    clicked = render_hand(
        "Your Hand",
        snapshot.player_hand,
        selected=set(snapshot.pending_discards),
        selectable=snapshot.can_draw,
        key_prefix="player",
    )
    if clicked is not None:
        result = controller.toggle_discard(clicked)
        if not result.ok:
            st.warning(result.message)
        st.rerun()

    action = render_table_controls(snapshot)
    if action == "deal":
        result = controller.start_round()
    elif action == "draw":
        result = controller.confirm_draw()
    elif action == "new_game":
        result = controller.new_game()
    else:
        result = None

    if result is not None:
        if not result.ok:
            st.warning(result.message)
        else:
            st.rerun()

    if snapshot.dealer_pending:
        _watch_dealer_turn()
