"""Hand component: renders five cards with discard toggles."""

from __future__ import annotations

import streamlit as st

from src.engine.models import CardView


def _card_html(card: CardView, selected: bool) -> str:
    classes = ["card", "red" if card.is_red else "black"]
    if selected:
        classes.append("selected")
    return (
        f'<div class="{" ".join(classes)}">'
        f'<span class="value">{card.display_rank}</span>'
        f'<span class="suit">{card.suit}</span>'
        "</div>"
    )


def render_hand(
    title: str,
    cards: list[CardView] | None,
    hidden_count: int = 0,
    selected: set[int] | None = None,
    selectable: bool = False,
    key_prefix: str = "hand",
) -> int | None:
    """Render a row of cards.

    Args:
        title: Caption above the row (e.g. ``"Your Hand"``).
        cards: Face-up cards, or ``None`` to draw ``hidden_count`` card backs.
        hidden_count: Number of card backs shown when ``cards`` is ``None``.
        selected: Indices currently marked for discard.
        selectable: Show per-card discard toggles.
        key_prefix: Prefix for widget keys so two hands never collide.

    Returns:
        Index of the card whose toggle was clicked, or ``None``.
    """
    selected = selected or set()
    st.markdown(f"#### {title}")

    if cards is None:
        backs = '<div class="card back"></div>' * hidden_count
        placeholders = '<div class="card placeholder"></div>' * (5 if hidden_count == 0 else 0)
        st.markdown(f'<div class="hand">{backs}{placeholders}</div>', unsafe_allow_html=True)
        return None

    if not cards:
        st.markdown(
            '<div class="hand">' + '<div class="card placeholder"></div>' * 5 + "</div>",
            unsafe_allow_html=True,
        )
        return None

    html = "".join(_card_html(card, i in selected) for i, card in enumerate(cards))
    st.markdown(f'<div class="hand">{html}</div>', unsafe_allow_html=True)

    if not selectable:
        return None

    clicked: int | None = None
    cols = st.columns(len(cards))
    for i, col in enumerate(cols):
        with col:
            label = "Keep" if i in selected else "Discard"
            if st.button(
                label,
                key=f"{key_prefix}_{i}_{cards[i].label}",
                use_container_width=True,
                type="primary" if i in selected else "secondary",
            ):
                clicked = i
    return clicked
