"""
Five-Card Draw - Read Models

Pydantic models describing what the presentation layer is allowed to see of
a round. The dealer's cards are only included once they have been revealed.
"""

from pydantic import BaseModel, Field

from src.engine.base import Card


class CardView(BaseModel):
    """A face-up card as rendered by the UI."""

    rank: str = Field(max_length=1)
    suit: str = Field(max_length=1)
    label: str
    display_rank: str
    is_red: bool

    model_config = {"frozen": True}

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        return cls(
            rank=card.rank.symbol,
            suit=card.suit.value,
            label=card.label,
            display_rank=card.display_rank,
            is_red=card.is_red,
        )


class OutcomeView(BaseModel):
    """Settlement of the last completed round."""

    outcome: str
    player_hand_name: str
    dealer_hand_name: str
    payout: int = Field(ge=0)
    message: str


class TableSnapshot(BaseModel):
    """Everything the UI needs to draw the table for one rerun."""

    phase: str
    balance: int
    pot: int = Field(ge=0)
    message: str
    player_hand: list[CardView] = Field(default_factory=list)
    dealer_hand: list[CardView] | None = None
    dealer_card_count: int = 0
    pending_discards: list[int] = Field(default_factory=list)
    dealer_pending: bool = False
    last_outcome: OutcomeView | None = None
    rounds_played: int = 0
    can_deal: bool = False
    can_draw: bool = False
    is_game_over: bool = False

    model_config = {"frozen": True}
