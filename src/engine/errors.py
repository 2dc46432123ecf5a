"""
Five-Card Draw - Engine Errors

Typed failures raised by the deck and the round controller. The controller
catches these inside each public action and reports them through an
``ActionResult`` instead of letting them reach the UI layer.
"""


class PokerError(Exception):
    """Base class for all engine failures."""


class InsufficientCardsError(PokerError):
    """The deck holds fewer cards than were requested."""

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Not enough cards in the deck: requested {requested}, {remaining} remaining."
        )


class InvalidTransitionError(PokerError):
    """An action was attempted outside the phase where it is legal."""

    def __init__(self, action: str, phase: str, reason: str | None = None) -> None:
        self.action = action
        self.phase = phase
        message = f"Cannot {action} during phase '{phase}'."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class InvalidSelectionError(PokerError):
    """A discard index does not address a card in the player's hand."""

    def __init__(self, index: object, hand_size: int) -> None:
        self.index = index
        self.hand_size = hand_size
        super().__init__(
            f"Card index {index!r} is out of range. Must be between 0 and {hand_size - 1}."
        )
