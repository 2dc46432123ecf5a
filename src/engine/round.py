"""
Five-Card Draw - Round Controller

State machine for one player against the scripted dealer:

    pre-deal -> dealing -> player-draw-phase -> dealer-draw-phase
             -> showdown -> round-over -> (dealing | game-over)

The controller owns a single RoundState. Every public action is serialized on
one lock and returns an ActionResult; rejected actions leave the state
untouched. The only suspension point is the dealer turn, which is scheduled
after a fixed delay so the UI can show that the dealer is drawing.
"""

from __future__ import annotations

import functools
import logging
import random
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

from src.engine.base import Card, Comparison, HandResult, Outcome, Phase
from src.engine.comparator import compare
from src.engine.dealer import DealerPolicy
from src.engine.deck import Deck
from src.engine.errors import (
    InsufficientCardsError,
    InvalidSelectionError,
    InvalidTransitionError,
    PokerError,
)
from src.engine.evaluator import HandEvaluator
from src.engine.models import CardView, OutcomeView, TableSnapshot
from src.engine.validators import HAND_SIZE, validate_chip_amount, validate_discard_index

if TYPE_CHECKING:
    from src.config.settings import Settings

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to 5-Card Draw! Click Deal to start."
DRAW_PROMPT = "Select cards to discard (0-5), then click Draw."
DEALER_DRAWING = "Dealer is drawing..."

_VERDICTS: dict[Outcome, str] = {
    Outcome.PLAYER_WIN: "Player wins!",
    Outcome.DEALER_WIN: "Dealer wins.",
    Outcome.PUSH: "It's a tie! (Push)",
}

_REVEALED_PHASES = frozenset({Phase.SHOWDOWN, Phase.ROUND_OVER, Phase.GAME_OVER})


# -- Scheduling -----------------------------------------------------------


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback once after a delay. Must return a cancellable handle."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingScheduler:
    """Default scheduler backed by ``threading.Timer``."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.name = "dealer-turn"
        timer.start()
        return timer


# -- State ----------------------------------------------------------------


@dataclass(frozen=True)
class RoundOutcome:
    """
    Settlement of a finished round.

    Attributes:
        outcome: Verdict from the player's point of view
        player_result: Evaluation of the player's final hand
        dealer_result: Evaluation of the dealer's final hand
        payout: Chips returned to the player from the pot
        message: Text shown to the player
    """
    outcome: Outcome
    player_result: HandResult
    dealer_result: HandResult
    payout: int
    message: str


@dataclass
class RoundState:
    """
    Mutable session record owned by a single RoundController.

    Attributes:
        balance: Player chips not committed to the pot
        pot: Chips at stake in the current round (player ante + dealer ante)
        ante: Chips the player posted for the current round
        phase: Current round phase
        pending_discards: Player hand indices marked for discard
        player_hand: Player's cards, in hand order
        dealer_hand: Dealer's cards, in hand order
        deck: Cards left to deal this round
        message: Last status message for the player
        last_outcome: Settlement of the most recent showdown
        rounds_played: Completed showdowns this session
    """
    balance: int
    pot: int = 0
    ante: int = 0
    phase: Phase = Phase.PRE_DEAL
    pending_discards: set[int] = field(default_factory=set)
    player_hand: list[Card] = field(default_factory=list)
    dealer_hand: list[Card] = field(default_factory=list)
    deck: Deck = field(default_factory=Deck)
    message: str = WELCOME_MESSAGE
    last_outcome: RoundOutcome | None = None
    rounds_played: int = 0


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of a single controller action.

    Attributes:
        ok: Whether the action was applied
        phase: Phase after the action
        error: Typed failure when the action was rejected or aborted
        message: Status message (or the failure description)
    """
    ok: bool
    phase: Phase
    error: PokerError | None = None
    message: str = ""


# -- Controller -----------------------------------------------------------


class RoundController:
    """Drives deal, draw, dealer turn, showdown and settlement."""

    def __init__(
        self,
        starting_chips: int = 1000,
        ante: int = 5,
        dealer_delay: float = 1.5,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.starting_chips = validate_chip_amount(starting_chips, "Starting chips")
        self.ante = validate_chip_amount(ante, "Ante")
        if dealer_delay < 0:
            raise ValueError(f"Dealer delay cannot be negative, got {dealer_delay}.")
        self.dealer_delay = dealer_delay

        self._scheduler: Scheduler = scheduler or ThreadingScheduler()
        self._rng = rng
        self._lock = threading.RLock()
        self._pending_ticket: object | None = None
        self._pending_timer: TimerHandle | None = None
        self.state = RoundState(balance=self.starting_chips)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        scheduler: Scheduler | None = None,
    ) -> RoundController:
        """Build a controller from application settings."""
        rng = random.Random(settings.rng_seed) if settings.rng_seed is not None else None
        return cls(
            starting_chips=settings.starting_chips,
            ante=settings.ante,
            dealer_delay=settings.dealer_delay_seconds,
            scheduler=scheduler,
            rng=rng,
        )

    # -- Read accessors ---------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def balance(self) -> int:
        return self.state.balance

    @property
    def pot(self) -> int:
        return self.state.pot

    @property
    def message(self) -> str:
        return self.state.message

    @property
    def last_outcome(self) -> RoundOutcome | None:
        return self.state.last_outcome

    @property
    def player_hand(self) -> tuple[Card, ...]:
        return tuple(self.state.player_hand)

    @property
    def dealer_hand(self) -> tuple[Card, ...] | None:
        """Dealer's cards once revealed at showdown; None while hidden."""
        if self.state.phase not in _REVEALED_PHASES:
            return None
        return tuple(self.state.dealer_hand)

    @property
    def dealer_card_count(self) -> int:
        return len(self.state.dealer_hand)

    @property
    def pending_discards(self) -> frozenset[int]:
        return frozenset(self.state.pending_discards)

    @property
    def is_dealer_pending(self) -> bool:
        return self._pending_ticket is not None

    def snapshot(self) -> TableSnapshot:
        """Consistent view of the table for the presentation layer."""
        with self._lock:
            state = self.state
            dealer = self.dealer_hand
            outcome = state.last_outcome
            return TableSnapshot(
                phase=state.phase.value,
                balance=state.balance,
                pot=state.pot,
                message=state.message,
                player_hand=[CardView.from_card(card) for card in state.player_hand],
                dealer_hand=[CardView.from_card(card) for card in dealer] if dealer is not None else None,
                dealer_card_count=len(state.dealer_hand),
                pending_discards=sorted(state.pending_discards),
                dealer_pending=self.is_dealer_pending,
                last_outcome=OutcomeView(
                    outcome=outcome.outcome.name.lower(),
                    player_hand_name=outcome.player_result.name,
                    dealer_hand_name=outcome.dealer_result.name,
                    payout=outcome.payout,
                    message=outcome.message,
                ) if outcome is not None else None,
                rounds_played=state.rounds_played,
                can_deal=state.phase in (Phase.PRE_DEAL, Phase.ROUND_OVER) and not self.is_dealer_pending,
                can_draw=state.phase is Phase.PLAYER_DRAW,
                is_game_over=state.phase is Phase.GAME_OVER,
            )

    # -- Actions ----------------------------------------------------------

    def start_round(self) -> ActionResult:
        """Post the ante, shuffle a fresh deck and deal five cards to each side."""
        return self._perform("start a round", (Phase.PRE_DEAL, Phase.ROUND_OVER), self._deal)

    def toggle_discard(self, index: int) -> ActionResult:
        """Mark or unmark one of the player's cards for discard."""
        return self._perform(
            "select a discard",
            (Phase.PLAYER_DRAW,),
            functools.partial(self._toggle, index),
        )

    def confirm_draw(self) -> ActionResult:
        """Replace the marked cards and hand the turn to the dealer."""
        return self._perform("draw", (Phase.PLAYER_DRAW,), self._player_draw)

    def resolve_dealer_turn(self) -> ActionResult:
        """Run the dealer turn now instead of waiting for the scheduled timer."""
        return self._perform(
            "resolve the dealer turn",
            (Phase.DEALER_DRAW,),
            self._resolve_now,
            allow_pending=True,
        )

    def cancel_pending(self) -> ActionResult:
        """Cancel a scheduled dealer turn that has not fired yet.

        The round stays in the dealer draw phase and can be resumed with
        ``resolve_dealer_turn``.
        """
        return self._perform(
            "cancel the dealer turn",
            (Phase.DEALER_DRAW,),
            self._cancel,
            allow_pending=True,
        )

    def new_game(self) -> ActionResult:
        """Restore the starting balance and return to the pre-deal phase."""
        return self._perform("start a new game", tuple(Phase), self._reset)

    # -- Action plumbing --------------------------------------------------

    def _perform(
        self,
        action: str,
        allowed: tuple[Phase, ...],
        operation: Callable[[], None],
        allow_pending: bool = False,
    ) -> ActionResult:
        with self._lock:
            try:
                if self.is_dealer_pending and not allow_pending:
                    raise InvalidTransitionError(action, self.state.phase.value, "The dealer is still drawing.")
                if self.state.phase not in allowed:
                    raise InvalidTransitionError(action, self.state.phase.value)
                operation()
            except (InvalidTransitionError, InvalidSelectionError) as exc:
                logger.warning("Rejected action '%s': %s", action, exc)
                return ActionResult(ok=False, phase=self.state.phase, error=exc, message=str(exc))
            except InsufficientCardsError as exc:
                logger.exception("Deck exhausted while trying to %s; aborting round", action)
                self._abort_round(exc)
                return ActionResult(ok=False, phase=self.state.phase, error=exc, message=self.state.message)
            return ActionResult(ok=True, phase=self.state.phase, message=self.state.message)

    def _deal(self) -> None:
        state = self.state
        state.phase = Phase.DEALING

        ante = min(self.ante, state.balance)
        state.balance -= ante
        state.ante = ante
        # Dealer matches the player's ante.
        state.pot = ante * 2

        state.deck = Deck.shuffled(self._rng)
        state.pending_discards = set()
        state.last_outcome = None
        state.player_hand = state.deck.draw(HAND_SIZE)
        state.dealer_hand = state.deck.draw(HAND_SIZE)

        state.phase = Phase.PLAYER_DRAW
        state.message = DRAW_PROMPT
        logger.info("Round dealt: ante=%d pot=%d balance=%d", ante, state.pot, state.balance)
        logger.debug("Player hand: %s", " ".join(card.label for card in state.player_hand))

    def _toggle(self, index: int) -> None:
        state = self.state
        validate_discard_index(index, len(state.player_hand))
        if index in state.pending_discards:
            state.pending_discards.discard(index)
        else:
            state.pending_discards.add(index)
        state.message = f"{len(state.pending_discards)} card(s) selected for discard."

    def _player_draw(self) -> None:
        state = self.state
        count = _exchange(state.player_hand, state.pending_discards, state.deck)
        state.pending_discards = set()
        state.phase = Phase.DEALER_DRAW
        state.message = DEALER_DRAWING
        logger.info("Player drew %d card(s)", count)
        self._schedule_dealer_turn()

    def _schedule_dealer_turn(self) -> None:
        ticket = object()
        self._pending_ticket = ticket
        timer = self._scheduler.schedule(
            self.dealer_delay, functools.partial(self._on_dealer_timer, ticket)
        )
        # An immediate scheduler may already have run the dealer turn.
        if self._pending_ticket is ticket:
            self._pending_timer = timer

    def _on_dealer_timer(self, ticket: object) -> None:
        with self._lock:
            if self._pending_ticket is not ticket:
                logger.debug("Ignoring stale dealer timer")
                return
            self._clear_pending()
            try:
                self._dealer_turn()
            except InsufficientCardsError as exc:
                logger.exception("Deck exhausted during the dealer turn; aborting round")
                self._abort_round(exc)

    def _resolve_now(self) -> None:
        self._cancel_timer()
        self._dealer_turn()

    def _cancel(self) -> None:
        if not self.is_dealer_pending:
            raise InvalidTransitionError(
                "cancel the dealer turn", self.state.phase.value, "Nothing is scheduled."
            )
        self._cancel_timer()
        self.state.message = "Dealer turn paused."
        logger.info("Dealer turn cancelled")

    def _cancel_timer(self) -> None:
        if self._pending_timer is not None:
            self._pending_timer.cancel()
        self._clear_pending()

    def _clear_pending(self) -> None:
        self._pending_ticket = None
        self._pending_timer = None

    def _dealer_turn(self) -> None:
        state = self.state
        result = HandEvaluator.evaluate(state.dealer_hand)
        discards = DealerPolicy.choose_discards(state.dealer_hand, result)
        _exchange(state.dealer_hand, discards, state.deck)
        logger.info("Dealer held %s and drew %d card(s)", result.name, len(discards))

        state.phase = Phase.SHOWDOWN
        self._showdown()

    def _showdown(self) -> None:
        state = self.state
        player_result = HandEvaluator.evaluate(state.player_hand)
        dealer_result = HandEvaluator.evaluate(state.dealer_hand)
        verdict = compare(player_result, dealer_result)

        if verdict is Comparison.GREATER:
            outcome, payout = Outcome.PLAYER_WIN, state.pot
        elif verdict is Comparison.LESS:
            outcome, payout = Outcome.DEALER_WIN, 0
        else:
            outcome, payout = Outcome.PUSH, state.pot // 2

        message = (
            f"Player has: {player_result.name}. Dealer has: {dealer_result.name}. "
            f"{_VERDICTS[outcome]}"
        )
        state.balance += payout
        state.pot = 0
        state.ante = 0
        state.last_outcome = RoundOutcome(
            outcome=outcome,
            player_result=player_result,
            dealer_result=dealer_result,
            payout=payout,
            message=message,
        )
        state.rounds_played += 1
        state.message = message
        state.phase = Phase.ROUND_OVER
        logger.info(
            "Showdown: player %s vs dealer %s -> %s (payout=%d, balance=%d)",
            player_result, dealer_result, outcome.name, payout, state.balance,
        )
        self._check_game_over()

    def _check_game_over(self) -> None:
        state = self.state
        if state.balance <= 0:
            state.phase = Phase.GAME_OVER
            state.message = f"Game Over! You ran out of chips. Final Score: {state.balance}"
            logger.info("Game over after %d round(s)", state.rounds_played)

    def _abort_round(self, exc: InsufficientCardsError) -> None:
        state = self.state
        self._cancel_timer()
        # Only the player's own ante goes back; the dealer's match is void.
        state.balance += state.ante
        state.pot = 0
        state.ante = 0
        state.player_hand = []
        state.dealer_hand = []
        state.pending_discards = set()
        state.phase = Phase.ROUND_OVER
        state.message = f"Round aborted: {exc}"
        self._check_game_over()

    def _reset(self) -> None:
        self._cancel_timer()
        self.state = RoundState(balance=self.starting_chips)
        logger.info("New game started with %d chips", self.starting_chips)


def _exchange(hand: list[Card], discards: set[int] | frozenset[int], deck: Deck) -> int:
    """Drop the discarded positions (highest first) and refill from the deck."""
    replacements = deck.draw(len(discards))
    for index in sorted(discards, reverse=True):
        del hand[index]
    hand.extend(replacements)
    return len(replacements)
