"""
Bidding (enchères) for 4 players.
Order: Pass < 80 < 90 < ... < 160 < Capot < Contre < Surcontre.
First to speak is the round's starting player; players speak in turn, clockwise, as many
times as needed. A bid stands once the three other players pass after it. Four passes
with no bid means the cards are dealt again.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

from .deck import Suit
from .exceptions import (
    IllegalBidError,
    InconsistentHistoryError,
    MissingSuitError,
    NoContractError,
    PhaseClosedError,
    WrongTurnError,
)
from .players import Player, next_player, same_team

logger = logging.getLogger(__name__)


class Bid(IntEnum):
    """Bids in ascending order."""
    PASS = 0
    EIGHTY = 1
    NINETY = 2
    HUNDRED = 3
    HUNDRED_TEN = 4
    HUNDRED_TWENTY = 5
    HUNDRED_THIRTY = 6
    HUNDRED_FORTY = 7
    HUNDRED_FIFTY = 8
    HUNDRED_SIXTY = 9
    CAPOT = 10  # the opponents will not win a single trick
    COUNTER = 11
    DOUBLE_COUNTER = 12

    def requires_suit(self) -> bool:
        return requires_suit(self)

    @property
    def points(self) -> int | None:
        """Announced points for 80..160, None otherwise."""
        return BID_POINTS.get(self)


ALL_BIDS: tuple[Bid, ...] = tuple(Bid)

BID_POINTS = {
    Bid.EIGHTY: 80,
    Bid.NINETY: 90,
    Bid.HUNDRED: 100,
    Bid.HUNDRED_TEN: 110,
    Bid.HUNDRED_TWENTY: 120,
    Bid.HUNDRED_THIRTY: 130,
    Bid.HUNDRED_FORTY: 140,
    Bid.HUNDRED_FIFTY: 150,
    Bid.HUNDRED_SIXTY: 160,
}

BID_NAMES = {
    Bid.PASS: "Pass",
    Bid.CAPOT: "Capot",
    Bid.COUNTER: "Contre",
    Bid.DOUBLE_COUNTER: "Surcontre",
    **{bid: str(points) for bid, points in BID_POINTS.items()},
}

# Bids that do not announce anything of their own.
_NO_SUIT_BIDS = frozenset({Bid.PASS, Bid.COUNTER, Bid.DOUBLE_COUNTER})


def requires_suit(bid: Bid) -> bool:
    """Every bid except Pass, Counter and DoubleCounter declares a trump."""
    return bid not in _NO_SUIT_BIDS


class BiddingState(Enum):
    """Which state of the bidding phase we are at."""
    ONGOING = "ongoing"        # players can bid
    DEAL_AGAIN = "deal_again"  # everyone passed without bidding
    DONE = "done"              # a bid stands, the round can start


class BidEntry(NamedTuple):
    """One submission in the auction. ``suit`` is None for Pass/Counter/DoubleCounter."""
    player: Player
    bid: Bid
    suit: Optional[Suit] = None

    def __str__(self) -> str:
        name = BID_NAMES[self.bid]
        if self.suit is None:
            return f"{self.player}: {name}"
        return f"{self.player}: {name} {self.suit.name.title()}"


@dataclass(frozen=True)
class Contract:
    """The bid that won the auction, and whether it has been countered/double countered."""

    player: Player
    bid: Bid
    suit: Suit
    countered: bool = False
    double_countered: bool = False

    def __str__(self) -> str:
        text = f"{BID_NAMES[self.bid]} {self.suit.name.title()} by {self.player}"
        if self.double_countered:
            text += " (surcontré)"
        elif self.countered:
            text += " (contré)"
        return text


def last_bid(history: Sequence[BidEntry]) -> BidEntry | None:
    """The most recent entry that is not a Pass, if any."""
    for entry in reversed(history):
        if entry.bid != Bid.PASS:
            return entry
    return None


def available_bids(history: Sequence[BidEntry], player: Player) -> list[Bid]:
    """
    Legal bids for ``player`` to submit next, in ascending order.

    - Nobody bid yet: anything but Counter/DoubleCounter.
    - Last bid was a DoubleCounter: nothing.
    - Last bid was a Counter: the counter's team may only pass, the other team may
      pass or double counter.
    - Otherwise: pass, any higher bid, or counter.
    """
    last = last_bid(history)
    if last is None:
        return [b for b in ALL_BIDS if b not in (Bid.COUNTER, Bid.DOUBLE_COUNTER)]

    if last.bid == Bid.DOUBLE_COUNTER:
        return []

    if last.bid == Bid.COUNTER:
        if same_team(last.player, player):
            return [Bid.PASS]
        return [Bid.PASS, Bid.DOUBLE_COUNTER]

    return [Bid.PASS] + [b for b in ALL_BIDS if b > last.bid and b != Bid.DOUBLE_COUNTER]


def next_state(history: Sequence[BidEntry]) -> BiddingState:
    """State of the auction after the last entry of ``history``."""
    if history and history[-1].bid == Bid.DOUBLE_COUNTER:
        # nobody can speak after a double counter
        return BiddingState.DONE

    # at least one full turn is needed
    if len(history) <= 3:
        return BiddingState.ONGOING

    has_bid = last_bid(history) is not None
    pass_count = 0
    for entry in reversed(history):
        if entry.bid != Bid.PASS:
            break
        pass_count += 1
        if has_bid and pass_count == 3:
            return BiddingState.DONE
        if pass_count == 4:
            return BiddingState.DEAL_AGAIN

    return BiddingState.ONGOING


def extract_contract(history: Sequence[BidEntry]) -> Contract:
    """Walk back the history to the standing bid, collecting counters on the way."""
    countered = False
    double_countered = False
    for entry in reversed(history):
        if entry.bid == Bid.DOUBLE_COUNTER:
            double_countered = True
            continue
        if entry.bid == Bid.COUNTER:
            countered = True
            continue
        if entry.bid != Bid.PASS:
            if entry.suit is None:
                raise InconsistentHistoryError(f"Bid without a suit in history: {entry}")
            return Contract(
                player=entry.player,
                bid=entry.bid,
                suit=entry.suit,
                countered=countered,
                double_countered=double_countered,
            )
    raise InconsistentHistoryError("Couldn't get a contract from the list of bids")


class BidPhase:
    """Mutable state of one auction: starting player, all accepted bids, current state."""

    def __init__(self, starting_player: Player):
        self.starting_player = starting_player
        self._bids: list[BidEntry] = []
        self.state: BiddingState = BiddingState.ONGOING

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"BidPhase(starting_player={self.starting_player}, state={self.state}, bids={self._bids})"

    @property
    def history(self) -> tuple[BidEntry, ...]:
        return tuple(self._bids)

    @property
    def is_over(self) -> bool:
        return self.state != BiddingState.ONGOING

    @property
    def current_player(self) -> Player | None:
        """Who must speak next, or None once the auction is settled."""
        if self.is_over:
            return None
        return self._expected_player()

    def _expected_player(self) -> Player:
        if not self._bids:
            return self.starting_player
        return next_player(self._bids[-1].player)

    def last_bid(self) -> BidEntry | None:
        return last_bid(self._bids)

    def available_bids(self, player: Player) -> list[Bid]:
        return available_bids(self._bids, player)

    def submit(self, player: Player, bid: Bid, suit: Suit | None = None) -> None:
        """
        Add a bid, or raise if it is not acceptable. Nothing changes on failure.
        """
        if self.state != BiddingState.ONGOING:
            raise PhaseClosedError(f"The bidding phase is over ({self.state.value})")

        expected = self._expected_player()
        if player != expected:
            raise WrongTurnError(f"Wrong player: {player} spoke, {expected} was expected")

        if bid not in self.available_bids(player):
            raise IllegalBidError(f"Bid {BID_NAMES[bid]} not possible for {player}")

        if suit is None and requires_suit(bid):
            raise MissingSuitError(
                f"{BID_NAMES[bid]} must have a suit; only pass/counter/double counter do not"
            )

        entry = BidEntry(player, bid, suit)
        self._bids.append(entry)
        logger.debug("Accepted %s", entry)

        self.state = next_state(self._bids)
        if self.state != BiddingState.ONGOING:
            logger.debug("Auction settled: %s after %d bids", self.state.value, len(self._bids))

    def extract_contract(self) -> Contract:
        if self.state != BiddingState.DONE:
            raise NoContractError(
                f"Invalid bidding state {self.state.value}: expected the bidding phase to be done with a bid"
            )
        return extract_contract(self._bids)


BidCallback = Callable[[Player, Sequence[BidEntry]], Tuple[Bid, Optional[Suit]]]


def run_bidding(starting_player: Player, get_bid: BidCallback) -> BidPhase:
    """
    Run the auction to the end. get_bid(player, history) returns (bid, suit or None).
    history is the tuple of entries so far. Any rejected bid propagates its error.
    Returns the settled BidPhase (state DONE or DEAL_AGAIN).
    """
    phase = BidPhase(starting_player)
    while phase.current_player is not None:
        player = phase.current_player
        bid, suit = get_bid(player, phase.history)
        phase.submit(player, bid, suit)
    return phase


__all__ = [
    "Bid",
    "ALL_BIDS",
    "BID_POINTS",
    "BID_NAMES",
    "BiddingState",
    "BidEntry",
    "Contract",
    "BidPhase",
    "BidCallback",
    "requires_suit",
    "last_bid",
    "available_bids",
    "next_state",
    "extract_contract",
    "run_bidding",
]
