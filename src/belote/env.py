"""
Observation / action encoding for the Belote auction.

Flat, fixed-size vectors so that any policy (random, scripted or learned) can bid
through the same interface:
- a global action space covering Pass, Counter, DoubleCounter and every
  (suit bid, trump) pair,
- a legal-action mask derived from the engine's available bids,
- a bidding observation built from the player's hand and the auction so far.

This module stays free of external dependencies; it only turns engine state into lists.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence

from .bidding import ALL_BIDS, Bid, BidEntry, BidPhase, requires_suit
from .deck import NUM_CARDS, Card, Rank, Suit
from .players import Player, rotation

# Bids that need a trump: 80..160 and Capot.
SUIT_BIDS: tuple[Bid, ...] = tuple(b for b in ALL_BIDS if requires_suit(b))
NUM_SUITS: int = len(Suit)

# Action layout: [PASS, COUNTER, DOUBLE_COUNTER, then SUIT_BIDS × suits (bid-major)]
ACTION_PASS: int = 0
ACTION_COUNTER: int = 1
ACTION_DOUBLE_COUNTER: int = 2
_FIRST_SUIT_ACTION: int = 3
NUM_ACTIONS: int = _FIRST_SUIT_ACTION + len(SUIT_BIDS) * NUM_SUITS  # 3 + 10 * 4 = 43

_SPECIAL_ACTIONS = {
    Bid.PASS: ACTION_PASS,
    Bid.COUNTER: ACTION_COUNTER,
    Bid.DOUBLE_COUNTER: ACTION_DOUBLE_COUNTER,
}

# 32 (hand) + 11 (standing bid level, none + 10) + 4 (trump) + 4 (bidder relative seat)
# + 2 (countered flags) + 4 (trailing passes 0..3) + 4 (seat of player)
BIDDING_OBS_SIZE: int = NUM_CARDS + 11 + NUM_SUITS + 4 + 2 + 4 + 4


def _one_hot(index: int | None, size: int) -> List[int]:
    vec = [0] * size
    if index is None:
        return vec
    if 0 <= index < size:
        vec[index] = 1
    return vec


def bid_to_action(bid: Bid, suit: Suit | None = None) -> int:
    """Index in the global action space. Suit bids need their trump."""
    if bid in _SPECIAL_ACTIONS:
        return _SPECIAL_ACTIONS[bid]
    if suit is None:
        raise ValueError(f"Bid {bid.name} needs a suit to map to an action")
    return _FIRST_SUIT_ACTION + SUIT_BIDS.index(bid) * NUM_SUITS + int(suit)


def action_to_bid(action: int) -> tuple[Bid, Suit | None]:
    """Inverse of bid_to_action."""
    if not 0 <= action < NUM_ACTIONS:
        raise ValueError(f"Action {action} out of range [0, {NUM_ACTIONS})")
    for bid, idx in _SPECIAL_ACTIONS.items():
        if idx == action:
            return bid, None
    offset = action - _FIRST_SUIT_ACTION
    return SUIT_BIDS[offset // NUM_SUITS], Suit(offset % NUM_SUITS)


def legal_action_mask(available: Iterable[Bid]) -> List[bool]:
    """
    Legal-action mask over the global action space for a set of available bids.
    A suit bid opens all four trump actions.
    """
    mask = [False] * NUM_ACTIONS
    for bid in available:
        if bid in _SPECIAL_ACTIONS:
            mask[_SPECIAL_ACTIONS[bid]] = True
            continue
        for suit in Suit:
            mask[bid_to_action(bid, suit)] = True
    return mask


def legal_action_mask_for(phase: BidPhase, player: Player) -> List[bool]:
    """Mask for ``player`` in ``phase``: all False when it is not their turn."""
    if phase.current_player != player:
        return [False] * NUM_ACTIONS
    return legal_action_mask(phase.available_bids(player))


def card_index(card: Card) -> int:
    """Stable index 0..31 matching make_deck_32() (suit-major, then Seven..Ace)."""
    return int(card.suit) * len(Rank) + int(card.rank)


def encode_hand(hand: Iterable[Card]) -> List[int]:
    """Binary 32-dim vector: 1 if the card is in the hand."""
    vec = [0] * NUM_CARDS
    for c in hand:
        vec[card_index(c)] = 1
    return vec


def _trailing_passes(history: Sequence[BidEntry]) -> int:
    count = 0
    for entry in reversed(history):
        if entry.bid != Bid.PASS:
            break
        count += 1
    return count


def encode_bidding_observation(
    hand: Sequence[Card],
    history: Sequence[BidEntry],
    player: Player,
) -> List[float]:
    """
    Bidding-phase encoding, from the point of view of ``player``:

    - 32 card bits: current player's hand
    - 11 bits: level of the standing suit bid (index 0 = nobody bid yet, 1..10 = 80..Capot)
    - 4 bits: trump of the standing bid
    - 4 bits: seat of the standing bidder relative to ``player`` (0 = self, 2 = partner)
    - 2 bits: standing bid countered / double countered
    - 4 bits: trailing passes (0..3)
    - 4 bits: absolute seat of ``player`` (South, West, North, East)
    """
    standing = None
    countered = False
    double_countered = False
    for entry in reversed(history):
        if entry.bid == Bid.DOUBLE_COUNTER:
            double_countered = True
        elif entry.bid == Bid.COUNTER:
            countered = True
        elif entry.bid != Bid.PASS:
            standing = entry
            break

    seats = rotation(player)
    meta: List[int] = []
    if standing is None:
        meta.extend(_one_hot(0, 11))
        meta.extend(_one_hot(None, NUM_SUITS))
        meta.extend(_one_hot(None, 4))
    else:
        meta.extend(_one_hot(SUIT_BIDS.index(standing.bid) + 1, 11))
        meta.extend(_one_hot(None if standing.suit is None else int(standing.suit), NUM_SUITS))
        meta.extend(_one_hot(seats.index(standing.player), 4))
    meta.append(1 if countered else 0)
    meta.append(1 if double_countered else 0)
    meta.extend(_one_hot(min(_trailing_passes(history), 3), 4))
    meta.extend(_one_hot(rotation(Player.SOUTH).index(player), 4))

    vec_int: List[int] = encode_hand(hand) + meta
    assert len(vec_int) == BIDDING_OBS_SIZE
    return [float(x) for x in vec_int]


__all__ = [
    "SUIT_BIDS",
    "NUM_ACTIONS",
    "ACTION_PASS",
    "ACTION_COUNTER",
    "ACTION_DOUBLE_COUNTER",
    "BIDDING_OBS_SIZE",
    "bid_to_action",
    "action_to_bid",
    "legal_action_mask",
    "legal_action_mask_for",
    "card_index",
    "encode_hand",
    "encode_bidding_observation",
]
