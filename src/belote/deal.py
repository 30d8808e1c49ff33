"""
Distribution (deal) for 4 players.
The shuffled pack is dealt 3-2-3: three packets per player, of 3, then 2, then 3 cards,
each packet going around the table once. Every player ends up with 8 cards.
"""
from __future__ import annotations

import random
from typing import NamedTuple

from .deck import Card, NUM_CARDS, make_deck_32
from .players import Player, rotation

# Packet sizes per pass around the table.
DEAL_PACKETS = (3, 2, 3)
HAND_SIZE = sum(DEAL_PACKETS)


class Deal(NamedTuple):
    """Result of a deal. Hands are lists (can be mutated for play)."""
    hands: dict[Player, list[Card]]
    first_player: Player  # first seat served, also the first to bid


def shuffled_deck(deck: list[Card] | None = None, rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy of ``deck`` (a fresh 32-card deck by default)."""
    if deck is None:
        deck = make_deck_32()
    if rng is None:
        rng = random.Random()
    deck = list(deck)
    rng.shuffle(deck)
    return deck


def deal_hands(cards: list[Card]) -> tuple[list[Card], list[Card], list[Card], list[Card]]:
    """
    Split an already shuffled pack into 4 hands of 8, 3-2-3.
    Hand i is the i-th player served.
    """
    if len(cards) != NUM_CARDS:
        raise ValueError(f"Expected {NUM_CARDS} cards, got {len(cards)}")
    hands: list[list[Card]] = [[], [], [], []]
    j = 0
    for packet in DEAL_PACKETS:
        for hand in hands:
            hand.extend(cards[j:j + packet])
            j += packet
    return (hands[0], hands[1], hands[2], hands[3])


def deal_4p(
    first_player: Player = Player.SOUTH,
    deck: list[Card] | None = None,
    rng: random.Random | None = None,
) -> Deal:
    """
    Shuffle and deal. ``first_player`` is served first, then the others clockwise.
    """
    cards = shuffled_deck(deck, rng)
    hands = deal_hands(cards)
    seats = rotation(first_player)
    return Deal(
        hands={seat: hand for seat, hand in zip(seats, hands)},
        first_player=first_player,
    )


__all__ = ["Deal", "DEAL_PACKETS", "HAND_SIZE", "shuffled_deck", "deal_hands", "deal_4p"]
