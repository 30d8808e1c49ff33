"""
Belote deck: 32 cards (4 suits × 8 ranks, Seven to Ace).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Trèfle, Carreau, Cœur, Pique. Also the trump a bid may declare."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class Rank(IntEnum):
    SEVEN = 0
    EIGHT = 1
    NINE = 2
    TEN = 3
    JACK = 4
    QUEEN = 5
    KING = 6
    ACE = 7


NUM_CARDS: int = 32


@dataclass(frozen=True)
class Card:
    """A single card: suit + rank."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Unknown suit: {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Unknown rank: {self.rank!r}")

    def __str__(self) -> str:
        return f"{self.rank.name.title()} of {self.suit.name.title()}"

    def __repr__(self) -> str:
        return str(self)


def make_deck_32() -> list[Card]:
    """Build a full, ordered 32-card deck (suit-major, then Seven..Ace)."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


__all__ = ["Suit", "Rank", "Card", "NUM_CARDS", "make_deck_32"]
