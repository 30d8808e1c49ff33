"""
Simple baseline agents and the generic policy interface.

The small ``Policy`` protocol is the contract used by simulations:
``act(obs, legal_actions_mask) -> action_index``. ``policy_bidder`` turns one policy
per seat into the ``get_bid`` callback expected by ``run_bidding`` / ``Game``.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Protocol, Sequence

from .bidding import Bid, BidCallback, BidEntry, available_bids
from .deck import Card, Suit
from .env import action_to_bid, encode_bidding_observation, legal_action_mask
from .players import Player


class Policy(Protocol):
    """Stateless or stateful decision policy working on flat observations."""

    def act(self, obs: Sequence[float], legal_actions_mask: Iterable[bool]) -> int:
        """
        Choose an action index given an observation and a boolean legal-action mask.

        Implementations must only return indices where ``legal_actions_mask[i]`` is
        true; the engine rejects anything else.
        """


@dataclass
class RandomAgent:
    """
    Baseline policy that samples uniformly among legal actions.

    Usage:
        agent = RandomAgent(seed=42)
        action = agent.act(obs, legal_actions_mask)
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def act(self, obs: Sequence[float], legal_actions_mask: Iterable[bool]) -> int:
        """Pick a random legal action given an observation and a boolean mask."""
        legal_indices: List[int] = [i for i, ok in enumerate(legal_actions_mask) if ok]
        if not legal_indices:
            raise ValueError("No legal actions available for RandomAgent")
        return self._rng.choice(legal_indices)


@dataclass
class PassAgent:
    """Always passes. Useful to force thrown-in deals or to leave an auction to others."""

    def act(self, obs: Sequence[float], legal_actions_mask: Iterable[bool]) -> int:
        return 0


def policy_bidder(
    policies: Dict[Player, Policy],
    hands: Callable[[Player], Sequence[Card]],
) -> BidCallback:
    """
    Build a ``get_bid(player, history)`` callback asking each seat's policy.
    ``hands(player)`` gives the cards the policy may look at.
    """

    def get_bid(player: Player, history: Sequence[BidEntry]) -> tuple[Bid, Suit | None]:
        obs = encode_bidding_observation(hands(player), history, player)
        mask = legal_action_mask(available_bids(history, player))
        return action_to_bid(policies[player].act(obs, mask))

    return get_bid


__all__ = ["Policy", "RandomAgent", "PassAgent", "policy_bidder"]
