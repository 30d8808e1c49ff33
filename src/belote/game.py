"""
Round and game orchestration: deal → bid → (play and scoring, external) → next round.
The starting player moves clockwise after every auction, including thrown-in deals.
A game is over once a team goes past the score goal.
"""
from __future__ import annotations

import logging
import random
from typing import Callable, Dict

from .bidding import BidCallback, BidPhase, BiddingState, Contract, run_bidding
from .deal import Deal, deal_4p
from .deck import Card
from .players import Player, Team

logger = logging.getLogger(__name__)

SCORE_GOAL = 1000


class Round:
    """A round of the actual game, once a contract has been established."""

    def __init__(self, contract: Contract, hands: dict[Player, list[Card]]):
        self.contract = contract
        self.hands = {p: list(h) for p, h in hands.items()}
        self.scores: Dict[Team, int] = {Team.SOUTH_NORTH: 0, Team.EAST_WEST: 0}

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Round(contract={self.contract}, scores={self.scores})"

    def record_points(self, points: Dict[Team, int]) -> None:
        """Store the points each team made in this round."""
        for t in Team:
            self.scores[t] = int(points.get(t, 0))


# score_round(round) -> points per team. Trick play lives outside the engine.
ScoreCallback = Callable[[Round], Dict[Team, int]]


class Game:
    """
    A full game: sequence of rounds until a team passes SCORE_GOAL.

    Usage:
        game = Game(rng=random.Random(0))
        round_ = game.play_round(get_bid)   # None when the cards are dealt again
    """

    def __init__(
        self,
        first_player: Player = Player.SOUTH,
        score_goal: int = SCORE_GOAL,
        rng: random.Random | None = None,
    ):
        # Which player starts the current round; moves clockwise after each auction
        self.first_player = first_player
        self.score_goal = score_goal
        self.rng = rng if rng is not None else random.Random()
        self.rounds: list[Round] = []
        self.redeals = 0
        self.current_deal: Deal | None = None

    def new_deal(self) -> Deal:
        self.current_deal = deal_4p(first_player=self.first_player, rng=self.rng)
        return self.current_deal

    def hand(self, player: Player) -> list[Card]:
        """Cards of ``player`` in the current deal."""
        if self.current_deal is None:
            raise RuntimeError("No cards dealt yet")
        return self.current_deal.hands[player]

    def play_round(
        self,
        get_bid: BidCallback,
        score_round: ScoreCallback | None = None,
    ) -> Round | None:
        """
        Deal, run the auction and, if a contract stands, record the round.
        Returns None if everybody passed (cards must be dealt again).
        """
        deal = self.new_deal()
        phase = run_bidding(deal.first_player, get_bid)
        self.first_player = self.first_player.next_player()
        return self._finish_auction(phase, deal, score_round)

    def _finish_auction(
        self,
        phase: BidPhase,
        deal: Deal,
        score_round: ScoreCallback | None,
    ) -> Round | None:
        if phase.state == BiddingState.DEAL_AGAIN:
            self.redeals += 1
            logger.info("Everyone passed, dealing again (%d so far)", self.redeals)
            return None

        contract = phase.extract_contract()
        round_ = Round(contract, deal.hands)
        if score_round is not None:
            round_.record_points(score_round(round_))
        self.rounds.append(round_)
        logger.info("Round %d: %s", len(self.rounds), contract)
        return round_

    def total_scores(self) -> Dict[Team, int]:
        totals = {Team.SOUTH_NORTH: 0, Team.EAST_WEST: 0}
        for round_ in self.rounds:
            for t in Team:
                totals[t] += round_.scores[t]
        return totals

    def has_winner(self) -> Team | None:
        """The team past the score goal and ahead of the other one, if any."""
        totals = self.total_scores()
        sn = totals[Team.SOUTH_NORTH]
        ew = totals[Team.EAST_WEST]
        if sn > self.score_goal and sn > ew:
            return Team.SOUTH_NORTH
        if ew > self.score_goal and ew > sn:
            return Team.EAST_WEST
        return None


def run_game(
    game: Game,
    get_bid: BidCallback,
    score_round: ScoreCallback,
    max_deals: int = 10_000,
) -> Team:
    """
    Play rounds of ``game`` until a team wins and return it. ``max_deals`` bounds the
    number of deals (thrown-in deals included); reaching it raises RuntimeError.
    """
    for _ in range(max_deals):
        game.play_round(get_bid, score_round)
        winner = game.has_winner()
        if winner is not None:
            logger.info("Game won by %s: %s", winner.name, game.total_scores())
            return winner
    raise RuntimeError(f"No winner after {max_deals} deals")


__all__ = ["SCORE_GOAL", "Round", "Game", "ScoreCallback", "run_game"]
