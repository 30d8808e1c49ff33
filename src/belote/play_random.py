"""
Tiny CLI to run random auctions and summarise how they end.

Usage (from project root, after installing in editable mode):
    python -m belote.play_random --auctions 1000 --seed 42
"""
from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np

from .agents import RandomAgent, policy_bidder
from .bidding import BID_NAMES, Bid, Contract
from .config import MatchConfig, load_config
from .game import Game
from .players import Player

logger = logging.getLogger(__name__)


@dataclass
class AuctionStats:
    auctions: int
    contracts: int
    redeals: int
    countered_rate: float
    double_countered_rate: float
    mean_level: float
    bid_counts: Dict[Bid, int] = field(default_factory=dict)


def summarize(contracts: Sequence[Contract], redeals: int) -> AuctionStats:
    """Aggregate the settled contracts of a simulation."""
    levels = np.array([int(c.bid) for c in contracts], dtype=np.int64)
    counts = np.bincount(levels, minlength=len(Bid))
    countered = np.array([c.countered for c in contracts], dtype=bool)
    doubled = np.array([c.double_countered for c in contracts], dtype=bool)
    n = len(contracts)
    return AuctionStats(
        auctions=n + redeals,
        contracts=n,
        redeals=redeals,
        countered_rate=float(countered.mean()) if n else 0.0,
        double_countered_rate=float(doubled.mean()) if n else 0.0,
        mean_level=float(levels.mean()) if n else 0.0,
        bid_counts={bid: int(counts[int(bid)]) for bid in Bid if counts[int(bid)]},
    )


def run_random_auctions(num_auctions: int, cfg: MatchConfig) -> AuctionStats:
    """Deal and bid ``num_auctions`` times with one RandomAgent per seat."""
    rng = random.Random(cfg.seed)
    game = Game(first_player=cfg.first_player, score_goal=cfg.score_goal, rng=rng)
    policies = {p: RandomAgent(seed=rng.randrange(2**31)) for p in Player}
    get_bid = policy_bidder(policies, game.hand)

    contracts: List[Contract] = []
    redeals = 0
    in_a_row = 0
    for _ in range(num_auctions):
        round_ = game.play_round(get_bid)
        if round_ is None:
            redeals += 1
            in_a_row += 1
            if in_a_row > cfg.max_redeals:
                raise RuntimeError(f"{in_a_row} thrown-in deals in a row")
            continue
        in_a_row = 0
        contracts.append(round_.contract)
        logger.debug("Contract: %s", round_.contract)
    return summarize(contracts, redeals)


def log_stats(stats: AuctionStats) -> None:
    logger.info(
        "auctions=%d contracts=%d redeals=%d countered=%.3f double_countered=%.3f",
        stats.auctions,
        stats.contracts,
        stats.redeals,
        stats.countered_rate,
        stats.double_countered_rate,
    )
    for bid, count in stats.bid_counts.items():
        logger.info("  %-6s %d", BID_NAMES[bid], count)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run random Belote auctions.")
    parser.add_argument(
        "--auctions",
        type=int,
        default=100,
        help="Number of auctions (deals) to run.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (overrides the config file).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON match configuration.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG shows every contract).",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> AuctionStats:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    cfg = load_config(args.config)
    if args.seed is not None:
        cfg.seed = args.seed

    logger.info("Auctions to run: %d (seed=%s, first player=%s)", args.auctions, cfg.seed, cfg.first_player)
    stats = run_random_auctions(args.auctions, cfg)
    log_stats(stats)
    return stats


if __name__ == "__main__":
    main()
