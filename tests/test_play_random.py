"""Smoke tests for the random-auction CLI."""
import logging
from pathlib import Path

from belote.bidding import Bid, Contract
from belote.config import MatchConfig, save_config
from belote.deck import Suit
from belote.play_random import main, run_random_auctions, summarize
from belote.players import Player


def test_summarize_counts():
    contracts = [
        Contract(Player.SOUTH, Bid.EIGHTY, Suit.HEARTS),
        Contract(Player.WEST, Bid.EIGHTY, Suit.CLUBS, countered=True),
        Contract(Player.NORTH, Bid.CAPOT, Suit.SPADES, countered=True, double_countered=True),
        Contract(Player.EAST, Bid.HUNDRED, Suit.DIAMONDS),
    ]
    stats = summarize(contracts, redeals=1)
    assert stats.auctions == 5
    assert stats.contracts == 4
    assert stats.bid_counts == {Bid.EIGHTY: 2, Bid.HUNDRED: 1, Bid.CAPOT: 1}
    assert stats.countered_rate == 0.5
    assert stats.double_countered_rate == 0.25


def test_summarize_empty():
    stats = summarize([], redeals=3)
    assert stats.contracts == 0
    assert stats.countered_rate == 0.0
    assert stats.bid_counts == {}


def test_run_random_auctions_is_reproducible():
    a = run_random_auctions(30, MatchConfig(seed=1))
    b = run_random_auctions(30, MatchConfig(seed=1))
    assert a == b
    assert a.auctions == 30
    assert a.contracts + a.redeals == 30


def test_cli_main_with_config(tmp_path: Path, caplog):
    cfg_path = save_config(MatchConfig(seed=3, first_player=Player.NORTH), tmp_path / "match.json")
    with caplog.at_level(logging.INFO):
        stats = main(["--auctions", "10", "--config", str(cfg_path)])
    assert stats.auctions == 10
    assert "Auctions to run: 10" in caplog.text
