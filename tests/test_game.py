"""Tests for round/game orchestration."""
import random

import pytest

from belote.bidding import Bid, Contract
from belote.deck import Suit
from belote.game import SCORE_GOAL, Game, Round, run_game
from belote.players import Player, Team


def _always_pass(player, history):
    return Bid.PASS, None


def _first_speaker_bids(player, history):
    if not history:
        return Bid.EIGHTY, Suit.HEARTS
    return Bid.PASS, None


def test_redeal_when_everyone_passes():
    game = Game(rng=random.Random(1))
    assert game.play_round(_always_pass) is None
    assert game.redeals == 1
    assert game.rounds == []
    # starting player moved on even though nothing was played
    assert game.first_player == Player.WEST


def test_round_records_contract_and_hands():
    game = Game(first_player=Player.NORTH, rng=random.Random(2))
    round_ = game.play_round(_first_speaker_bids)
    assert round_ is not None
    assert round_.contract == Contract(Player.NORTH, Bid.EIGHTY, Suit.HEARTS)
    assert round_.hands == game.current_deal.hands
    assert round_.scores == {Team.SOUTH_NORTH: 0, Team.EAST_WEST: 0}
    assert game.rounds == [round_]
    assert game.first_player == Player.EAST


def test_starting_player_rotates_every_deal():
    game = Game(rng=random.Random(3))
    starters = []
    for _ in range(5):
        starters.append(game.first_player)
        game.play_round(_first_speaker_bids)
    assert starters == [Player.SOUTH, Player.WEST, Player.NORTH, Player.EAST, Player.SOUTH]
    assert [r.contract.player for r in game.rounds] == starters


def test_hand_requires_a_deal():
    game = Game()
    with pytest.raises(RuntimeError):
        game.hand(Player.SOUTH)
    game.new_deal()
    assert len(game.hand(Player.SOUTH)) == 8


def test_score_callback_fills_round_points():
    game = Game(rng=random.Random(4))

    def score_round(round_: Round):
        return {round_.contract.player.team(): 162}

    round_ = game.play_round(_first_speaker_bids, score_round)
    assert round_.scores == {Team.SOUTH_NORTH: 162, Team.EAST_WEST: 0}


def test_has_winner():
    game = Game()
    assert game.has_winner() is None
    contract = Contract(Player.SOUTH, Bid.EIGHTY, Suit.SPADES)

    r1 = Round(contract, {})
    r1.record_points({Team.SOUTH_NORTH: SCORE_GOAL, Team.EAST_WEST: 500})
    game.rounds.append(r1)
    assert game.has_winner() is None  # must go past the goal

    r2 = Round(contract, {})
    r2.record_points({Team.SOUTH_NORTH: 10, Team.EAST_WEST: 0})
    game.rounds.append(r2)
    assert game.total_scores() == {Team.SOUTH_NORTH: 1010, Team.EAST_WEST: 500}
    assert game.has_winner() == Team.SOUTH_NORTH


def test_has_winner_needs_a_lead():
    game = Game(score_goal=100)
    r = Round(Contract(Player.EAST, Bid.NINETY, Suit.CLUBS), {})
    r.record_points({Team.SOUTH_NORTH: 150, Team.EAST_WEST: 150})
    game.rounds.append(r)
    assert game.has_winner() is None
    r2 = Round(Contract(Player.EAST, Bid.NINETY, Suit.CLUBS), {})
    r2.record_points({Team.EAST_WEST: 20})
    game.rounds.append(r2)
    assert game.has_winner() == Team.EAST_WEST


def test_run_game_until_goal():
    game = Game(score_goal=300, rng=random.Random(5))

    def score_round(round_):
        return {round_.contract.player.team(): 100}

    winner = run_game(game, _first_speaker_bids, score_round)
    assert winner == game.has_winner()
    assert game.total_scores()[winner] > 300


def test_run_game_gives_up():
    game = Game(rng=random.Random(6))
    with pytest.raises(RuntimeError):
        run_game(game, _always_pass, lambda r: {}, max_deals=3)
    assert game.redeals == 3
