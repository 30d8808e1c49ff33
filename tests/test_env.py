"""Tests for action / observation encoding."""
import random

from belote.bidding import ALL_BIDS, Bid, BidEntry, BidPhase
from belote.deal import deal_4p
from belote.deck import Suit, make_deck_32
from belote.env import (
    ACTION_COUNTER,
    ACTION_DOUBLE_COUNTER,
    ACTION_PASS,
    BIDDING_OBS_SIZE,
    NUM_ACTIONS,
    SUIT_BIDS,
    action_to_bid,
    bid_to_action,
    card_index,
    encode_bidding_observation,
    encode_hand,
    legal_action_mask,
    legal_action_mask_for,
)
from belote.players import Player


def test_action_space_covers_every_bid_and_suit():
    assert len(SUIT_BIDS) == 10
    assert NUM_ACTIONS == 43
    seen = set()
    for bid in ALL_BIDS:
        suits = list(Suit) if bid in SUIT_BIDS else [None]
        for suit in suits:
            action = bid_to_action(bid, suit)
            assert action_to_bid(action) == (bid, suit)
            seen.add(action)
    assert seen == set(range(NUM_ACTIONS))
    assert bid_to_action(Bid.PASS) == ACTION_PASS
    assert bid_to_action(Bid.COUNTER) == ACTION_COUNTER
    assert bid_to_action(Bid.DOUBLE_COUNTER) == ACTION_DOUBLE_COUNTER


def test_card_index_covers_full_deck_without_collision():
    deck = make_deck_32()
    assert [card_index(c) for c in deck] == list(range(32))
    vec = encode_hand(deck[:8])
    assert sum(vec) == 8
    assert vec[:8] == [1] * 8


def test_legal_mask_at_start_excludes_counters():
    mask = legal_action_mask_for(BidPhase(Player.SOUTH), Player.SOUTH)
    assert mask[ACTION_PASS]
    assert not mask[ACTION_COUNTER]
    assert not mask[ACTION_DOUBLE_COUNTER]
    assert sum(mask) == 1 + 10 * 4


def test_legal_mask_is_empty_out_of_turn():
    mask = legal_action_mask_for(BidPhase(Player.SOUTH), Player.NORTH)
    assert not any(mask)


def test_legal_mask_after_counter():
    mask = legal_action_mask([Bid.PASS, Bid.DOUBLE_COUNTER])
    assert [i for i, ok in enumerate(mask) if ok] == [ACTION_PASS, ACTION_DOUBLE_COUNTER]


def test_encode_bidding_observation_shape_and_content():
    deal = deal_4p(rng=random.Random(11))
    hand = deal.hands[Player.WEST]
    obs = encode_bidding_observation(hand, [], Player.WEST)
    assert len(obs) == BIDDING_OBS_SIZE
    assert sum(obs[:32]) == 8.0
    assert obs[32] == 1.0  # nobody bid yet

    history = [
        BidEntry(Player.SOUTH, Bid.HUNDRED, Suit.HEARTS),
        BidEntry(Player.WEST, Bid.COUNTER),
        BidEntry(Player.NORTH, Bid.PASS),
    ]
    obs = encode_bidding_observation(hand, history, Player.EAST)
    assert len(obs) == BIDDING_OBS_SIZE
    level = obs[32:43]
    assert level.index(1.0) == SUIT_BIDS.index(Bid.HUNDRED) + 1
    trump = obs[43:47]
    assert trump.index(1.0) == int(Suit.HEARTS)
    bidder_seat = obs[47:51]
    assert bidder_seat.index(1.0) == 1  # South sits right after East
    assert obs[51:53] == [1.0, 0.0]
    trailing = obs[53:57]
    assert trailing.index(1.0) == 1
