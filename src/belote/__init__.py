"""Belote engine: auction (enchères) for 4 players in two teams."""

__version__ = "0.1.0"

from .players import Player, Team, next_player, team, same_team
from .deck import Card, Rank, Suit, make_deck_32
from .deal import Deal, deal_4p
from .bidding import (
    Bid,
    BiddingState,
    BidEntry,
    BidPhase,
    Contract,
    available_bids,
    extract_contract,
    run_bidding,
)
from .exceptions import (
    BeloteError,
    BiddingError,
    PhaseClosedError,
    WrongTurnError,
    IllegalBidError,
    MissingSuitError,
    NoContractError,
    InconsistentHistoryError,
)
from .game import SCORE_GOAL, Game, Round, run_game
