"""Exception hierarchy for the Belote engine."""

from __future__ import annotations

__all__ = [
    "BeloteError",
    "BiddingError",
    "PhaseClosedError",
    "WrongTurnError",
    "IllegalBidError",
    "MissingSuitError",
    "NoContractError",
    "InconsistentHistoryError",
]


class BeloteError(Exception):
    """Base exception for the project."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{self.__class__.__name__}({self.args})"


class BiddingError(BeloteError):
    """Raised when a submission is rejected by the auction."""


class PhaseClosedError(BiddingError):
    """Raised when bidding after the auction is settled."""


class WrongTurnError(BiddingError):
    """Raised when a player speaks out of turn."""


class IllegalBidError(BiddingError):
    """Raised when a bid is not allowed in the current auction."""


class MissingSuitError(BiddingError):
    """Raised when a bid that declares a trump comes without a suit."""


class NoContractError(BiddingError):
    """Raised when a contract is requested before the auction is done."""


class InconsistentHistoryError(BeloteError):
    """Raised when the bid history cannot produce a contract."""
