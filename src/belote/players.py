"""
Seats and partnerships.
Four players sit in a fixed clockwise rotation: South -> West -> North -> East -> South.
South/North play together against East/West.
"""
from __future__ import annotations

from enum import Enum


class Team(Enum):
    """The two partnerships."""
    SOUTH_NORTH = "south_north"
    EAST_WEST = "east_west"


class Player(Enum):
    NORTH = "north"
    WEST = "west"
    SOUTH = "south"
    EAST = "east"

    def next_player(self) -> Player:
        """Next seat clockwise."""
        return _NEXT_PLAYER[self]

    def team(self) -> Team:
        return _TEAM[self]

    def __str__(self) -> str:
        return self.name.title()


_NEXT_PLAYER = {
    Player.SOUTH: Player.WEST,
    Player.WEST: Player.NORTH,
    Player.NORTH: Player.EAST,
    Player.EAST: Player.SOUTH,
}

_TEAM = {
    Player.SOUTH: Team.SOUTH_NORTH,
    Player.NORTH: Team.SOUTH_NORTH,
    Player.EAST: Team.EAST_WEST,
    Player.WEST: Team.EAST_WEST,
}


def next_player(player: Player) -> Player:
    return _NEXT_PLAYER[player]


def team(player: Player) -> Team:
    return _TEAM[player]


def same_team(a: Player, b: Player) -> bool:
    """True if both players are partners (or the same seat)."""
    return _TEAM[a] == _TEAM[b]


def rotation(start: Player) -> list[Player]:
    """The four seats in play order, starting at ``start``."""
    order = [start]
    while len(order) < 4:
        order.append(_NEXT_PLAYER[order[-1]])
    return order


__all__ = ["Player", "Team", "next_player", "team", "same_team", "rotation"]
