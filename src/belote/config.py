"""
Match configuration.

A small dataclass with JSON import/export, so simulations can be rerun from a file:

    {"score_goal": 1000, "first_player": "south", "max_redeals": 100, "seed": 42}

Missing keys fall back to defaults.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .game import SCORE_GOAL
from .players import Player

CONFIG_SCHEMA_VERSION = 1


@dataclass
class MatchConfig:
    score_goal: int = SCORE_GOAL
    first_player: Player = Player.SOUTH
    # Consecutive thrown-in deals tolerated before a simulation gives up
    max_redeals: int = 100
    seed: Optional[int] = None


def config_to_dict(cfg: MatchConfig) -> Dict[str, Any]:
    return {
        "schema_version": CONFIG_SCHEMA_VERSION,
        "score_goal": cfg.score_goal,
        "first_player": cfg.first_player.value,
        "max_redeals": cfg.max_redeals,
        "seed": cfg.seed,
    }


def config_from_dict(d: Dict[str, Any]) -> MatchConfig:
    seed = d.get("seed")
    return MatchConfig(
        score_goal=int(d.get("score_goal", SCORE_GOAL)),
        first_player=Player(d.get("first_player", Player.SOUTH.value)),
        max_redeals=int(d.get("max_redeals", 100)),
        seed=int(seed) if seed is not None else None,
    )


def save_config(cfg: MatchConfig, path: Path | str) -> Path:
    """Write ``cfg`` as JSON; creates parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config_to_dict(cfg), indent=2), encoding="utf-8")
    return path


def load_config(path: Path | str | None = None) -> MatchConfig:
    """Load a MatchConfig from JSON; defaults when ``path`` is None."""
    if path is None:
        return MatchConfig()
    with Path(path).open("r", encoding="utf-8") as fh:
        return config_from_dict(json.load(fh))


__all__ = [
    "CONFIG_SCHEMA_VERSION",
    "MatchConfig",
    "config_to_dict",
    "config_from_dict",
    "save_config",
    "load_config",
]
