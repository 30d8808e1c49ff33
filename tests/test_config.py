"""Tests for match configuration files."""
from pathlib import Path

from belote.config import MatchConfig, config_from_dict, config_to_dict, load_config, save_config
from belote.game import SCORE_GOAL
from belote.players import Player


def test_defaults():
    cfg = load_config(None)
    assert cfg == MatchConfig()
    assert cfg.score_goal == SCORE_GOAL
    assert cfg.first_player == Player.SOUTH
    assert cfg.seed is None


def test_save_and_load(tmp_path: Path):
    cfg = MatchConfig(score_goal=500, first_player=Player.EAST, max_redeals=5, seed=7)
    path = save_config(cfg, tmp_path / "cfg" / "match.json")
    assert path.exists()
    assert load_config(path) == cfg


def test_missing_keys_fall_back_to_defaults():
    cfg = config_from_dict({"first_player": "west"})
    assert cfg.first_player == Player.WEST
    assert cfg.score_goal == SCORE_GOAL
    assert config_to_dict(cfg)["first_player"] == "west"
