from pathlib import Path

import pytest

from klinecamp.config import GameConfig, config_from_dict, load_game_config, loads_jsonc
from klinecamp.errors import ConfigurationError


def test_loads_jsonc_supports_comments_and_trailing_commas() -> None:
    data = loads_jsonc(
        """
        {
          // line comment
          "name": "demo // not a comment",
          "items": [1, 2,],
          /* block comment */
          "enabled": true,
        }
        """
    )
    assert data["name"] == "demo // not a comment"
    assert data["items"] == [1, 2]
    assert data["enabled"] is True


def test_load_game_config_resolves_history_next_to_file(tmp_path: Path) -> None:
    cfg_path = tmp_path / "game.jsonc"
    cfg_path.write_text(
        """
        {
          "series_days": 60,
          "initial_capital": 50000,
          "history_path": "data/history.db", // relative
          "max_turn": 12,
        }
        """,
        encoding="utf-8",
    )
    cfg = load_game_config(cfg_path)
    assert cfg.series_days == 60
    assert cfg.initial_capital == 50_000.0
    assert cfg.history_path == tmp_path / "data" / "history.db"
    assert cfg.max_turn == 12
    assert cfg.lot_size == GameConfig().lot_size


@pytest.mark.parametrize(
    "raw",
    [
        {"unknown": 1},
        {"series_days": -1},
        {"lot_size": 0},
        {"max_turn": "36"},
        {"initial_capital": "lots"},
        {"initial_capital": 0},
    ],
)
def test_invalid_values_raise_configuration_error(raw: dict) -> None:
    with pytest.raises(ConfigurationError):
        config_from_dict(raw)


def test_unreadable_or_malformed_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_game_config(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_game_config(bad)
