from __future__ import annotations

from pathlib import Path

import pytest

from paperfield.sim.core.config import SimulationConfig, load_config


def test_defaults_describe_a_30_by_30_board():
    config = SimulationConfig()
    config.validate()

    assert config.grid_width == 30
    assert config.grid_height == 30
    assert config.cooldown_range == (4, 9)


def test_load_config_reads_nested_values():
    config = load_config(
        {
            "cell_size": 10,
            "board_width": 200,
            "board_height": 100,
            "bot_count": 2,
            "palette": ["#111", "#222", "#333"],
            "player_spawn_cell": [4, 5],
            "bot_cooldown": [1, 3],
            "seed": 17,
        }
    )

    assert (config.grid_width, config.grid_height) == (20, 10)
    assert config.palette == ["#111", "#222", "#333"]
    assert config.player_spawn_cell == (4, 5)
    assert config.cooldown_range == (1, 3)
    assert config.seed == 17


def test_from_yaml(tmp_path):
    path = tmp_path / "session.yaml"
    path.write_text("bot_count: 1\nbot_speed: 3.0\nspawn_radius: 1\n")

    config = SimulationConfig.from_yaml(path)

    assert config.bot_count == 1
    assert config.bot_speed == 3.0
    assert config.spawn_radius == 1
    assert config.player_spawn_cell == (2, 2)


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert SimulationConfig.from_yaml(path) == SimulationConfig()


@pytest.mark.parametrize(
    "overrides",
    [
        {"bot_count": 8},
        {"palette": ["#55f", "#e33", "#e33"], "bot_count": 2},
        {"board_width": 610},
        {"bot_cooldown_min": 5, "bot_cooldown_max": 4},
        {"spawn_radius": -1},
        {"bot_speed": 0.0},
        {"cell_size": 0},
    ],
)
def test_validate_rejects_unusable_sessions(overrides):
    with pytest.raises(ValueError):
        SimulationConfig(**overrides).validate()


def test_palette_must_cover_every_bot_besides_the_player():
    config = SimulationConfig(bot_count=2, player_color="#111", palette=["#111", "#222", "#333"])

    config.validate()


def test_shipped_session_file_matches_defaults():
    path = Path(__file__).resolve().parents[2] / "configs" / "session.yaml"

    assert SimulationConfig.from_yaml(path) == SimulationConfig()
