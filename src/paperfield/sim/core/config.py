from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml


def _default_palette() -> List[str]:
    return ["#33e", "#e33", "#3e3", "#ee3", "#e3e", "#3ee", "#eee"]


@dataclass
class SimulationConfig:
    time_step: float = 1.0 / 60.0
    cell_size: int = 20
    board_width: int = 600
    board_height: int = 600
    player_speed: float = 2.0
    bot_speed: float = 2.0
    bot_count: int = 5
    player_color: str = "#55f"
    palette: List[str] = field(default_factory=_default_palette)
    bot_cooldown_min: int = 4
    bot_cooldown_max: int = 9
    spawn_radius: int = 2
    player_spawn_cell: tuple[int, int] = (2, 2)
    # Bots spawn at least this many cells away from every board edge
    bot_spawn_margin: int = 2
    seed: int = 42
    config_version: str = "v1"

    @property
    def grid_width(self) -> int:
        return self.board_width // self.cell_size

    @property
    def grid_height(self) -> int:
        return self.board_height // self.cell_size

    @property
    def cooldown_range(self) -> tuple[int, int]:
        return (self.bot_cooldown_min, self.bot_cooldown_max)

    def validate(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.board_width % self.cell_size or self.board_height % self.cell_size:
            raise ValueError(
                f"board {self.board_width}x{self.board_height} is not a multiple of cell_size {self.cell_size}"
            )
        if self.player_speed <= 0 or self.bot_speed <= 0:
            raise ValueError("player_speed and bot_speed must be positive")
        if self.bot_count < 0:
            raise ValueError(f"bot_count must be non-negative, got {self.bot_count}")
        bot_colors = {color for color in self.palette if color != self.player_color}
        if len(bot_colors) < self.bot_count:
            raise ValueError(
                f"palette supplies {len(bot_colors)} bot colors distinct from the player, need {self.bot_count}"
            )
        if self.bot_cooldown_min < 0 or self.bot_cooldown_max < self.bot_cooldown_min:
            raise ValueError(f"invalid bot cooldown range {self.cooldown_range}")
        if self.spawn_radius < 0:
            raise ValueError(f"spawn_radius must be non-negative, got {self.spawn_radius}")
        if self.bot_count and self.grid_width - 2 * self.bot_spawn_margin <= 0:
            raise ValueError("board too narrow for bot_spawn_margin")
        if self.bot_count and self.grid_height - 2 * self.bot_spawn_margin <= 0:
            raise ValueError("board too short for bot_spawn_margin")

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


@dataclass
class AppConfig:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    broadcast_interval: int = 2


def load_config(raw: dict) -> SimulationConfig:
    def _pair(value: tuple[int, int] | list[int] | None, default: tuple[int, int]) -> tuple[int, int]:
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return (int(value[0]), int(value[1]))
        return default

    defaults = SimulationConfig()
    cooldown = raw.get("bot_cooldown")
    values = {k: v for k, v in raw.items() if k not in {"player_spawn_cell", "palette", "bot_cooldown"}}
    if isinstance(cooldown, (tuple, list)) and len(cooldown) == 2:
        values["bot_cooldown_min"], values["bot_cooldown_max"] = int(cooldown[0]), int(cooldown[1])
    palette = raw.get("palette")
    config = SimulationConfig(
        player_spawn_cell=_pair(raw.get("player_spawn_cell"), defaults.player_spawn_cell),
        palette=[str(color) for color in palette] if palette else _default_palette(),
        **values,
    )
    config.validate()
    return config
