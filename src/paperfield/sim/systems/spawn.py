from __future__ import annotations

from typing import List

from pygame.math import Vector2

from ..core.agent import Agent
from ..core.config import SimulationConfig
from ..core.rng import DeterministicRng
from ..core.territory import TerritoryMap

PLAYER_TOKEN = 1


def spawn_roster(config: SimulationConfig, rng: DeterministicRng) -> List[Agent]:
    cell = config.cell_size
    px, py = config.player_spawn_cell
    roster = [
        Agent(
            id=0,
            token=PLAYER_TOKEN,
            color=config.player_color,
            position=Vector2(px * cell, py * cell),
            speed=config.player_speed,
        )
    ]
    bot_colors = list(dict.fromkeys(color for color in config.palette if color != config.player_color))
    colors = rng.sample_distinct(bot_colors, config.bot_count)
    margin = config.bot_spawn_margin
    span_x = config.grid_width - 2 * margin
    span_y = config.grid_height - 2 * margin
    for index, color in enumerate(colors, start=1):
        gx = rng.next_int(span_x) + margin
        gy = rng.next_int(span_y) + margin
        roster.append(
            Agent(
                id=index,
                token=PLAYER_TOKEN + index,
                color=color,
                position=Vector2(gx * cell, gy * cell),
                speed=config.bot_speed,
                is_bot=True,
            )
        )
    return roster


def claim_starting_territory(roster: List[Agent], territory: TerritoryMap, radius: int) -> None:
    # Later spawns overwrite overlapping cells of earlier ones.
    for agent in roster:
        gx, gy = territory.cell_of(agent.position)
        territory.claim_square(gx, gy, radius, agent.token)
    for agent in roster:
        agent.score = territory.count_owned(agent.token)
