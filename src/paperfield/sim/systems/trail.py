from __future__ import annotations

from pygame.math import Vector2

from ..core.agent import Agent
from ..core.territory import TerritoryMap


def step_trail(agent: Agent, territory: TerritoryMap) -> int | None:
    if territory.owner_at(agent.position) != agent.token:
        agent.in_trail = True
        agent.trail.append(Vector2(agent.position))
        return None
    if agent.in_trail:
        return claim(agent, territory)
    return None


def claim(agent: Agent, territory: TerritoryMap) -> int:
    converted = 0
    for point in agent.trail:
        gx, gy = territory.cell_of(point)
        if not territory.in_range(gx, gy):
            continue
        if territory.owner_of(gx, gy) != agent.token:
            territory.set_owner(gx, gy, agent.token)
            converted += 1
    agent.trail.clear()
    agent.in_trail = False
    agent.score = territory.count_owned(agent.token)
    return converted
