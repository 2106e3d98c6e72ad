from __future__ import annotations

from typing import Optional, Sequence

from ..core.agent import Agent, DeathCause
from ..core.territory import TerritoryMap


def check_death(agent: Agent, territory: TerritoryMap, agents: Sequence[Agent]) -> Optional[DeathCause]:
    if not territory.contains(agent.position):
        agent.alive = False
        agent.death_cause = DeathCause.OUT_OF_BOUNDS
        return agent.death_cause

    cell = territory.cell_of(agent.position)
    for other in agents:
        if not other.alive or other.token == agent.token:
            continue
        for point in other.trail:
            if territory.cell_of(point) == cell:
                agent.alive = False
                agent.death_cause = DeathCause.TRAIL_COLLISION
                agent.killed_by = other.id
                return agent.death_cause
    return None
