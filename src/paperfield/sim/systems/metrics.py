from __future__ import annotations

from typing import Sequence

from ..core.agent import Agent
from ..types.metrics import TickMetrics


def create_metrics(
    tick: int,
    agents: Sequence[Agent],
    deaths: int,
    claims: int,
    claimed_cells: int,
    duration_ms: float,
) -> TickMetrics:
    player = agents[0]
    leader = max(agents, key=lambda agent: agent.score)
    return TickMetrics(
        tick=tick,
        alive=sum(1 for agent in agents if agent.alive),
        deaths=deaths,
        claims=claims,
        claimed_cells=claimed_cells,
        player_alive=player.alive,
        player_score=player.score,
        leader_id=leader.id,
        leader_score=leader.score,
        tick_duration_ms=duration_ms,
    )
