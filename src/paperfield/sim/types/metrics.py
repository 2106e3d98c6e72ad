from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    alive: int
    deaths: int
    claims: int
    claimed_cells: int
    player_alive: bool
    player_score: int
    leader_id: int
    leader_score: int
    tick_duration_ms: float = 0.0
