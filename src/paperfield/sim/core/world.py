from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Dict, List, Optional

from .agent import Agent, Direction
from .config import SimulationConfig
from .rng import DeterministicRng
from .territory import TerritoryMap
from ..systems import collision, metrics as metrics_system, motion, planner, spawn, trail
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata, SnapshotWorld

logger = logging.getLogger(__name__)


class World:
    def __init__(self, config: SimulationConfig, rng: Optional[DeterministicRng] = None):
        config.validate()
        self._config = config
        self._rng = rng if rng is not None else DeterministicRng(config.seed)
        self._territory = TerritoryMap(config.grid_width, config.grid_height, config.cell_size)
        self._agents: List[Agent] = []
        self._metrics: TickMetrics | None = None
        self._bootstrap()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def territory(self) -> TerritoryMap:
        return self._territory

    @property
    def agents(self) -> List[Agent]:
        return self._agents

    @property
    def player(self) -> Agent:
        return self._agents[0]

    @property
    def bots(self) -> List[Agent]:
        return self._agents[1:]

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def agent(self, agent_id: int) -> Agent:
        return self._agents[agent_id]

    def palette(self) -> Dict[int, str]:
        return {agent.token: agent.color for agent in self._agents}

    def reset(self) -> None:
        self._agents.clear()
        self._territory.clear()
        self._rng.reset()
        self._metrics = None
        self._bootstrap()

    def step(self, tick: int, player_direction: Optional[Direction] = None) -> TickMetrics:
        start = perf_counter()
        config = self._config
        territory = self._territory
        agents = self._agents
        player = self.player
        deaths = 0
        claims = 0
        claimed_cells = 0

        for agent in agents:
            if not agent.alive:
                continue
            if agent.is_bot:
                planner.tick_bot(agent, territory, player, self._rng, config.cooldown_range)
            elif player_direction is not None:
                agent.direction = player_direction

            motion.advance(agent)
            converted = trail.step_trail(agent, territory)
            if converted is not None:
                claims += 1
                claimed_cells += converted
                logger.debug(
                    "agent %d claimed %d cells at tick %d (score %d)", agent.id, converted, tick, agent.score
                )

            cause = collision.check_death(agent, territory, agents)
            if cause is not None:
                agent.death_tick = tick
                deaths += 1
                logger.info("agent %d died at tick %d: %s", agent.id, tick, cause.value)

        elapsed_ms = (perf_counter() - start) * 1000.0
        metrics = metrics_system.create_metrics(tick, agents, deaths, claims, claimed_cells, elapsed_ms)
        self._metrics = metrics
        return metrics

    def snapshot(self, tick: int) -> Snapshot:
        metrics = self._metrics
        if metrics is None:
            metrics = metrics_system.create_metrics(tick, self._agents, 0, 0, 0, 0.0)
        config = self._config
        metadata = SnapshotMetadata(
            sim_dt=config.time_step,
            tick_rate=0.0 if config.time_step <= 0 else 1.0 / config.time_step,
            seed=self._rng.seed,
            config_version=config.config_version,
        )
        world = SnapshotWorld(
            board_width=self._territory.board_width,
            board_height=self._territory.board_height,
            cell_size=self._territory.cell_size,
            grid_width=self._territory.width,
            grid_height=self._territory.height,
        )
        return Snapshot(
            tick=tick,
            metrics=metrics,
            agents=[self._agent_snapshot(agent) for agent in self._agents],
            territory=self._territory.rows(),
            palette=self.palette(),
            world=world,
            metadata=metadata,
        )

    def _bootstrap(self) -> None:
        self._agents.extend(spawn.spawn_roster(self._config, self._rng))
        spawn.claim_starting_territory(self._agents, self._territory, self._config.spawn_radius)
        logger.info(
            "session started: %d bots on a %dx%d grid (seed %d)",
            len(self._agents) - 1,
            self._territory.width,
            self._territory.height,
            self._rng.seed,
        )

    @staticmethod
    def _agent_snapshot(agent: Agent) -> Dict[str, Any]:
        return {
            "id": agent.id,
            "token": agent.token,
            "color": agent.color,
            "x": agent.position.x,
            "y": agent.position.y,
            "direction": agent.direction.value,
            "is_bot": agent.is_bot,
            "alive": agent.alive,
            "score": agent.score,
            "in_trail": agent.in_trail,
            "trail": [[point.x, point.y] for point in agent.trail] if agent.alive else [],
            "death_cause": agent.death_cause.value if agent.death_cause else None,
        }
