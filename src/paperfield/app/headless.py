from __future__ import annotations

import argparse
import csv
import json
import logging
import math
from pathlib import Path
from typing import Optional

from ..sim.core.config import SimulationConfig
from ..sim.core.world import World
from ..sim.types.metrics import TickMetrics


_BASIC_HEADER = [
    "tick",
    "alive",
    "deaths",
    "claims",
    "player_score",
    "tick_ms",
]

_DETAILED_HEADER = [
    "tick",
    "alive",
    "deaths",
    "claims",
    "claimed_cells",
    "player_alive",
    "player_score",
    "leader_id",
    "leader_score",
    "tick_ms",
    "trail_points",
    "agents_in_trail",
    "owned_cells",
    "owned_ratio",
]


def _format_basic_row(metrics: TickMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.alive,
        metrics.deaths,
        metrics.claims,
        metrics.player_score,
        f"{tick_ms:.3f}",
    ]


def _format_detailed_row(world: World, metrics: TickMetrics, tick_ms: float) -> list[object]:
    living = [agent for agent in world.agents if agent.alive]
    trail_points = sum(len(agent.trail) for agent in living)
    agents_in_trail = sum(1 for agent in living if agent.in_trail)
    owned_cells = sum(world.territory.owned_counts().values())
    total_cells = world.territory.width * world.territory.height
    owned_ratio = owned_cells / total_cells if total_cells > 0 else 0.0
    return [
        metrics.tick,
        metrics.alive,
        metrics.deaths,
        metrics.claims,
        metrics.claimed_cells,
        int(metrics.player_alive),
        metrics.player_score,
        metrics.leader_id,
        metrics.leader_score,
        f"{tick_ms:.3f}",
        trail_points,
        agents_in_trail,
        owned_cells,
        f"{owned_ratio:.4f}",
    ]


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        return 0.0
    if len(sorted_values) == 1:
        return float(sorted_values[0])
    pos = (len(sorted_values) - 1) * percentile
    low = int(math.floor(pos))
    high = int(math.ceil(pos))
    if low == high:
        return float(sorted_values[low])
    weight = pos - low
    return float(sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight)


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p90": 0.0, "p99": 0.0}
    sorted_values = sorted(values)
    return {
        "min": float(sorted_values[0]),
        "max": float(sorted_values[-1]),
        "avg": float(sum(values) / len(values)),
        "p50": _percentile(sorted_values, 0.50),
        "p90": _percentile(sorted_values, 0.90),
        "p99": _percentile(sorted_values, 0.99),
    }


def _load_config(config_path: Optional[Path], seed: Optional[int]) -> SimulationConfig:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    return config


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    log_format: str = "detailed",
    summary_path: Optional[Path] = None,
    config_path: Optional[Path] = None,
) -> World:
    """Run a session without input; the player keeps its starting heading."""

    log_mode = log_format.lower().strip()
    if log_mode not in {"basic", "detailed"}:
        raise ValueError(f"Unknown log format: {log_format}")

    config = _load_config(config_path, seed)
    world = World(config)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_DETAILED_HEADER if log_mode == "detailed" else _BASIC_HEADER)

    tick_ms_series: list[float] = []
    claims_total = 0
    try:
        for tick in range(steps):
            metrics = world.step(tick)
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
            tick_ms_series.append(tick_ms)
            claims_total += metrics.claims
            if writer:
                if log_mode == "detailed":
                    writer.writerow(_format_detailed_row(world, metrics, tick_ms))
                else:
                    writer.writerow(_format_basic_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()

    if summary_path:
        owned = world.territory.owned_counts()
        summary = {
            "steps": steps,
            "seed": config.seed,
            "log_format": log_mode,
            "deterministic_log": deterministic_log,
            "claims": claims_total,
            "tick_ms": _summary_stats(tick_ms_series),
            "agents": [
                {
                    "id": agent.id,
                    "color": agent.color,
                    "is_bot": agent.is_bot,
                    "alive": agent.alive,
                    "score": agent.score,
                    "owned_cells": owned.get(agent.token, 0),
                    "death_tick": agent.death_tick,
                    "death_cause": agent.death_cause.value if agent.death_cause else None,
                    "killed_by": agent.killed_by,
                }
                for agent in world.agents
            ],
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))
    return world


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless territory contest simulation")
    parser.add_argument("--steps", type=int, default=3000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding SimulationConfig fields")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write metrics")
    parser.add_argument(
        "--log-format",
        choices=["basic", "detailed"],
        default="detailed",
        help="CSV format to write when --log is provided.",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write final scores and deaths for the run.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="INFO", help="Python logging level for simulation events")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        log_format=args.log_format,
        summary_path=args.summary,
        config_path=args.config,
    )


if __name__ == "__main__":
    main()
