from __future__ import annotations

from typing import Dict

from pygame.math import Vector2

from ..core.agent import DIRECTIONS, Agent, Direction
from ..core.rng import DeterministicRng
from ..core.territory import TerritoryMap

OUT_OF_BOUNDS_PENALTY = 1000.0
OWN_TRAIL_PENALTY = 100.0


def tick_bot(
    bot: Agent,
    territory: TerritoryMap,
    player: Agent,
    rng: DeterministicRng,
    cooldown_range: tuple[int, int],
) -> bool:
    if bot.turn_cooldown > 0:
        bot.turn_cooldown -= 1
        return False
    decide(bot, territory, player, rng, cooldown_range)
    return True


def select_target(bot: Agent, territory: TerritoryMap, player: Agent) -> Vector2:
    cell_size = territory.cell_size
    best: tuple[int, int] | None = None
    best_dist = float("inf")
    for gx, gy in territory.foreign_cells(bot.token):
        dist = abs(bot.position.x - gx * cell_size) + abs(bot.position.y - gy * cell_size)
        if dist < best_dist:
            best = (gx, gy)
            best_dist = dist
    if best is None:
        return Vector2(player.position)
    return Vector2(best[0] * cell_size, best[1] * cell_size)


def score_moves(bot: Agent, territory: TerritoryMap, target: Vector2) -> Dict[Direction, float]:
    trail_cells = [territory.cell_of(point) for point in bot.trail]
    scores: Dict[Direction, float] = {}
    for direction in DIRECTIONS:
        candidate = bot.position + direction.vector * bot.speed
        score = -(abs(candidate.x - target.x) + abs(candidate.y - target.y))
        if not territory.contains(candidate):
            score -= OUT_OF_BOUNDS_PENALTY
        cell = territory.cell_of(candidate)
        score -= OWN_TRAIL_PENALTY * trail_cells.count(cell)
        scores[direction] = score
    return scores


def decide(
    bot: Agent,
    territory: TerritoryMap,
    player: Agent,
    rng: DeterministicRng,
    cooldown_range: tuple[int, int],
) -> Direction:
    target = select_target(bot, territory, player)
    scores = score_moves(bot, territory, target)
    best_score = max(scores.values())
    candidates = [direction for direction in DIRECTIONS if scores[direction] == best_score]
    bot.direction = rng.sample_choice(candidates)
    bot.turn_cooldown = rng.next_int_inclusive(*cooldown_range)
    return bot.direction
