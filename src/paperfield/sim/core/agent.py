from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pygame.math import Vector2


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def vector(self) -> Vector2:
        return Vector2(_DIRECTION_VECTORS[self])


_DIRECTION_VECTORS = {
    Direction.UP: (0.0, -1.0),
    Direction.DOWN: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
}

# Evaluation order for bot move candidates.
DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class DeathCause(str, Enum):
    OUT_OF_BOUNDS = "OutOfBounds"
    TRAIL_COLLISION = "TrailCollision"


@dataclass(slots=True)
class Agent:
    id: int
    token: int
    color: str
    position: Vector2
    speed: float
    is_bot: bool = False
    direction: Direction = Direction.RIGHT
    alive: bool = True
    score: int = 0
    in_trail: bool = False
    trail: List[Vector2] = field(default_factory=list)
    turn_cooldown: int = 0
    death_cause: Optional[DeathCause] = None
    death_tick: Optional[int] = None
    killed_by: Optional[int] = None
