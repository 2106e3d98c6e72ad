from __future__ import annotations

from typing import Dict, Optional, Set

from .agent import DIRECTIONS, Direction

KEY_BINDINGS: Dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "w": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "s": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "a": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "d": Direction.RIGHT,
}


class HeldKeys:
    def __init__(self) -> None:
        self._held: Set[str] = set()

    def press(self, key: str) -> None:
        if key in KEY_BINDINGS:
            self._held.add(key)

    def release(self, key: str) -> None:
        self._held.discard(key)

    def clear(self) -> None:
        self._held.clear()

    def direction(self) -> Optional[Direction]:
        held = {KEY_BINDINGS[key] for key in self._held}
        chosen: Optional[Direction] = None
        # Later directions override earlier ones when several keys are held.
        for direction in DIRECTIONS:
            if direction in held:
                chosen = direction
        return chosen
