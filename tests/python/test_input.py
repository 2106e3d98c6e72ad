from __future__ import annotations

from paperfield.sim.core.agent import Direction
from paperfield.sim.core.input import HeldKeys


def test_no_keys_means_no_direction():
    assert HeldKeys().direction() is None


def test_arrow_and_letter_keys_map_to_directions():
    keys = HeldKeys()
    for key, expected in [("ArrowUp", Direction.UP), ("s", Direction.DOWN), ("a", Direction.LEFT), ("ArrowRight", Direction.RIGHT)]:
        keys.clear()
        keys.press(key)
        assert keys.direction() is expected


def test_later_directions_win_when_several_are_held():
    keys = HeldKeys()
    keys.press("d")
    keys.press("w")
    assert keys.direction() is Direction.RIGHT

    keys.release("d")
    assert keys.direction() is Direction.UP

    keys.press("ArrowLeft")
    keys.press("ArrowDown")
    assert keys.direction() is Direction.LEFT


def test_unknown_keys_are_ignored():
    keys = HeldKeys()
    keys.press("space")
    keys.release("never-pressed")

    assert keys.direction() is None
