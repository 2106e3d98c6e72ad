import asyncio
import json

from paperfield.app.server import SimulationController
from paperfield.sim.core.agent import Direction
from paperfield.sim.core.config import SimulationConfig


def test_snapshot_queue_ack_cleanup() -> None:
    controller = SimulationController(SimulationConfig())

    async def exercise() -> None:
        controller.tick = 1
        await controller._broadcast_snapshot()
        controller.tick = 2
        await controller._broadcast_snapshot()
        async with controller._queue_lock:
            queued_ticks = [item.tick for item in controller._snapshot_queue]
        assert queued_ticks == [1, 2]
        await controller.handle_message(json.dumps({"type": "ack", "tick": 1}))
        async with controller._queue_lock:
            remaining_ticks = [item.tick for item in controller._snapshot_queue]
        assert remaining_ticks == [2]

    asyncio.run(exercise())


def test_snapshot_payload_is_json_with_territory() -> None:
    controller = SimulationController(SimulationConfig(bot_count=2))

    queued = controller._serialize_snapshot()
    message = json.loads(queued.payload)

    assert message["type"] == "snapshot"
    payload = message["payload"]
    assert len(payload["territory"]) == 30
    assert len(payload["agents"]) == 3
    assert payload["palette"]["1"] == "#55f"
    assert payload["world"]["cell_size"] == 20


def test_key_messages_steer_the_player() -> None:
    controller = SimulationController(SimulationConfig(bot_count=0))

    async def exercise() -> None:
        await controller.handle_message(json.dumps({"type": "key", "key": "ArrowUp", "pressed": True}))
        assert controller.keys.direction() is Direction.UP
        await controller.step_once()
        await controller.handle_message(json.dumps({"type": "key", "key": "ArrowUp", "pressed": False}))
        await controller.handle_message("not json")
        await controller.handle_message(json.dumps({"type": "key"}))
        await controller.step_once()

    asyncio.run(exercise())

    player = controller.world.player
    assert controller.tick == 2
    assert player.direction is Direction.UP
    assert (player.position.x, player.position.y) == (40, 36)


def test_reset_clears_keys_and_ticks() -> None:
    controller = SimulationController(SimulationConfig(bot_count=1))

    async def exercise() -> None:
        controller.keys.press("s")
        await controller.step_once()
        await controller.reset()

    asyncio.run(exercise())

    assert controller.tick == 0
    assert controller.keys.direction() is None
    assert [item.tick for item in controller._snapshot_queue] == [0]


def test_snapshot_queue_stays_bounded_without_clients() -> None:
    controller = SimulationController(SimulationConfig(bot_count=1), max_queued=8)

    async def exercise() -> None:
        for _ in range(100):
            await controller.step_once()
            await controller._broadcast_snapshot()

    asyncio.run(exercise())

    ticks = [item.tick for item in controller._snapshot_queue]
    assert len(ticks) == 8
    assert ticks == list(range(93, 101))


def test_key_messages_require_boolean_pressed_flag() -> None:
    controller = SimulationController(SimulationConfig(bot_count=0))

    async def exercise() -> None:
        await controller.handle_message(json.dumps({"type": "key", "key": "ArrowLeft", "pressed": True}))
        await controller.handle_message(json.dumps({"type": "key", "key": "ArrowLeft", "pressed": "false"}))
        await controller.handle_message(json.dumps({"type": "key", "key": "ArrowLeft", "pressed": 0}))
        assert controller.keys.direction() is Direction.LEFT
        await controller.handle_message(json.dumps({"type": "key", "key": "ArrowDown", "pressed": 1}))
        assert controller.keys.direction() is Direction.LEFT

    asyncio.run(exercise())
