from __future__ import annotations

from ..core.agent import Agent


def advance(agent: Agent) -> None:
    step = agent.direction.vector * agent.speed
    agent.position.update(agent.position.x + step.x, agent.position.y + step.y)
