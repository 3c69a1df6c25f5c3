"""Small autonomous desktop agents that wake and rest at random."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol

MAX_AGENTS = 32
PHASE_STEP = 0.1
ACTIVATION_ODDS = 10


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class AgentType(Enum):
    """What an agent does; the value is its display name."""

    OPTIMIZER = "optimizer"
    SUGGESTER = "suggester"
    MONITOR = "monitor"
    HEALTH = "health"
    SOCIAL = "social"


class AgentState(Enum):
    """What an agent is doing now; the value is its display name."""

    IDLE = "idle"
    ACTIVE = "active"
    INTERACTING = "interacting"


@dataclass
class Agent:
    """An agent with a goal, a position and an animation phase."""

    id: int
    agent_type: AgentType
    goal: str | None
    x: int
    y: int
    color: int
    state: AgentState = AgentState.IDLE
    anim_phase: float = 0.0
    on_interact: Callable[["Agent"], None] | None = None

    def render(self) -> str:
        """Return the agent's description and goal on two lines."""
        return (
            f"[Agent] {self.id} {self.agent_type.value} ({self.state.value}) "
            f"at ({self.x},{self.y}) color=#{self.color:06X} phase={self.anim_phase:.2f}\n"
            f"  Goal: {self.goal if self.goal is not None else '(none)'}"
        )


@dataclass
class AgentManager:
    """A bounded set of agents advanced together one tick at a time."""

    agents: list[Agent] = field(default_factory=list)
    rng: _RandomSource = field(default_factory=random.Random)

    def create(
        self, agent_type: AgentType, goal: str | None, x: int, y: int, color: int
    ) -> Agent | None:
        """Create an agent and return it; None once the manager is full."""
        if len(self.agents) >= MAX_AGENTS:
            return None
        agent = Agent(len(self.agents), AgentType(agent_type), goal, x, y, color)
        self.agents.append(agent)
        return agent

    def tick(self) -> None:
        """Advance every agent's animation and maybe toggle it between idle and active."""
        for agent in self.agents:
            agent.anim_phase += PHASE_STEP
            if agent.anim_phase > 1.0:
                agent.anim_phase = 0.0
            if agent.state is AgentState.IDLE and self.rng.randrange(ACTIVATION_ODDS) == 0:
                agent.state = AgentState.ACTIVE
                print(f"[Agent] {agent.id} ({agent.goal}) activated")
            elif agent.state is AgentState.ACTIVE and self.rng.randrange(ACTIVATION_ODDS) == 0:
                agent.state = AgentState.IDLE
                print(f"[Agent] {agent.id} ({agent.goal}) idling")