"""Chain — a fixed pipeline of tool and prompt steps run by the Agent engine."""

from __future__ import annotations

from ..config.agent import ChainConfig
from ..events import EventBus
from .agent import Agent
from .strategy import StaticSequenceStrategy


class Chain(Agent):
    """An Agent whose loop walks ``config.steps`` once instead of asking the provider for tools."""

    def __init__(self, config: ChainConfig, *, event_bus: EventBus | None = None) -> None:
        super().__init__(config, strategy=StaticSequenceStrategy(config.steps), event_bus=event_bus)
