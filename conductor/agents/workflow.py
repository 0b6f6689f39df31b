"""Workflow — run named agents one at a time in dependency order."""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..config.agent import AgentConfig, ChainConfig, WorkflowConfig
from ..errors import ConfigurationError, WorkflowCycleError
from ..events import EventBus
from ..types import AgentCompleteEvent, AgentResponse, ErrorEvent
from .agent import Agent
from .chain import Chain

logger = logging.getLogger(__name__)

AgentFactory = Callable[[AgentConfig], Agent]


def build_agent(config: AgentConfig) -> Agent:
    if isinstance(config, ChainConfig):
        return Chain(config)
    return Agent(config)


class Workflow:
    """A DAG of agents.

    Roots receive the workflow input. Every other node receives a dict of
    its predecessors' outputs keyed by predecessor name. Edge conditions are
    stored but never evaluated.
    """

    def __init__(
        self,
        config: WorkflowConfig,
        *,
        agent_factory: AgentFactory | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config
        self.name = config.name
        self.event_bus = event_bus or EventBus(node_id=config.name)
        self._validate(config)
        factory = agent_factory or build_agent
        self.agents: dict[str, Agent] = {cfg.name: factory(cfg) for cfg in config.agents}
        self.execution_order: list[str] = self._compute_execution_order()

    def on(self, event_type: str, handler: Callable) -> None:
        self.event_bus.on(event_type, handler)

    def off(self, event_type: str, handler: Callable) -> None:
        self.event_bus.off(event_type, handler)

    async def execute(self, input: Any) -> dict[str, AgentResponse]:
        results: dict[str, AgentResponse] = {}
        outputs: dict[str, Any] = {}
        for name in self.execution_order:
            agent = self.agents[name]
            agent_input = self._prepare_input(name, input, outputs)
            try:
                result = await agent.execute(agent_input)
            except Exception as e:
                await self.event_bus.emit(ErrorEvent(source=name, error=e))
                raise
            results[name] = result
            outputs[name] = result.output
            logger.debug("Workflow %s: %s complete", self.name, name)
            await self.event_bus.emit(AgentCompleteEvent(agent=name, result=result))
        logger.info("Workflow %s completed %d agents", self.name, len(results))
        return results

    def _prepare_input(self, name: str, input: Any, outputs: dict[str, Any]) -> Any:
        incoming = self.config.graph.incoming(name)
        if not incoming:
            return input
        return {edge.source: outputs[edge.source] for edge in incoming}

    def _compute_execution_order(self) -> list[str]:
        graph = self.config.graph
        visited: set[str] = set()
        on_stack: set[str] = set()
        order: list[str] = []

        def visit(node: str) -> None:
            if node in on_stack:
                raise WorkflowCycleError(self.name, node)
            if node in visited:
                return
            on_stack.add(node)
            for edge in graph.outgoing(node):
                visit(edge.target)
            on_stack.discard(node)
            visited.add(node)
            order.insert(0, node)

        for node in graph.nodes:
            if node not in visited:
                visit(node)
        return order

    @staticmethod
    def _validate(config: WorkflowConfig) -> None:
        names = [a.name for a in config.agents]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate agent names: {', '.join(duplicates)}")
        nodes = set(config.graph.nodes)
        missing = [n for n in config.graph.nodes if n not in names]
        if missing:
            raise ConfigurationError(f"No agent configured for nodes: {', '.join(missing)}")
        for edge in config.graph.edges:
            for end in (edge.source, edge.target):
                if end not in nodes:
                    raise ConfigurationError(f"Edge {edge.source}->{edge.target} references unknown node {end}")
