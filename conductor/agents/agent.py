"""Agent — bounded tool-selection loop. Composition over inheritance."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from ..config.agent import AgentConfig
from ..events import EventBus
from ..types import (
    AgentResponse,
    AgentStatus,
    AgentStep,
    ErrorEvent,
    ResponseMetrics,
    StepEvent,
    Tool,
)
from .strategy import (
    LLMDecisionStrategy, LoopContext, LoopResult, LoopStrategy, StopPredicate, never_stop,
)

logger = logging.getLogger(__name__)


class Agent:
    """Provider + tools + loop strategy -> AgentResponse.

    Every call to :meth:`execute` starts from an empty step list. Steps
    recorded before a failure stay readable through :attr:`steps`.
    """

    def __init__(
        self,
        config: AgentConfig,
        *,
        strategy: LoopStrategy | None = None,
        should_stop: StopPredicate | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config
        self.name = config.name
        self.strategy = strategy or LLMDecisionStrategy()
        self.should_stop = should_stop or never_stop
        self.event_bus = event_bus or EventBus(node_id=config.name)
        self.status = AgentStatus.IDLE
        self._steps: list[AgentStep] = []
        self._start = 0.0

    @property
    def steps(self) -> tuple[AgentStep, ...]:
        return tuple(self._steps)

    def on(self, event_type: str, handler: Callable) -> None:
        self.event_bus.on(event_type, handler)

    def off(self, event_type: str, handler: Callable) -> None:
        self.event_bus.off(event_type, handler)

    def get_tool(self, name: str) -> Tool:
        return self._context(None).get_tool(name)

    async def execute(self, input: Any) -> AgentResponse:
        self._start = time.monotonic()
        self._steps = []
        self.status = AgentStatus.RUNNING
        try:
            output = await self.run_agent_loop(input)
            response = self._create_response(output)
        except Exception as e:
            logger.debug("Agent %s failed after %d steps: %s", self.name, len(self._steps), e)
            await self.event_bus.emit(ErrorEvent(source=self.name, error=e))
            raise
        finally:
            self.status = AgentStatus.IDLE
        logger.info("Agent %s completed in %dms (%d steps)", self.name, response.metrics.duration, len(response.steps))
        return response

    async def run_agent_loop(self, input: Any) -> LoopResult:
        return await self.strategy.execute(self._context(input))

    def _context(self, input: Any) -> LoopContext:
        return LoopContext(
            agent_name=self.name,
            config=self.config,
            provider=self.config.llm_provider,
            tools=list(self.config.tools),
            input=input,
            max_iterations=self.config.max_iterations,
            steps=self._steps,
            record=self._record,
            should_stop=self.should_stop,
        )

    async def _record(self, step: AgentStep) -> None:
        self._steps.append(step)
        await self.event_bus.emit(StepEvent(source=self.name, step=step))

    def _create_response(self, result: LoopResult) -> AgentResponse:
        return AgentResponse(
            output=result.output,
            steps=tuple(self._steps),
            metrics=ResponseMetrics(
                total_tokens=0,
                total_cost=0.0,
                duration=int((time.monotonic() - self._start) * 1000),
            ),
        )
