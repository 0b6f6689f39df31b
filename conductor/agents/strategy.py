"""Loop strategies — pluggable execution patterns for Agent (tool selection, static chains)."""

from __future__ import annotations

import dataclasses
import json
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel, ValidationError

from ..config.agent import ChainStep
from ..errors import ChainStepError, ToolDecisionError, ToolNotFoundError
from ..types import AgentStep, LLMProvider, StepType, Tool

logger = logging.getLogger(__name__)

_VARIABLE = re.compile(r"\{([^}]+)\}")

TOOL_SELECTION_PROMPT = (
    "Given the following input: {input}\n"
    "Available tools: {tools}\n"
    "Select the most appropriate tool and specify the action.\n"
    'Response format: {{ "tool": "tool_name", "action": "arguments to be passed to the tool" }}'
)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return as_mapping(value)
    return str(value)


def _to_json(value: Any) -> str:
    return json.dumps(value, default=_json_default)


def as_mapping(value: Any) -> dict[str, Any]:
    """Fields a step output contributes to the running chain state."""
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return {}


def _is_record(value: Any) -> bool:
    return isinstance(value, (Mapping, BaseModel)) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    )


def render_template(template: str, variables: Mapping[str, Any]) -> str:
    """Replace ``{name}`` tokens; unknown or None variables are left as written."""

    def _sub(match: re.Match) -> str:
        value = variables.get(match.group(1))
        if value is None:
            return match.group(0)
        return value if isinstance(value, str) else _to_json(value)

    return _VARIABLE.sub(_sub, template)


class ToolDecision(BaseModel):
    tool: str
    action: Any = None


@dataclass(frozen=True)
class LoopResult:
    output: Any
    steps: tuple[AgentStep, ...]
    duration: int  # ms


class LoopContext:
    __slots__ = (
        "agent_name", "config", "provider", "tools",
        "input", "max_iterations", "steps", "record", "should_stop",
    )

    def __init__(self, **kwargs) -> None:
        for k in self.__slots__:
            setattr(self, k, kwargs.get(k))

    def get_tool(self, name: str) -> Tool:
        for tool in self.tools:
            if tool.name == name:
                return tool
        raise ToolNotFoundError(name)


@runtime_checkable
class LoopStrategy(Protocol):
    name: str
    def execute(self, ctx: LoopContext) -> Awaitable[LoopResult]: ...


class LLMDecisionStrategy:
    """Default strategy: ask the provider for a tool, run it, feed its output back in."""

    name = "llm_decision"

    async def execute(self, ctx: LoopContext) -> LoopResult:
        start = time.monotonic()
        current = ctx.input
        for iteration in range(ctx.max_iterations):
            step = await self.execute_step(ctx, current)
            await ctx.record(step)
            if step.error is not None:
                raise step.error
            current = step.output
            logger.debug("%s iteration %d used %s", ctx.agent_name, iteration + 1, step.name)
            if ctx.should_stop(step):
                break
        return LoopResult(output=current, steps=tuple(ctx.steps), duration=_elapsed_ms(start))

    async def execute_step(self, ctx: LoopContext, current: Any) -> AgentStep:
        start = time.monotonic()
        try:
            decision = await self.decide_tool(ctx, current)
            tool = ctx.get_tool(decision.tool)
            output = await tool.execute(decision.action)
        except Exception as e:
            return AgentStep(
                type=StepType.TOOL, name="error", input=current,
                output=None, error=e, duration=_elapsed_ms(start),
            )
        return AgentStep(
            type=StepType.TOOL, name=decision.tool, input=decision.action,
            output=output, duration=_elapsed_ms(start),
        )

    async def decide_tool(self, ctx: LoopContext, current: Any) -> ToolDecision:
        provider: LLMProvider = ctx.provider
        response = await provider.complete(self.build_prompt(ctx.tools, current))
        try:
            return ToolDecision.model_validate_json(response.content)
        except ValidationError as e:
            raise ToolDecisionError(response.content, cause=e) from e

    @staticmethod
    def build_prompt(tools: list[Tool], current: Any) -> str:
        listing = [
            {"name": t.name, "description": t.description, "tool_arguments": getattr(t, "input", None)}
            for t in tools
        ]
        return TOOL_SELECTION_PROMPT.format(input=_to_json(current), tools=_to_json(listing))


class StaticSequenceStrategy:
    """Walk a chain's steps once, in order, merging each output onto the original input."""

    name = "static_sequence"

    def __init__(self, steps: list[ChainStep]) -> None:
        self.steps = list(steps)

    async def execute(self, ctx: LoopContext) -> LoopResult:
        start = time.monotonic()
        original = ctx.input
        if not _is_record(original):
            logger.warning(
                "Chain %s got %s input; only mapping fields are merged into step inputs",
                ctx.agent_name, type(original).__name__,
            )
        current = original
        for chain_step in self.steps:
            step = await self.execute_step(ctx, chain_step, current)
            await ctx.record(step)
            if step.error is not None:
                raise step.error
            current = {**as_mapping(original), **as_mapping(step.output)}
        return LoopResult(output=current, steps=tuple(ctx.steps), duration=_elapsed_ms(start))

    async def execute_step(self, ctx: LoopContext, chain_step: ChainStep, current: Any) -> AgentStep:
        start = time.monotonic()
        try:
            if chain_step.tool is not None and chain_step.prompt is not None:
                raise ChainStepError(chain_step.name, "Step must have either tool or prompt, not both")
            if chain_step.tool is not None:
                tool = ctx.get_tool(chain_step.tool) if isinstance(chain_step.tool, str) else chain_step.tool
                step_type = StepType.TOOL
                output = await tool.execute({**chain_step.input, **as_mapping(current)})
            elif chain_step.prompt:
                step_type = StepType.LLM
                output = await ctx.provider.complete(render_template(chain_step.prompt, as_mapping(current)))
            else:
                raise ChainStepError(chain_step.name, "Step must have either tool or prompt")
        except Exception as e:
            return AgentStep(
                type=StepType.TOOL, name=chain_step.name, input=current,
                output=None, error=e, duration=_elapsed_ms(start),
            )
        return AgentStep(
            type=step_type, name=chain_step.name, input=current,
            output=output, duration=_elapsed_ms(start),
        )


def never_stop(step: AgentStep) -> bool:
    return False


StopPredicate = Callable[[AgentStep], bool]
