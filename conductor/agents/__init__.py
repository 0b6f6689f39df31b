from .agent import Agent
from .chain import Chain
from .strategy import (
    LLMDecisionStrategy, LoopContext, LoopResult, LoopStrategy, StaticSequenceStrategy,
    ToolDecision, as_mapping, render_template,
)
from .workflow import Workflow, build_agent

__all__ = [
    "Agent", "Chain", "Workflow", "build_agent",
    "LLMDecisionStrategy", "LoopContext", "LoopResult", "LoopStrategy", "StaticSequenceStrategy",
    "ToolDecision", "as_mapping", "render_template",
]
