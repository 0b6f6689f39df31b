"""Core type definitions — re-exported from sub-modules."""

from .agent import AgentStep, AgentResponse, ResponseMetrics, StepType, AgentStatus
from .tool import Tool, ToolResult, ToolMetrics, ToolContext, ToolMetadata, ToolType, ToolExecutionMode
from .llm import (
    LLMProvider, LLMResponse, LLMFunctionResponse, FunctionCall, LLMFunction, LLMOptions, TokenUsage,
)
from .events import (
    ConductorEvent, StepEvent, AgentCompleteEvent, ErrorEvent, RetryEvent, MemoryEvent,
)
from .memory import MemoryItem, MemoryMetadata, StoreProvider, ContextData, ContextMessage
from .evals import EvalMetric, EvalConfig, EvalResult, EvalSummary

__all__ = [
    "AgentStep", "AgentResponse", "ResponseMetrics", "StepType", "AgentStatus",
    "Tool", "ToolResult", "ToolMetrics", "ToolContext", "ToolMetadata", "ToolType", "ToolExecutionMode",
    "LLMProvider", "LLMResponse", "LLMFunctionResponse", "FunctionCall", "LLMFunction", "LLMOptions",
    "TokenUsage",
    "ConductorEvent", "StepEvent", "AgentCompleteEvent", "ErrorEvent", "RetryEvent", "MemoryEvent",
    "MemoryItem", "MemoryMetadata", "StoreProvider", "ContextData", "ContextMessage",
    "EvalMetric", "EvalConfig", "EvalResult", "EvalSummary",
]
