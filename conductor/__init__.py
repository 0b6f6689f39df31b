"""
Conductor - agent orchestration toolkit
=======================================

Compose LLM calls and tools three ways:

- **Agent**: a bounded loop where the provider picks a tool each iteration.
- **Chain**: a fixed sequence of tool and prompt steps, merging each output
  onto the original input.
- **Workflow**: a DAG of named agents run one at a time in dependency order.

## Quick Start

```python
from conductor import Agent, AgentConfig, define_tool
from conductor.llm import ScriptedLLMProvider

echo = define_tool("echo", "Echo the action back", lambda x: x)
provider = ScriptedLLMProvider([{"tool": "echo", "action": "hi"}])

agent = Agent(AgentConfig(name="demo", llm_provider=provider, tools=[echo]))
response = await agent.execute({"text": "hi"})
```
"""

from .agents import Agent, Chain, Workflow
from .config import (
    AgentConfig, ChainConfig, ChainStep, Settings, ToolConfig,
    WorkflowConfig, WorkflowEdge, WorkflowGraph, load_settings,
)
from .errors import (
    ChainStepError, ConductorError, ConfigurationError, DuplicateProviderError, DuplicateToolError,
    NetworkError, ProviderNotFoundError, RateLimitError, ToolConfigError, ToolDecisionError,
    ToolNotFoundError, ToolValidationError, TransientError, WorkflowCycleError,
)
from .events import EventBus
from .tools import BaseTool, FunctionTool, RetryHandler, RetryOptions, ToolRegistry, define_tool
from .types import AgentResponse, AgentStep, StepType, ToolResult, ToolType

__version__ = "0.1.0"

__all__ = [
    "Agent", "Chain", "Workflow",
    "AgentConfig", "ChainConfig", "ChainStep", "Settings", "ToolConfig",
    "WorkflowConfig", "WorkflowEdge", "WorkflowGraph", "load_settings",
    "ChainStepError", "ConductorError", "ConfigurationError", "DuplicateProviderError",
    "DuplicateToolError", "NetworkError", "ProviderNotFoundError", "RateLimitError",
    "ToolConfigError", "ToolDecisionError", "ToolNotFoundError", "ToolValidationError",
    "TransientError", "WorkflowCycleError",
    "EventBus",
    "BaseTool", "FunctionTool", "RetryHandler", "RetryOptions", "ToolRegistry", "define_tool",
    "AgentResponse", "AgentStep", "StepType", "ToolResult", "ToolType",
]
