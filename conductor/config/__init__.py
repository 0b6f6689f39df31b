from .agent import AgentConfig, ChainConfig, ChainStep, WorkflowConfig, WorkflowEdge, WorkflowGraph
from .settings import LLMSettings, LoggingSettings, Settings, load_settings
from .tool import ToolConfig

__all__ = [
    "AgentConfig", "ChainConfig", "ChainStep", "WorkflowConfig", "WorkflowEdge", "WorkflowGraph",
    "LLMSettings", "LoggingSettings", "Settings", "load_settings",
    "ToolConfig",
]
