"""Tool types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class ToolType(str, Enum):
    ANALYSIS = "analysis"
    TRANSFORMATION = "transformation"
    VALIDATION = "validation"
    GENERATION = "generation"
    EXTRACTION = "extraction"
    DATA_LOADER = "data_loader"
    DATA_CLEANER = "data_cleaner"
    DATA_TRANSFORMER = "data_transformer"
    DATA_VALIDATOR = "data_validator"
    API = "api"
    DATABASE = "database"
    FILE_SYSTEM = "file_system"
    FORMATTER = "formatter"
    CALCULATOR = "calculator"
    CONVERTER = "converter"
    CUSTOM = "custom"
    PLUGIN = "plugin"


class ToolExecutionMode(str, Enum):
    SYNC = "sync"
    ASYNC = "async"
    BATCH = "batch"
    STREAM = "stream"


@runtime_checkable
class Tool(Protocol):
    """Anything an agent can invoke by name.

    Tools may also expose an ``input`` attribute describing their arguments;
    it is shown to the provider when an agent asks it to pick a tool.
    """

    name: str
    description: str

    async def execute(self, input: Any) -> Any: ...


@dataclass
class ToolMetrics:
    duration: int = 0  # ms
    resource_usage: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolResult:
    success: bool
    data: Any = None
    error: Exception | None = None
    metrics: ToolMetrics = field(default_factory=ToolMetrics)


@dataclass
class ToolContext:
    session_id: str
    timestamp: datetime
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolMetadata:
    name: str
    type: ToolType
    version: str
    description: str
    author: str | None = None
    execution_mode: ToolExecutionMode = ToolExecutionMode.ASYNC
    extra: dict[str, Any] = field(default_factory=dict)
