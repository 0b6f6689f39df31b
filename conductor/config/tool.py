"""Tool configuration schema."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..types import ToolExecutionMode, ToolType


class AuthenticationConfig(BaseModel):
    required: bool
    type: Literal["API_KEY", "OAUTH", "BASIC", "NONE"] | None = None
    scopes: list[str] | None = None


class InputSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: Any = Field(None, alias="schema", description="JSON schema of the tool input")
    required: list[str] = Field(default_factory=list)
    examples: list[Any] | None = None


class OutputSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: Any = Field(None, alias="schema", description="JSON schema of the tool output")
    examples: list[Any] | None = None


class DependencySpec(BaseModel):
    name: str
    version: str
    optional: bool | None = None


class LimitsConfig(BaseModel):
    max_execution_time: float | None = Field(None, description="Milliseconds")
    max_retries: int | None = Field(None, ge=1)
    concurrency: int | None = Field(None, ge=1)


class ToolConfig(BaseModel):
    name: str = Field(..., min_length=1, description="Unique tool name")
    type: ToolType
    version: str = Field(..., pattern=r"^\d+\.\d+\.\d+$", description="Semantic version, e.g. 1.0.0")
    description: str
    author: str | None = None
    execution_mode: ToolExecutionMode = ToolExecutionMode.ASYNC
    authentication: AuthenticationConfig | None = None
    input: InputSpec = Field(default_factory=InputSpec)
    output: OutputSpec = Field(default_factory=OutputSpec)
    options: dict[str, Any] | None = None
    dependencies: list[DependencySpec] | None = None
    limits: LimitsConfig | None = None
    metadata: dict[str, Any] | None = None
