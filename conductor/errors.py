"""Structured error hierarchy for the orchestration engine."""

from __future__ import annotations


class ConductorError(Exception):
    def __init__(self, code: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.cause = cause


class ConfigurationError(ConductorError):
    """Invalid static configuration. Never retried."""

    def __init__(self, message: str, code: str = "CONFIG_INVALID", cause: Exception | None = None) -> None:
        super().__init__(code, message, cause)


class DuplicateToolError(ConfigurationError):
    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool with name {tool_name} is already registered", "TOOL_DUPLICATE")
        self.tool_name = tool_name


class ToolNotFoundError(ConfigurationError):
    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool {tool_name} not found", "TOOL_NOT_FOUND")
        self.tool_name = tool_name


class ToolConfigError(ConfigurationError):
    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(f"Invalid tool configuration: {message}", "TOOL_CONFIG_INVALID", cause)


class ChainStepError(ConfigurationError):
    def __init__(self, step_name: str, message: str) -> None:
        super().__init__(message, "CHAIN_STEP_INVALID")
        self.step_name = step_name


class WorkflowCycleError(ConfigurationError):
    def __init__(self, workflow: str, node: str) -> None:
        super().__init__("Workflow has cycles", "WORKFLOW_CYCLE")
        self.workflow = workflow
        self.node = node


class DuplicateProviderError(ConfigurationError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"Provider {provider} is already registered", "PROVIDER_DUPLICATE")
        self.provider = provider


class ProviderNotFoundError(ConfigurationError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"Provider {provider} not found", "PROVIDER_NOT_FOUND")
        self.provider = provider


class ToolDecisionError(ConductorError):
    """The provider's tool decision was not JSON shaped like {tool, action}."""

    def __init__(self, raw: str, cause: Exception | None = None) -> None:
        super().__init__("TOOL_DECISION_INVALID", "Failed to parse tool decision", cause)
        self.raw = raw


class ToolValidationError(ConductorError):
    def __init__(self, tool_name: str, issues: list) -> None:
        details = "; ".join(f"{'.'.join(i.path) or '<root>'}: {i.message}" for i in issues)
        super().__init__("TOOL_INPUT_INVALID", f'Invalid input for tool "{tool_name}": {details}')
        self.tool_name = tool_name
        self.issues = issues


class TransientError(ConductorError):
    """Base for failures worth retrying."""


class NetworkError(TransientError):
    def __init__(self, message: str = "Network error", cause: Exception | None = None) -> None:
        super().__init__("NETWORK_ERROR", message, cause)


class RateLimitError(TransientError):
    def __init__(self, message: str = "Rate limited", retry_after: float | None = None) -> None:
        super().__init__("RATE_LIMIT", message)
        self.retry_after = retry_after
