"""Tool registry, base class, retry policies and the define_tool helper."""

from .base import BaseTool
from .function import FunctionTool, define_tool
from .registry import ToolRegistry
from .retry import RetryHandler, RetryOptions, RetryStrategy, is_retryable_error
from .validation import ToolValidator, ValidationIssue, ValidationResult

__all__ = [
    "BaseTool", "FunctionTool", "define_tool", "ToolRegistry",
    "RetryHandler", "RetryOptions", "RetryStrategy", "is_retryable_error",
    "ToolValidator", "ValidationIssue", "ValidationResult",
]
