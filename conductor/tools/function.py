"""Wrap plain callables as agent tools."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Type

from pydantic import BaseModel

from ..errors import ToolValidationError
from .validation import ToolValidator


class FunctionTool:
    """A Tool around a sync or async callable, with optional Pydantic input validation."""

    def __init__(
        self,
        name: str,
        description: str,
        fn: Callable[[Any], Any],
        parameters: Type[BaseModel] | None = None,
    ) -> None:
        self.name = name
        self.description = description
        self._fn = fn
        self._validator = ToolValidator(parameters) if parameters is not None else None

    @property
    def input(self) -> dict | None:
        return self._validator.get_input_schema() if self._validator else None

    async def execute(self, input: Any) -> Any:
        if self._validator is not None:
            checked = self._validator.validate_input(input)
            if not checked.success:
                raise ToolValidationError(self.name, checked.errors)
            input = checked.data
        result = self._fn(input)
        if inspect.isawaitable(result):
            result = await result
        return result

    def __repr__(self) -> str:
        return f"FunctionTool(name={self.name!r})"


def define_tool(
    name: str,
    description: str,
    fn: Callable[[Any], Any],
    parameters: Type[BaseModel] | None = None,
) -> FunctionTool:
    return FunctionTool(name=name, description=description, fn=fn, parameters=parameters)
