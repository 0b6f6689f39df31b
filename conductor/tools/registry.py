"""Tool registry indexed by name and by tool type."""

from __future__ import annotations

import logging

from ..errors import DuplicateToolError, ToolNotFoundError
from ..types import Tool, ToolType

logger = logging.getLogger(__name__)


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}
        self._by_type: dict[ToolType, list[str]] = {}

    def register(self, tool: Tool, tool_type: ToolType) -> None:
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)
        self._tools[tool.name] = tool
        self._by_type.setdefault(ToolType(tool_type), []).append(tool.name)
        logger.debug("Registered tool %s (%s)", tool.name, tool_type)

    def get(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        return tool

    def get_by_type(self, tool_type: ToolType) -> list[Tool]:
        return [self._tools[n] for n in self._by_type.get(tool_type, [])]

    def unregister(self, name: str) -> None:
        if self._tools.pop(name, None) is None:
            return
        for tool_type, names in list(self._by_type.items()):
            if name in names:
                names.remove(name)
                if not names:
                    del self._by_type[tool_type]

    def list_tools(self) -> list[str]:
        return list(self._tools)

    def list_types(self) -> list[ToolType]:
        return list(self._by_type)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
