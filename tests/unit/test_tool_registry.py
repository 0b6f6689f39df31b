"""
Tests for ToolRegistry
"""

import pytest

from conductor.errors import DuplicateToolError, ToolNotFoundError
from conductor.tools import ToolRegistry
from conductor.types import ToolType


class TestToolRegistry:
    def test_register_and_get(self, make_tool):
        registry = ToolRegistry()
        tool = make_tool("calc")
        registry.register(tool, ToolType.CALCULATOR)

        assert registry.get("calc") is tool
        assert "calc" in registry
        assert len(registry) == 1

    def test_duplicate_registration(self, make_tool):
        registry = ToolRegistry()
        registry.register(make_tool("calc"), ToolType.CALCULATOR)

        with pytest.raises(DuplicateToolError, match="Tool with name calc is already registered"):
            registry.register(make_tool("calc"), ToolType.ANALYSIS)

        assert registry.list_types() == [ToolType.CALCULATOR]

    def test_get_missing(self):
        with pytest.raises(ToolNotFoundError, match="Tool nope not found"):
            ToolRegistry().get("nope")

    def test_get_by_type_keeps_registration_order(self, make_tool):
        registry = ToolRegistry()
        a, b, c = make_tool("a"), make_tool("b"), make_tool("c")
        registry.register(a, ToolType.API)
        registry.register(b, ToolType.DATABASE)
        registry.register(c, ToolType.API)

        assert registry.get_by_type(ToolType.API) == [a, c]
        assert registry.get_by_type(ToolType.PLUGIN) == []

    def test_unregister_drops_empty_type(self, make_tool):
        registry = ToolRegistry()
        registry.register(make_tool("a"), ToolType.API)
        registry.register(make_tool("b"), ToolType.DATABASE)

        registry.unregister("a")

        assert registry.list_tools() == ["b"]
        assert registry.list_types() == [ToolType.DATABASE]
        with pytest.raises(ToolNotFoundError):
            registry.get("a")

    def test_unregister_missing_is_noop(self):
        registry = ToolRegistry()
        registry.unregister("ghost")
        assert len(registry) == 0

    def test_type_accepts_string_value(self, make_tool):
        registry = ToolRegistry()
        registry.register(make_tool("a"), "formatter")
        assert registry.list_types() == [ToolType.FORMATTER]
