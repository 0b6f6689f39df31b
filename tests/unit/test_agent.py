"""
Tests for Agent

Covers tool selection, the iteration bound, error capture and events.
"""

import pytest

from conductor.agents import Agent, LLMDecisionStrategy
from conductor.config import AgentConfig
from conductor.errors import ToolDecisionError, ToolNotFoundError
from conductor.types import AgentStatus, LLMResponse, StepType, ToolResult


def decision(tool: str, action=None) -> dict:
    return {"tool": tool, "action": action}


class TestAgentExecution:
    """Single-iteration behaviour."""

    @pytest.mark.asyncio
    async def test_executes_tool_chosen_by_provider(self, make_tool, scripted_provider):
        tool = make_tool("test-tool", return_value={"result": "success"})
        provider = scripted_provider([decision("test-tool", {"test": True})])
        agent = Agent(AgentConfig(name="test-agent", llm_provider=provider, tools=[tool]))

        response = await agent.execute({"input": "test"})

        tool.execute.assert_awaited_once_with({"test": True})
        assert response.output == {"result": "success"}
        assert len(response.steps) == 1
        step = response.steps[0]
        assert step.type == StepType.TOOL
        assert step.name == "test-tool"
        assert step.input == {"test": True}
        assert step.error is None

    @pytest.mark.asyncio
    async def test_metrics_report_zero_tokens_and_cost(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value=1)
        agent = Agent(AgentConfig(name="a", llm_provider=scripted_provider([decision("t")]), tools=[tool]))

        response = await agent.execute(None)

        assert response.metrics.total_tokens == 0
        assert response.metrics.total_cost == 0
        assert response.metrics.duration >= 0

    @pytest.mark.asyncio
    async def test_prompt_lists_tools_and_input(self, make_tool, scripted_provider):
        tool = make_tool("search", return_value="ok", description="Search the web")
        tool.input = {"schema": {"type": "object"}, "required": ["query"]}
        provider = scripted_provider([decision("search", {"query": "x"})])
        agent = Agent(AgentConfig(name="a", llm_provider=provider, tools=[tool]))

        await agent.execute({"topic": "cats"})

        prompt = provider.prompts[0]
        assert 'Given the following input: {"topic": "cats"}' in prompt
        assert '"name": "search"' in prompt
        assert '"description": "Search the web"' in prompt
        assert '"tool_arguments": {"schema": {"type": "object"}, "required": ["query"]}' in prompt
        assert "Select the most appropriate tool" in prompt

    @pytest.mark.asyncio
    async def test_status_returns_to_idle(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value=1)
        agent = Agent(AgentConfig(name="a", llm_provider=scripted_provider([decision("t")]), tools=[tool]))

        assert agent.status == AgentStatus.IDLE
        await agent.execute({})
        assert agent.status == AgentStatus.IDLE


class TestAgentIterations:
    """Loop bound and chaining of outputs."""

    @pytest.mark.asyncio
    async def test_runs_exactly_max_iterations(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value="next")
        provider = scripted_provider([decision("t", i) for i in range(3)])
        agent = Agent(AgentConfig(name="a", llm_provider=provider, tools=[tool], max_iterations=3))

        response = await agent.execute("start")

        assert len(response.steps) == 3
        assert tool.execute.await_count == 3
        assert provider.remaining == 0

    @pytest.mark.asyncio
    async def test_output_feeds_next_iteration(self, make_tool, scripted_provider):
        tool = make_tool("t")
        tool.execute.side_effect = ["first", "second"]
        provider = scripted_provider([decision("t", "a"), decision("t", "b")])
        agent = Agent(AgentConfig(name="a", llm_provider=provider, tools=[tool], max_iterations=2))

        response = await agent.execute("start")

        assert '"first"' in provider.prompts[1]
        assert response.output == "second"

    @pytest.mark.asyncio
    async def test_tool_result_is_rendered_as_json(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value=ToolResult(success=True, data={"n": 1}))
        provider = scripted_provider([decision("t"), decision("t")])
        agent = Agent(AgentConfig(name="a", llm_provider=provider, tools=[tool], max_iterations=2))

        await agent.execute("start")

        first_line = provider.prompts[1].splitlines()[0]
        assert '"success": true' in first_line
        assert '"data": {"n": 1}' in first_line
        assert "ToolResult(" not in first_line

    @pytest.mark.asyncio
    async def test_should_stop_ends_loop_early(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value="done")
        provider = scripted_provider([decision("t")] * 5)
        agent = Agent(
            AgentConfig(name="a", llm_provider=provider, tools=[tool], max_iterations=5),
            should_stop=lambda step: step.output == "done",
        )

        response = await agent.execute({})

        assert len(response.steps) == 1

    @pytest.mark.asyncio
    async def test_steps_reset_between_calls(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value=1)
        provider = scripted_provider([decision("t"), decision("t")])
        agent = Agent(AgentConfig(name="a", llm_provider=provider, tools=[tool]))

        await agent.execute({})
        response = await agent.execute({})

        assert len(response.steps) == 1
        assert len(agent.steps) == 1

    def test_max_iterations_must_be_positive(self, mock_provider):
        with pytest.raises(ValueError):
            AgentConfig(name="a", llm_provider=mock_provider, max_iterations=0)


class TestAgentErrors:
    """Failures are recorded on a step, then raised unchanged."""

    @pytest.mark.asyncio
    async def test_tool_error_propagates(self, make_tool, scripted_provider):
        boom = RuntimeError("Tool error")
        tool = make_tool("test-tool", side_effect=boom)
        agent = Agent(
            AgentConfig(name="a", llm_provider=scripted_provider([decision("test-tool", {"x": 1})]), tools=[tool])
        )

        with pytest.raises(RuntimeError, match="Tool error") as exc_info:
            await agent.execute({"input": "test"})

        assert exc_info.value is boom
        assert len(agent.steps) == 1
        failed = agent.steps[0]
        assert failed.name == "error"
        assert failed.output is None
        assert failed.error is boom
        assert failed.input == {"input": "test"}
        assert agent.status == AgentStatus.IDLE

    @pytest.mark.asyncio
    async def test_unparseable_decision(self, make_tool, scripted_provider):
        agent = Agent(AgentConfig(name="a", llm_provider=scripted_provider(["not json"]), tools=[make_tool("t")]))

        with pytest.raises(ToolDecisionError, match="Failed to parse tool decision"):
            await agent.execute({})

    @pytest.mark.asyncio
    async def test_decision_without_tool_field(self, make_tool, scripted_provider):
        agent = Agent(AgentConfig(name="a", llm_provider=scripted_provider([{"action": 1}]), tools=[make_tool("t")]))

        with pytest.raises(ToolDecisionError):
            await agent.execute({})

    @pytest.mark.asyncio
    async def test_unknown_tool(self, make_tool, scripted_provider):
        agent = Agent(AgentConfig(name="a", llm_provider=scripted_provider([decision("missing")]), tools=[make_tool("t")]))

        with pytest.raises(ToolNotFoundError, match="Tool missing not found"):
            await agent.execute({})

    @pytest.mark.asyncio
    async def test_error_event_emitted(self, make_tool, scripted_provider):
        boom = ValueError("bad")
        tool = make_tool("t", side_effect=boom)
        agent = Agent(AgentConfig(name="a", llm_provider=scripted_provider([decision("t")]), tools=[tool]))
        seen = []
        agent.on("error", seen.append)

        with pytest.raises(ValueError):
            await agent.execute({})

        assert len(seen) == 1
        assert seen[0].source == "a"
        assert seen[0].error is boom


class TestAgentEvents:
    @pytest.mark.asyncio
    async def test_step_event_per_iteration(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value=1)
        provider = scripted_provider([decision("t")] * 2)
        agent = Agent(AgentConfig(name="a", llm_provider=provider, tools=[tool], max_iterations=2))
        seen = []

        async def handler(event):
            seen.append(event.step.name)

        agent.on("step", handler)
        await agent.execute({})

        assert seen == ["t", "t"]

    @pytest.mark.asyncio
    async def test_handler_failure_does_not_break_agent(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value=1)
        agent = Agent(AgentConfig(name="a", llm_provider=scripted_provider([decision("t")]), tools=[tool]))

        def broken(event):
            raise RuntimeError("handler")

        agent.on("step", broken)
        response = await agent.execute({})

        assert response.output == 1


class TestAgentHelpers:
    def test_get_tool(self, make_tool, mock_provider):
        tool = make_tool("t")
        agent = Agent(AgentConfig(name="a", llm_provider=mock_provider, tools=[tool]))

        assert agent.get_tool("t") is tool
        with pytest.raises(ToolNotFoundError):
            agent.get_tool("nope")

    def test_default_strategy(self, mock_provider):
        agent = Agent(AgentConfig(name="a", llm_provider=mock_provider))
        assert isinstance(agent.strategy, LLMDecisionStrategy)

    @pytest.mark.asyncio
    async def test_works_with_mock_provider(self, make_tool, mock_provider):
        tool = make_tool("noop", return_value="ok")
        agent = Agent(AgentConfig(name="a", llm_provider=mock_provider, tools=[tool]))

        response = await agent.execute("x")

        assert response.output == "ok"
        mock_provider.complete.assert_awaited_once()
        tool.execute.assert_awaited_once_with(None)

    @pytest.mark.asyncio
    async def test_llm_response_object_is_accepted(self, make_tool, scripted_provider):
        tool = make_tool("t", return_value=5)
        provider = scripted_provider([LLMResponse(content='{"tool": "t", "action": 3}')])
        agent = Agent(AgentConfig(name="a", llm_provider=provider, tools=[tool]))

        response = await agent.execute(None)

        tool.execute.assert_awaited_once_with(3)
        assert response.output == 5
