"""
Rich trace handler - live terminal view of agent and workflow execution.

Shows:
1. one tree node per agent with pending/running/completed/error status
2. each recorded step with its tool or prompt name and duration
3. step, error and completion counters
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..types import AgentCompleteEvent, ErrorEvent, StepEvent, StepType

logger = logging.getLogger(__name__)

PENDING = "pending"
RUNNING = "running"
COMPLETED = "completed"
ERROR = "error"

_STATUS_STYLE = {
    PENDING: "dim",
    RUNNING: "bold yellow",
    COMPLETED: "bold green",
    ERROR: "bold red",
}


def _preview(value: Any, limit: int = 120) -> str:
    try:
        text = value if isinstance(value, str) else json.dumps(value, default=str)
    except (TypeError, ValueError):
        text = repr(value)
    return text if len(text) <= limit else text[:limit] + "..."


class RichTraceHandler:
    def __init__(self, console: Console | None = None, title: str = "Conductor Execution") -> None:
        self.console = console or Console()
        self.root_tree = Tree(f"[bold blue]{title}[/bold blue]")
        self.live: Live | None = None
        self.current_nodes: dict[str, Tree] = {}  # agent name -> tree node
        self.status: dict[str, str] = {}
        self.stats = {
            "start_time": datetime.now(),
            "steps": 0,
            "tool_calls": 0,
            "llm_calls": 0,
            "completed": 0,
            "errors": 0,
        }

    # ===== Wiring =====

    def attach_agent(self, agent) -> None:
        self._node(agent.name)
        agent.on("step", self.on_step)
        agent.on("error", self.on_agent_error)

    def attach_workflow(self, workflow) -> None:
        for name in workflow.execution_order:
            self.attach_agent(workflow.agents[name])
        workflow.on("agent_complete", self.on_agent_complete)

    # ===== Event handlers =====

    def on_step(self, event: StepEvent) -> None:
        step = event.step
        self.stats["steps"] += 1
        if step.type == StepType.LLM:
            self.stats["llm_calls"] += 1
        else:
            self.stats["tool_calls"] += 1
        self._set_status(event.source, RUNNING)

        node = self._node(event.source)
        if step.error is not None:
            node.add(f"[bold red]{escape(step.name)}[/bold red] failed: {escape(str(step.error))}")
        else:
            label = "prompt" if step.type == StepType.LLM else "tool"
            child = node.add(f"[yellow]{label}: {escape(step.name)}[/yellow] [dim]({step.duration}ms)[/dim]")
            child.add(Text(f"output: {_preview(step.output)}", style="dim"))
        self._refresh()

    def on_agent_complete(self, event: AgentCompleteEvent) -> None:
        self.stats["completed"] += 1
        self._set_status(event.agent, COMPLETED)
        self._refresh()

    def on_agent_error(self, event: ErrorEvent) -> None:
        self.stats["errors"] += 1
        self._set_status(event.source, ERROR)
        self._node(event.source).add(f"[bold red]Error[/bold red]: {escape(str(event.error))}")
        self._refresh()

    def mark_completed(self, agent_name: str) -> None:
        """For standalone agents, which have no workflow to report completion."""
        self._set_status(agent_name, COMPLETED)
        self._refresh()

    # ===== Rendering =====

    def render(self) -> Tree:
        return self.root_tree

    def print(self) -> None:
        self.console.print(self.root_tree)

    def summary(self) -> Table:
        table = Table(title="Execution Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="magenta")
        table.add_row("Duration", str(datetime.now() - self.stats["start_time"]).split(".")[0])
        table.add_row("Steps", str(self.stats["steps"]))
        table.add_row("Tool Calls", str(self.stats["tool_calls"]))
        table.add_row("LLM Calls", str(self.stats["llm_calls"]))
        table.add_row("Agents Completed", str(self.stats["completed"]))
        table.add_row("Errors", str(self.stats["errors"]))
        return table

    def start(self) -> None:
        self.live = Live(self.root_tree, console=self.console, refresh_per_second=10)
        self.live.start()

    def stop(self) -> None:
        if self.live:
            self.live.stop()
            self.live = None
        self.console.print(self.summary())

    # ===== Internals =====

    def _node(self, name: str) -> Tree:
        node = self.current_nodes.get(name)
        if node is None:
            node = self.root_tree.add(self._label(name, PENDING))
            self.current_nodes[name] = node
            self.status[name] = PENDING
        return node

    def _set_status(self, name: str, status: str) -> None:
        node = self._node(name)
        # an agent that failed stays failed
        if self.status.get(name) == ERROR and status == RUNNING:
            return
        self.status[name] = status
        node.label = self._label(name, status)

    @staticmethod
    def _label(name: str, status: str) -> str:
        style = _STATUS_STYLE[status]
        return f"[bold]Agent: {escape(name)}[/bold] [{style}]{status}[/{style}]"

    def _refresh(self) -> None:
        if self.live:
            self.live.update(self.root_tree)
