"""Base class for configured tools."""

from __future__ import annotations

import asyncio
import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Mapping

from pydantic import ValidationError

from ..config.tool import ToolConfig
from ..errors import ToolConfigError
from ..events import EventBus
from ..types import RetryEvent, ToolContext, ToolMetadata, ToolResult
from ..types.agent import utcnow

logger = logging.getLogger(__name__)

DEFAULT_TOOL_RETRIES = 3


class BaseTool(ABC):
    """Validated configuration plus an unconditional retry helper.

    Subclasses implement :meth:`execute` and return a :class:`ToolResult`.
    """

    def __init__(self, config: ToolConfig | Mapping[str, Any], events: EventBus | None = None) -> None:
        self.config = self._validate_config(config)
        self.events = events or EventBus(node_id=self.config.name)
        self.metadata = ToolMetadata(
            name=self.config.name,
            type=self.config.type,
            version=self.config.version,
            description=self.config.description,
            author=self.config.author,
            execution_mode=self.config.execution_mode,
            extra=dict(self.config.metadata or {}),
        )

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def description(self) -> str:
        return self.config.description

    @property
    def input(self) -> dict[str, Any]:
        return self.config.input.model_dump(by_alias=True, exclude_none=True)

    @abstractmethod
    async def execute(self, input: Any, context: ToolContext | None = None) -> ToolResult: ...

    @staticmethod
    def _validate_config(config: ToolConfig | Mapping[str, Any]) -> ToolConfig:
        if isinstance(config, ToolConfig):
            config = config.model_dump(by_alias=True)
        try:
            return ToolConfig.model_validate(config)
        except ValidationError as e:
            raise ToolConfigError(str(e), cause=e) from e

    def create_context(self) -> ToolContext:
        return ToolContext(session_id=uuid.uuid4().hex[:8], timestamp=utcnow())

    async def execute_with_retry(
        self,
        operation: Callable[[], Awaitable[Any]],
        max_retries: int | None = None,
    ) -> Any:
        """Run ``operation`` up to ``max_retries`` times, sleeping ``2 ** attempt`` seconds between tries."""
        if max_retries is None:
            limits = self.config.limits
            max_retries = (limits.max_retries if limits else None) or DEFAULT_TOOL_RETRIES
        last_err: Exception | None = None
        for attempt in range(1, max_retries + 1):
            try:
                return await operation()
            except Exception as e:
                last_err = e
                logger.debug("Tool %s failed on attempt %d/%d: %s", self.name, attempt, max_retries, e)
                await self.events.emit(RetryEvent(tool=self.name, attempt=attempt, error=e))
                if attempt < max_retries:
                    await asyncio.sleep(2 ** attempt)
        raise last_err
