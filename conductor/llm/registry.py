"""Named LLM provider registry."""

from __future__ import annotations

import logging

from ..errors import DuplicateProviderError, ProviderNotFoundError
from ..types import LLMProvider

logger = logging.getLogger(__name__)


class LLMRegistry:
    def __init__(self) -> None:
        self._providers: dict[str, LLMProvider] = {}

    def register(self, name: str, provider: LLMProvider) -> None:
        if name in self._providers:
            raise DuplicateProviderError(name)
        self._providers[name] = provider
        logger.debug("Registered LLM provider %s", name)

    def get(self, name: str) -> LLMProvider:
        provider = self._providers.get(name)
        if provider is None:
            raise ProviderNotFoundError(name)
        return provider

    def unregister(self, name: str) -> None:
        self._providers.pop(name, None)

    def list_providers(self) -> list[str]:
        return list(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers
