from .context import ContextManager, ContextSummary
from .providers import InMemoryStore
from .store import MemoryStore

__all__ = ["ContextManager", "ContextSummary", "InMemoryStore", "MemoryStore"]
