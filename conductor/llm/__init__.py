from .registry import LLMRegistry
from .scripted import ScriptedLLMProvider

__all__ = ["LLMRegistry", "ScriptedLLMProvider"]
