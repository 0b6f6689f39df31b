from .console import RichTraceHandler

__all__ = ["RichTraceHandler"]
