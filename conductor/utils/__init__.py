from .logging import configure_from_settings, configure_logging

__all__ = ["configure_from_settings", "configure_logging"]
