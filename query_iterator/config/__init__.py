from .settings import IteratorConfig, Settings, get_settings

__all__ = [
    "IteratorConfig",
    "Settings",
    "get_settings",
]
