from coach_analytics.core.config import Settings, settings
from coach_analytics.core.logging import get_logger, setup_logging

__all__ = [
    "Settings",
    "settings",
    "get_logger",
    "setup_logging",
]
