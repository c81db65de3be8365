from blogapp.configs.settings import (
    CONFIG_MAP,
    LimiterConfig,
    file_logger,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "LimiterConfig",
    "file_logger",
    "settings",
]
