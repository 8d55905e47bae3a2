"""Configuration primitives for the log publishing hook."""

from .hook_config import DEFAULT_IGNORED_LOGGERS, HookConfig, new_hook_config
from .hook_dependencies import HookDependencies
from .publishing import DEFAULT_CONTENT_TYPE, Publishing
from .queue_declaration import QueueDeclaration

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_IGNORED_LOGGERS",
    "HookConfig",
    "HookDependencies",
    "Publishing",
    "QueueDeclaration",
    "new_hook_config",
]
