"""Public exports for :mod:`gdxlog`.

This package provides a tagged logging façade over a game-engine host's logging API.
Most runtime behavior is implemented in :class:`gdxlog.logger.GdxLogger`.
"""

from .backend import HostBackend, LoggingBackend
from .config import HostConfig, LoggerConfig
from .logger import GdxLogger, bind, get, get_stack_trace_string, split_message
from .platform import ApplicationType, Priority
from .stack import StackIntrospectionError

__all__ = [
    "ApplicationType",
    "GdxLogger",
    "HostBackend",
    "HostConfig",
    "LoggerConfig",
    "LoggingBackend",
    "Priority",
    "StackIntrospectionError",
    "bind",
    "get",
    "get_stack_trace_string",
    "split_message",
]
