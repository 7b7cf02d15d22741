"""Tagged logging façade over a host logging backend.

:class:`GdxLogger` derives a tag from the calling class, appends formatted
stack traces of attached exceptions and splits long messages into entries the
host accepts. A process-wide instance is created once with :func:`bind` and
retrieved with :func:`get`.
"""

from __future__ import annotations

import socket
import threading
import traceback
from typing import Callable

from .backend import HostBackend
from .config import LoggerConfig
from .platform import Priority
from .stack import caller_qualified_name, tag_from_qualified_name

# Frames between the tag helper (0) and the user's code:
# 0: _get_tag, 1: _print, 2: log/debug/error, 3: caller
CALL_STACK_INDEX_PRIVATE = 3
# 0: _get_tag, 1: get_tag, 2: caller
CALL_STACK_INDEX_PUBLIC = 2

# Host name lookup failures; logged as noise when the network is unavailable.
HOST_RESOLUTION_ERRORS: tuple[type[BaseException], ...] = (socket.gaierror, socket.herror)


def _cause(exception: BaseException) -> BaseException | None:
    if exception.__cause__ is not None:
        return exception.__cause__
    if exception.__suppress_context__:
        return None
    return exception.__context__


def get_stack_trace_string(exception: BaseException | None) -> str:
    """Render ``exception`` and its cause chain as a traceback string.

    :param exception: Exception to render, or ``None``.
    :returns: The formatted traceback, or ``""`` when ``exception`` is ``None``
        or is (or was caused by) a host resolution failure.
    """
    if exception is None:
        return ""

    # Reduce log spew while the network is unavailable.
    seen: set[int] = set()
    current: BaseException | None = exception
    while current is not None and id(current) not in seen:
        if isinstance(current, HOST_RESOLUTION_ERRORS):
            return ""
        seen.add(id(current))
        current = _cause(current)

    return "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))


def split_message(message: str, max_length: int) -> list[str]:
    """Split ``message`` into entries of at most ``max_length`` characters.

    Newlines always end an entry and are not included in it. Lines longer
    than ``max_length`` are cut into ``max_length`` pieces plus a remainder.

    :param message: Composed message.
    :param max_length: Longest entry the host accepts.
    :returns: Entries in order.
    """
    chunks = []
    length = len(message)
    i = 0
    while i < length:
        newline = message.find("\n", i)
        if newline == -1:
            newline = length

        while True:
            end = min(newline, i + max_length)
            chunks.append(message[i:end])
            i = end
            if i >= newline:
                break
        i += 1
    return chunks


class GdxLogger:
    """Tagged logger writing to a :class:`~gdxlog.backend.HostBackend`.

    Every logging method accepts a message, a message and an exception, or an
    exception alone::

        logger.log("loaded level")
        logger.error("save failed", ex)
        logger.debug(ex)

    :param backend: Host backend receiving the writes.
    :param config: Platform limits; defaults to :class:`~gdxlog.config.LoggerConfig`.
    """

    def __init__(self, backend: HostBackend, config: LoggerConfig | None = None) -> None:
        self._backend = backend
        self._config = config if config is not None else LoggerConfig()
        self._writers: dict[Priority, Callable[[str, str], None]] = {
            Priority.LOG: backend.log,
            Priority.DEBUG: backend.debug,
            Priority.ERROR: backend.error,
        }

    @property
    def backend(self) -> HostBackend:
        return self._backend

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def log(
        self,
        message: str | BaseException | None = None,
        exception: BaseException | None = None,
        *,
        tag: str | None = None,
    ) -> None:
        """Write an informational message.

        :param message: Message text, or the exception when logging an exception alone.
        :param exception: Exception whose traceback is appended to the message.
        :param tag: Explicit tag; skips call-stack tag derivation. Still capped on
            restricted platforms.
        """
        self._print(Priority.LOG, message, exception, tag)

    def debug(
        self,
        message: str | BaseException | None = None,
        exception: BaseException | None = None,
        *,
        tag: str | None = None,
    ) -> None:
        """Write a debug message. Arguments as for :meth:`log`."""
        self._print(Priority.DEBUG, message, exception, tag)

    def error(
        self,
        message: str | BaseException | None = None,
        exception: BaseException | None = None,
        *,
        tag: str | None = None,
    ) -> None:
        """Write an error message. Arguments as for :meth:`log`."""
        self._print(Priority.ERROR, message, exception, tag)

    def get_tag(self) -> str:
        """Return the tag derived for the caller of this method."""
        return self._get_tag(CALL_STACK_INDEX_PUBLIC)

    @staticmethod
    def get_stack_trace_string(exception: BaseException | None) -> str:
        return get_stack_trace_string(exception)

    def _print(
        self,
        priority: Priority,
        message: str | BaseException | None,
        exception: BaseException | None,
        tag: str | None,
    ) -> None:
        tag = self._get_tag(CALL_STACK_INDEX_PRIVATE) if tag is None else self._limit_tag(tag)

        if isinstance(message, BaseException) and exception is None:
            message, exception = None, message

        message = "" if message is None else str(message)

        if exception is not None:
            message += "\n" + get_stack_trace_string(exception)

        write = self._writers[priority]
        if (
            not self._config.is_restricted(self._backend.application_type())
            or len(message) <= self._config.max_log_length
        ):
            write(tag, message)
            return

        for chunk in split_message(message, self._config.max_log_length):
            write(tag, chunk)

    def _get_tag(self, call_stack_index: int) -> str:
        return self._limit_tag(tag_from_qualified_name(caller_qualified_name(call_stack_index)))

    def _limit_tag(self, tag: str) -> str:
        if (
            not self._config.is_restricted(self._backend.application_type())
            or len(tag) <= self._config.max_tag_length
        ):
            return tag
        return tag[:self._config.max_tag_length]


_lock = threading.Lock()
_instance: GdxLogger | None = None


def bind(backend: HostBackend, config: LoggerConfig | None = None) -> GdxLogger:
    """Create the process-wide logger. May only be called once.

    :param backend: Host backend receiving the writes.
    :param config: Platform limits.
    :returns: The bound logger.
    :raises RuntimeError: If a logger is already bound.
    """
    global _instance
    with _lock:
        if _instance is not None:
            raise RuntimeError("A host backend is already bound.")
        _instance = GdxLogger(backend, config)
        return _instance


def get() -> GdxLogger:
    """Return the process-wide logger created by :func:`bind`.

    :raises RuntimeError: If :func:`bind` has not been called.
    """
    if _instance is None:
        raise RuntimeError("No host backend bound; call gdxlog.bind() first.")
    return _instance
