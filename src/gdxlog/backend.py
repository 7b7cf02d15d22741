"""Host logging backends.

This module provides the backend interface consumed by
:class:`~gdxlog.logger.GdxLogger` and a backend writing to the standard
:mod:`logging` module. The bridge to a .NET host lives in :mod:`gdxlog.dotnet`.
"""

from __future__ import annotations

import logging

from .platform import ApplicationType


class HostBackend:
    """Abstract host logging API used by :class:`~gdxlog.logger.GdxLogger`."""

    def application_type(self) -> ApplicationType:
        """Return the kind of platform the host is running on."""
        raise NotImplementedError("Provide a backend implementation.")

    def log(self, tag: str, message: str) -> None:
        """Write an informational message.

        :param tag: Source tag.
        :param message: Log message.
        """
        raise NotImplementedError("Provide a backend implementation.")

    def debug(self, tag: str, message: str) -> None:
        """Write a debug message.

        :param tag: Source tag.
        :param message: Log message.
        """
        raise NotImplementedError("Provide a backend implementation.")

    def error(self, tag: str, message: str) -> None:
        """Write an error message.

        :param tag: Source tag.
        :param message: Log message.
        """
        raise NotImplementedError("Provide a backend implementation.")


class LoggingBackend(HostBackend):
    """Backend writing ``tag: message`` lines to a :class:`logging.Logger`.

    Suitable for desktop and headless runs where no engine host is present.

    :param application_type: Platform kind to report.
    :param logger: Target logger; defaults to the ``gdxlog`` logger.
    """

    def __init__(
        self,
        application_type: ApplicationType = ApplicationType.DESKTOP,
        logger: logging.Logger | None = None,
    ) -> None:
        self._application_type = application_type
        self._logger = logger if logger is not None else logging.getLogger("gdxlog")

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def application_type(self) -> ApplicationType:
        return self._application_type

    def log(self, tag: str, message: str) -> None:
        self._logger.info("%s: %s", tag, message)

    def debug(self, tag: str, message: str) -> None:
        self._logger.debug("%s: %s", tag, message)

    def error(self, tag: str, message: str) -> None:
        self._logger.error("%s: %s", tag, message)
