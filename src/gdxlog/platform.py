"""Host platform kinds and log priorities."""

from __future__ import annotations

from enum import Enum


class ApplicationType(Enum):
    """Kind of runtime platform reported by the host application."""

    ANDROID = "android"
    DESKTOP = "desktop"
    HEADLESS_DESKTOP = "headless_desktop"
    APPLET = "applet"
    WEB_GL = "web_gl"
    IOS = "ios"

    @classmethod
    def from_name(cls, name: str) -> "ApplicationType":
        """Map a host-side platform name onto an :class:`ApplicationType`.

        Case and underscores are ignored, so ``"WebGL"``, ``"WEB_GL"`` and
        ``"webgl"`` all resolve to :attr:`WEB_GL`. Unknown names map to
        :attr:`DESKTOP`.

        :param name: Platform name as reported by the host.
        :returns: The matching application type.
        """
        key = str(name).replace("_", "").lower()
        for member in cls:
            if member.value.replace("_", "") == key:
                return member
        return cls.DESKTOP


class Priority(Enum):
    LOG = "log"
    DEBUG = "debug"
    ERROR = "error"
