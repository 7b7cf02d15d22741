""".NET host bridge.

Loads the engine host assemblies with :mod:`pythonnet`, resolves the running
application object and adapts it to :class:`~gdxlog.backend.HostBackend`.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import Any, Iterable

from .backend import HostBackend
from .config import HostConfig
from .platform import ApplicationType

logger = logging.getLogger(__name__)


def _dotnet_text(value: Any) -> str:
    try:
        return str(value.ToString())
    except AttributeError:
        return str(value)


class DotNetHostBackend(HostBackend):
    """Forward writes to a .NET application exposing ``Log``/``Debug``/``Error``.

    :param app: Host application object (typically resolved by
        :func:`resolve_host_application`).
    """

    def __init__(self, app: Any) -> None:
        self._app = app

    def application_type(self) -> ApplicationType:
        return ApplicationType.from_name(_dotnet_text(self._app.Type))

    def log(self, tag: str, message: str) -> None:
        self._app.Log(tag, message)

    def debug(self, tag: str, message: str) -> None:
        self._app.Debug(tag, message)

    def error(self, tag: str, message: str) -> None:
        self._app.Error(tag, message)


class HostLoader:
    """Load .NET assembly references via pythonnet.

    :param dll_paths: Iterable of DLL paths to add via ``clr.AddReference``.
    :param runtime: pythonnet runtime name passed to ``pythonnet.load``.
    """

    def __init__(self, dll_paths: Iterable[Path], runtime: str = "coreclr") -> None:
        self._dll_paths = [Path(p) for p in dll_paths]
        self._runtime = runtime

    def load(self) -> None:
        """Load the pythonnet runtime and reference every assembly."""
        self._load_runtime(self._runtime)
        self._add_references(self._dll_paths)

    @staticmethod
    def _load_runtime(runtime: str) -> None:
        if "clr" in sys.modules:
            logger.debug("pythonnet runtime already loaded")
            return

        from pythonnet import load

        try:
            load(runtime)
        except (RuntimeError, OSError) as ex:
            logger.warning("pythonnet runtime %r unavailable (%s); falling back to the default", runtime, ex)
            load()

    @staticmethod
    def _add_references(dll_paths: Iterable[Path]) -> None:
        import clr  # type: ignore

        for dll in dll_paths:
            logger.debug("Adding reference %s", dll)
            clr.AddReference(str(dll))


def collect_assemblies(lib_dir: Path, primary: str = "Gdx.dll") -> list[Path]:
    """Collect ``.dll`` files from ``lib_dir``.

    Assemblies are ordered by name, except ``primary`` which always sorts
    last so its dependencies are referenced before it.

    :param lib_dir: Directory to search recursively.
    :param primary: File name of the host assembly (case-insensitive).
    :returns: List of DLL paths.
    """
    if not lib_dir.is_dir():
        return []

    primary = primary.lower()
    return sorted(
        (p for p in lib_dir.rglob("*.dll") if p.is_file()),
        key=lambda p: (p.name.lower() == primary, p.name.lower()),
    )


def resolve_host_application(type_name: str) -> Any:
    """Return the running application exposed by the .NET type ``type_name``.

    The type's static ``App`` (or ``app``) member is used when present,
    otherwise the type itself is treated as the application.

    :param type_name: Fully-qualified type name such as ``Gdx.Gdx``.
    :raises RuntimeError: If the namespace or type cannot be located.
    """
    namespace, _, name = type_name.rpartition(".")
    if not namespace:
        raise RuntimeError(f"Host application type must be namespace-qualified: {type_name!r}")

    try:
        host_type = getattr(importlib.import_module(namespace), name)
    except (ImportError, AttributeError) as ex:
        raise RuntimeError(f"Unable to locate host application type {type_name!r}.") from ex

    for attr in ("App", "app"):
        app = getattr(host_type, attr, None)
        if app is not None:
            return app
    return host_type


def connect(config: HostConfig) -> DotNetHostBackend:
    """Load the host assemblies described by ``config`` and wrap the running application.

    :param config: Host configuration.
    :returns: A backend bound to the host application.
    """
    HostLoader(collect_assemblies(config.lib_dir, config.primary_assembly), config.runtime).load()
    return DotNetHostBackend(resolve_host_application(config.application_type_name))
