"""Configuration objects for the logger and the .NET host bridge.

:class:`LoggerConfig` holds the platform limits applied by
:class:`~gdxlog.logger.GdxLogger`. :class:`HostConfig` describes where the host
assemblies live and which .NET type exposes the running application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .platform import ApplicationType


@dataclass(frozen=True)
class LoggerConfig:
    """Limits applied by :class:`~gdxlog.logger.GdxLogger`.

    :param max_log_length: Longest single entry the host accepts on a restricted platform.
    :param max_tag_length: Longest tag the host accepts on a restricted platform.
    :param restricted_platforms: Platforms on which both limits are enforced.
    """
    max_log_length: int = 4000
    max_tag_length: int = 23
    restricted_platforms: frozenset[ApplicationType] = field(
        default_factory=lambda: frozenset({ApplicationType.ANDROID})
    )

    def __post_init__(self) -> None:
        if self.max_log_length <= 0:
            raise ValueError(f"max_log_length must be positive, got {self.max_log_length}")
        if self.max_tag_length <= 0:
            raise ValueError(f"max_tag_length must be positive, got {self.max_tag_length}")

    def is_restricted(self, application_type: ApplicationType) -> bool:
        return application_type in self.restricted_platforms


@dataclass(frozen=True)
class HostConfig:
    """Configuration for :func:`~gdxlog.dotnet.connect`.

    :param lib_dir: Directory containing the host ``.dll`` assemblies.
    :param application_type_name: Fully-qualified .NET type exposing the running application.
    :param primary_assembly: File name of the assembly that must be referenced last.
    :param runtime: pythonnet runtime to load (``coreclr``, ``netfx`` or ``mono``).
    """
    lib_dir: Path
    application_type_name: str = "Gdx.Gdx"
    primary_assembly: str = "Gdx.dll"
    runtime: str = "coreclr"

