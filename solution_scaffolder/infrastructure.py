"""Docker Compose descriptor for the local infrastructure services.

The descriptor is a fixed template.  The configured service-name list does
not generate it, so the two can drift apart; ``descriptor_divergence``
compares them after the file is written so the drift is reported instead of
silently ignored.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .templates import TemplateRenderer

COMPOSE_TEMPLATE = "docker-compose.yml.j2"
COMPOSE_FILE = "docker-compose.yml"


@dataclass
class DescriptorDivergence:
    """Service names present on only one side of list vs. descriptor."""

    missing_from_descriptor: list[str] = field(default_factory=list)
    undeclared_in_config: list[str] = field(default_factory=list)

    @property
    def diverged(self) -> bool:
        return bool(self.missing_from_descriptor or self.undeclared_in_config)


class InfrastructureWriter:
    """Writes ``docker-compose.yml`` at the output root."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(self, root: Path, context: dict[str, Any]) -> Path:
        """Render the compose descriptor to ``<root>/docker-compose.yml``."""
        return await self.renderer.render_to_file(
            COMPOSE_TEMPLATE, root, COMPOSE_FILE, context
        )


def descriptor_services(path: Path) -> list[str]:
    """Return the service names of a compose file, in document order."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return list((data.get("services") or {}).keys())


def descriptor_divergence(declared: Iterable[str], path: Path) -> DescriptorDivergence:
    """Compare the declared service names with the services in *path*."""
    declared_list = list(declared)
    present = descriptor_services(path)
    return DescriptorDivergence(
        missing_from_descriptor=[s for s in declared_list if s not in present],
        undeclared_in_config=[s for s in present if s not in declared_list],
    )
