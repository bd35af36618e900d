"""Placeholder C# sources for the feature areas of the generated solution.

Each stub is one class with a single method that does no real work.  Stub
content depends only on the project name.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config import DomainModule, ScaffoldConfig
from .templates import TemplateRenderer
from .utils import console, ensure_dir


@dataclass(frozen=True)
class StubSpec:
    """One placeholder source file."""

    label: str
    module: DomainModule
    template: str
    output: Path


STUBS: tuple[StubSpec, ...] = (
    StubSpec(
        "validator",
        DomainModule.CORE,
        "stubs/XmlValidator.cs.j2",
        Path("src/Core/Xml/XmlValidator.cs"),
    ),
    StubSpec(
        "versioner",
        DomainModule.CORE,
        "stubs/MessageVersioner.cs.j2",
        Path("src/Core/Versioning/MessageVersioner.cs"),
    ),
    StubSpec(
        "anomaly detector",
        DomainModule.AI,
        "stubs/AnomalyDetector.cs.j2",
        Path("src/AI/Services/AnomalyDetector.cs"),
    ),
    StubSpec(
        "cloud uploader",
        DomainModule.CLOUD,
        "stubs/AzureService.cs.j2",
        Path("src/Cloud/Azure/AzureService.cs"),
    ),
)

# Folders laid out for later work; they stay empty.
STUB_DIRS: tuple[tuple[DomainModule, Path], ...] = (
    (DomainModule.AI, Path("src/AI/Models")),
    (DomainModule.CLOUD, Path("src/Cloud/AWS")),
)


class StubEmitter:
    """Writes the placeholder sources for every configured module."""

    def __init__(self, config: ScaffoldConfig, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    def selected(self) -> list[StubSpec]:
        """Stubs whose module is part of the configuration."""
        return [stub for stub in STUBS if stub.module in self.config.modules]

    async def generate(self, root: Path) -> list[Path]:
        """Render every selected stub below *root*.

        Returns:
            Paths of the written source files.
        """
        context: dict[str, Any] = {"project_name": self.config.project_name}
        written: list[Path] = []
        for stub in self.selected():
            path = await self.renderer.render_to_file(
                stub.template, root, stub.output, context
            )
            written.append(path)
            console.print(f"  [green]+[/green] {stub.output.as_posix()} ({stub.label})")

        for module, directory in STUB_DIRS:
            if module in self.config.modules:
                ensure_dir(root / directory)

        return written
