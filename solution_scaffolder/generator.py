"""Main scaffolding orchestrator.

Runs the generation steps strictly in order: validate the environment,
create the solution structure, add packages, write the Docker Compose
descriptor, emit code stubs, write the CI pipeline and write the docs.  Every
step either completes or raises; nothing is retried or rolled back.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.panel import Panel

from .ci import CiWriter
from .config import DomainModule, ScaffoldConfig
from .docs import DocsWriter
from .environment import EnvironmentValidator
from .infrastructure import DescriptorDivergence, InfrastructureWriter, descriptor_divergence
from .packages import DependencyAnnotator
from .structure import ProjectEntry, StructureGenerator
from .stubs import StubEmitter
from .templates import TemplateRenderer
from .toolchain import DotnetToolchain, PackageInstaller, ProjectScaffolder
from .utils import (
    console,
    format_duration,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)

COMPLETION_BANNER = "Ultimate Integration Platform Setup Complete!"


@dataclass
class GenerationReport:
    """What a completed run produced."""

    root: Path
    projects: list[ProjectEntry] = field(default_factory=list)
    packages: list[tuple[DomainModule, str]] = field(default_factory=list)
    artifacts: list[Path] = field(default_factory=list)
    divergence: DescriptorDivergence = field(default_factory=DescriptorDivergence)
    duration_seconds: float = 0.0


class SolutionGenerator:
    """Scaffolds a complete solution from a ``ScaffoldConfig``.

    The external tools are reached only through the ``ProjectScaffolder`` and
    ``PackageInstaller`` interfaces; both default to a ``DotnetToolchain``.
    Pass fakes (and a validator that accepts them) to run without a .NET SDK.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        scaffolder: ProjectScaffolder | None = None,
        installer: PackageInstaller | None = None,
        validator: EnvironmentValidator | None = None,
        renderer: TemplateRenderer | None = None,
        verbose: bool = False,
    ) -> None:
        self.config = config
        toolchain = DotnetToolchain(timeout=config.command_timeout, verbose=verbose)
        self.scaffolder = scaffolder or toolchain
        self.installer = installer or toolchain
        self.validator = validator or EnvironmentValidator(config.required_tools)
        self.renderer = renderer or TemplateRenderer()

        self.structure = StructureGenerator(config, self.scaffolder)
        self.dependencies = DependencyAnnotator(config, self.installer)
        self.infrastructure = InfrastructureWriter(self.renderer)
        self.stubs = StubEmitter(config, self.renderer)
        self.ci = CiWriter(config, self.renderer)
        self.docs = DocsWriter(config, self.renderer)

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path) -> GenerationReport:
        """Generate the whole solution into *output_dir*.

        The environment is validated before anything is created, so a missing
        tool leaves the filesystem untouched.

        Raises:
            MissingDependencyError: A required tool is not installed.
            CommandFailureError: An external command exited non-zero.
        """
        start = time.monotonic()

        console.print(
            Panel(
                f"[bold bright_cyan]{self.config.project_name}[/bold bright_cyan]\n"
                f"Output  : {Path(output_dir).resolve()}\n"
                f"Modules : {', '.join(m.value for m in self.config.modules)}",
                title="[bold]Solution Scaffolder[/bold]",
                border_style="bright_cyan",
            )
        )

        # 1. Environment
        print_step_header(1)
        self.validator.validate()

        root = Path(output_dir)
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)
        report = GenerationReport(root=root)

        # 2. Solution structure
        print_step_header(2)
        report.projects = await self.structure.generate(root)

        # 3. Package references
        print_step_header(3)
        report.packages = await self.dependencies.annotate(root)

        # 4. Docker Compose descriptor
        print_step_header(4)
        compose_path = await self.infrastructure.generate(root, self._context())
        report.artifacts.append(compose_path)
        report.divergence = descriptor_divergence(self.config.infra_services, compose_path)
        if report.divergence.diverged:
            _warn_divergence(report.divergence)

        # 5. Code stubs
        print_step_header(5)
        report.artifacts.extend(await self.stubs.generate(root))

        # 6. CI/CD
        print_step_header(6)
        report.artifacts.append(await self.ci.generate(root))

        # 7. Documentation
        print_step_header(7)
        report.artifacts.extend(await self.docs.generate(root))

        report.duration_seconds = time.monotonic() - start
        self._print_completion(report)
        return report

    # -- Helpers -----------------------------------------------------------

    def _context(self) -> dict[str, Any]:
        return {
            "project_name": self.config.project_name,
            "infra_services": list(self.config.infra_services),
        }

    def _print_completion(self, report: GenerationReport) -> None:
        console.print()
        print_summary_table(
            {
                "Projects": str(len(report.projects)),
                "Packages": str(len(report.packages)),
                "Files": str(len(report.artifacts)),
                "Duration": format_duration(report.duration_seconds),
            },
            title="Scaffolding Summary",
        )
        print_success(COMPLETION_BANNER)
        console.print()
        console.print("Next Steps:")
        for line in next_steps(self.config):
            console.print(line, highlight=False)


def next_steps(config: ScaffoldConfig) -> list[str]:
    """The instructions printed after a successful run."""
    return [
        "1. Start services: docker-compose up -d",
        f"2. Run the application: dotnet run --project {config.host_dir.as_posix()}",
        "3. Access monitoring: http://localhost:3000",
    ]


def _warn_divergence(divergence: DescriptorDivergence) -> None:
    if divergence.missing_from_descriptor:
        print_warning(
            "  Declared services missing from docker-compose.yml: "
            + ", ".join(divergence.missing_from_descriptor)
        )
    if divergence.undeclared_in_config:
        print_warning(
            "  docker-compose.yml services not declared in the configuration: "
            + ", ".join(divergence.undeclared_in_config)
        )
