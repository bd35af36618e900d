"""Solution and project structure generation.

Creates the solution manifest, one class library and one xUnit test project
per domain module, and the minimal Web API host, registering each project in
the solution as soon as it exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import ScaffoldConfig
from .toolchain import ProjectScaffolder
from .utils import console


class ProjectKind(str, Enum):
    """The ``dotnet new`` template each generated project is created from."""

    LIBRARY = "classlib"
    TEST = "xunit"
    HOST = "webapi"


@dataclass(frozen=True)
class ProjectEntry:
    """A project registered in the solution manifest."""

    name: str
    kind: ProjectKind
    directory: Path

    @property
    def project_file(self) -> Path:
        """Relative path of the generated ``.csproj``."""
        return self.directory / f"{self.name}.csproj"


def plan_projects(config: ScaffoldConfig) -> list[ProjectEntry]:
    """Return every project to create, in solution-manifest order.

    Each module contributes its library then its test project; the host
    project comes last.
    """
    entries: list[ProjectEntry] = []
    for module in config.modules:
        entries.append(
            ProjectEntry(module.value, ProjectKind.LIBRARY, config.library_dir(module))
        )
        entries.append(
            ProjectEntry(f"{module.value}.Tests", ProjectKind.TEST, config.test_dir(module))
        )
    entries.append(
        ProjectEntry(config.host_project, ProjectKind.HOST, config.host_dir)
    )
    return entries


class StructureGenerator:
    """Drives a ``ProjectScaffolder`` to build the solution skeleton."""

    def __init__(self, config: ScaffoldConfig, scaffolder: ProjectScaffolder) -> None:
        self.config = config
        self.scaffolder = scaffolder

    async def generate(self, root: Path) -> list[ProjectEntry]:
        """Create the solution and all projects under *root*.

        Returns:
            The registered projects in manifest order.

        Raises:
            CommandFailureError: On the first failing tool invocation.  Nothing
                created before the failure is removed.
        """
        await self.scaffolder.create_solution(root, self.config.project_name)

        entries = plan_projects(self.config)
        for entry in entries:
            extra_args: tuple[str, ...] = ("--minimal",) if entry.kind is ProjectKind.HOST else ()
            await self.scaffolder.create_project(
                root,
                entry.kind.value,
                entry.name,
                entry.directory,
                self.config.target_framework,
                extra_args,
            )
            await self.scaffolder.add_to_solution(root, entry.project_file)
            console.print(f"  [green]+[/green] {entry.directory.as_posix()}")

        return entries
