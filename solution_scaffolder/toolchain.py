"""External tool capability layer.

Every interaction with an external command-line tool goes through the narrow
interfaces defined here.  ``ProjectScaffolder`` covers solution and project
creation, ``PackageInstaller`` covers package references.  ``DotnetToolchain``
implements both on top of the ``dotnet`` CLI; tests substitute recording
fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from .utils import print_command, run_command


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for fatal scaffolding failures."""


class MissingDependencyError(ScaffoldError):
    """Raised when a required external tool is not on the ``PATH``."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"Missing dependency: {tool}")


class CommandFailureError(ScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed (exit {returncode}): {command}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Capability interfaces
# ---------------------------------------------------------------------------


@runtime_checkable
class ProjectScaffolder(Protocol):
    """Creates solutions and projects and registers projects in a solution."""

    async def create_solution(self, root: Path, name: str) -> None: ...

    async def create_project(
        self,
        root: Path,
        template: str,
        name: str,
        output: Path,
        framework: str,
        extra_args: tuple[str, ...] = (),
    ) -> None: ...

    async def add_to_solution(self, root: Path, project_file: Path) -> None: ...


@runtime_checkable
class PackageInstaller(Protocol):
    """Adds a package reference to a project."""

    async def add_package(self, root: Path, project_dir: Path, package: str) -> None: ...


# ---------------------------------------------------------------------------
# dotnet CLI implementation
# ---------------------------------------------------------------------------


class DotnetToolchain:
    """``ProjectScaffolder`` and ``PackageInstaller`` backed by the ``dotnet`` CLI.

    Commands run one at a time with *root* as the working directory.  Paths
    passed to the CLI are relative to *root* so the issued commands are the
    same regardless of where the output lives.
    """

    def __init__(
        self,
        executable: str = "dotnet",
        timeout: int = 600,
        verbose: bool = False,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self.verbose = verbose

    async def create_solution(self, root: Path, name: str) -> None:
        await self._run(root, "new", "sln", "-n", name, "-o", ".", "--force")

    async def create_project(
        self,
        root: Path,
        template: str,
        name: str,
        output: Path,
        framework: str,
        extra_args: tuple[str, ...] = (),
    ) -> None:
        await self._run(
            root,
            "new",
            template,
            "-n",
            name,
            "-f",
            framework,
            *extra_args,
            "-o",
            output.as_posix(),
        )

    async def add_to_solution(self, root: Path, project_file: Path) -> None:
        await self._run(root, "sln", "add", project_file.as_posix())

    async def add_package(self, root: Path, project_dir: Path, package: str) -> None:
        await self._run(root, "add", project_dir.as_posix(), "package", package)

    async def _run(self, root: Path, *args: str) -> str:
        """Run ``dotnet <args>`` in *root*; raise ``CommandFailureError`` on failure."""
        cmd = [self.executable, *args]
        if self.verbose:
            print_command(cmd)
        returncode, stdout, stderr = await run_command(
            cmd, cwd=root, timeout=self.timeout
        )
        if returncode != 0:
            raise CommandFailureError(" ".join(cmd), returncode, stderr or stdout)
        return stdout
