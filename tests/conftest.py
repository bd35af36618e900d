"""Shared pytest fixtures for the solution scaffolder test suite.

Provides:
- Small and default configurations
- A recording fake for the external tool interfaces
- A generator wired to the fake with environment validation disabled
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from solution_scaffolder.config import DomainModule, ScaffoldConfig
from solution_scaffolder.environment import EnvironmentValidator
from solution_scaffolder.generator import SolutionGenerator
from solution_scaffolder.templates import TemplateRenderer
from solution_scaffolder.toolchain import CommandFailureError


# ---------------------------------------------------------------------------
# Fake toolchain
# ---------------------------------------------------------------------------


class RecordingToolchain:
    """Implements ``ProjectScaffolder`` and ``PackageInstaller`` by recording calls.

    ``fail_when`` receives each call tuple and may return ``True`` to make
    that call raise ``CommandFailureError``.
    """

    def __init__(self, fail_when: Callable[[tuple], bool] | None = None) -> None:
        self.calls: list[tuple] = []
        self.fail_when = fail_when

    def _record(self, call: tuple) -> None:
        if self.fail_when is not None and self.fail_when(call):
            raise CommandFailureError(" ".join(str(part) for part in call), 1, "boom")
        self.calls.append(call)

    async def create_solution(self, root: Path, name: str) -> None:
        self._record(("create_solution", name))

    async def create_project(
        self,
        root: Path,
        template: str,
        name: str,
        output: Path,
        framework: str,
        extra_args: tuple[str, ...] = (),
    ) -> None:
        self._record(("create_project", template, name, output.as_posix(), framework, extra_args))

    async def add_to_solution(self, root: Path, project_file: Path) -> None:
        self._record(("add_to_solution", project_file.as_posix()))

    async def add_package(self, root: Path, project_dir: Path, package: str) -> None:
        self._record(("add_package", project_dir.as_posix(), package))

    def of(self, kind: str) -> list[tuple]:
        """Recorded calls of one kind, in order."""
        return [call for call in self.calls if call[0] == kind]


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def default_config() -> ScaffoldConfig:
    """The embedded configuration."""
    return ScaffoldConfig()


@pytest.fixture
def small_config() -> ScaffoldConfig:
    """Two modules with two packages on the first."""
    return ScaffoldConfig(
        project_name="Acme",
        modules=[DomainModule.CORE, DomainModule.WORKFLOWS],
        packages={DomainModule.CORE: ["P1", "P2"]},
        infra_services=["rabbitmq", "kafka"],
    )


# ---------------------------------------------------------------------------
# Generator wiring
# ---------------------------------------------------------------------------


@pytest.fixture
def toolchain() -> RecordingToolchain:
    return RecordingToolchain()


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def make_generator(toolchain: RecordingToolchain) -> Callable[..., SolutionGenerator]:
    """Factory for a generator backed by the recording toolchain."""

    def _make(
        config: ScaffoldConfig,
        tools: RecordingToolchain | None = None,
        validator: EnvironmentValidator | None = None,
    ) -> SolutionGenerator:
        fake = tools or toolchain
        return SolutionGenerator(
            config,
            scaffolder=fake,
            installer=fake,
            validator=validator or EnvironmentValidator(()),
        )

    return _make
