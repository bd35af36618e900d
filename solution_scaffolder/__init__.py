"""Solution scaffolder -- generates a multi-project .NET integration platform.

Validates that the required tools are installed, creates the solution with
one library and one test project per domain module plus a Web API host, adds
NuGet packages, and writes the Docker Compose descriptor, code stubs, CI
pipeline and documentation.

Quick usage::

    from solution_scaffolder import ScaffoldConfig, SolutionGenerator

    config = ScaffoldConfig(project_name="Acme", modules=["Core", "Workflows"])
    report = await SolutionGenerator(config).generate("/tmp/acme")
"""

from solution_scaffolder.config import DomainModule, ScaffoldConfig
from solution_scaffolder.generator import GenerationReport, SolutionGenerator
from solution_scaffolder.toolchain import (
    CommandFailureError,
    MissingDependencyError,
    ScaffoldError,
)

__all__ = [
    "CommandFailureError",
    "DomainModule",
    "GenerationReport",
    "MissingDependencyError",
    "ScaffoldConfig",
    "ScaffoldError",
    "SolutionGenerator",
]
