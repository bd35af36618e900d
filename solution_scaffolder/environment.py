"""Pre-flight check that the required external tools are installed."""

from __future__ import annotations

import shutil
from collections.abc import Iterable

from .toolchain import MissingDependencyError
from .utils import console


def check_dependency(tool: str) -> None:
    """Raise ``MissingDependencyError`` unless *tool* resolves on the ``PATH``."""
    if shutil.which(tool) is None:
        raise MissingDependencyError(tool)


class EnvironmentValidator:
    """Verifies every required tool in order and halts on the first missing one.

    There is no aggregated report: the error names only the first tool that
    could not be found.  Validation never touches the filesystem.
    """

    def __init__(self, tools: Iterable[str]) -> None:
        self.tools = tuple(tools)

    def validate(self) -> None:
        for tool in self.tools:
            check_dependency(tool)
            console.print(f"  [green]+[/green] {tool}")
