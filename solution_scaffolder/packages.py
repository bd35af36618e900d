"""NuGet package references for the generated library projects."""

from __future__ import annotations

from pathlib import Path

from .config import DomainModule, ScaffoldConfig
from .toolchain import PackageInstaller
from .utils import console


class DependencyAnnotator:
    """Adds each configured package to its module's library project.

    Modules are visited in configured order and, within a module, packages in
    configured order.  Identifiers are passed through untouched: no
    de-duplication and no version handling.
    """

    def __init__(self, config: ScaffoldConfig, installer: PackageInstaller) -> None:
        self.config = config
        self.installer = installer

    async def annotate(self, root: Path) -> list[tuple[DomainModule, str]]:
        """Issue one add-package call per ``(module, package)`` pair.

        Returns:
            The pairs added, in invocation order.

        Raises:
            CommandFailureError: On the first package that cannot be added.
        """
        added: list[tuple[DomainModule, str]] = []
        for module in self.config.modules:
            project_dir = self.config.library_dir(module)
            packages = self.config.packages_for(module)
            for package in packages:
                await self.installer.add_package(root, project_dir, package)
                added.append((module, package))
            if packages:
                console.print(f"  [green]+[/green] {module.value}: {len(packages)} package(s)")
        return added
