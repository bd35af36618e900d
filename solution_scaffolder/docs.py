"""README and documentation stubs for the generated solution."""

from __future__ import annotations

from pathlib import Path

from .config import ScaffoldConfig
from .templates import TemplateRenderer
from .utils import ensure_dir

# Template name -> output path
DOC_FILES: dict[str, Path] = {
    "docs/overview.md.j2": Path("docs/architecture/overview.md"),
    "docs/README.md.j2": Path("README.md"),
}

# Sections that start out empty.
DOC_DIRS: tuple[Path, ...] = (Path("docs/api-guide"), Path("docs/operations"))


class DocsWriter:
    """Writes the architecture overview and the top-level README.

    The overview is the only artifact the configured infrastructure-service
    list feeds into.
    """

    def __init__(self, config: ScaffoldConfig, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    async def generate(self, root: Path) -> list[Path]:
        context = {
            "project_name": self.config.project_name,
            "modules": [m.value for m in self.config.modules],
            "infra_services": list(self.config.infra_services),
            "host_dir": self.config.host_dir.as_posix(),
        }
        written: list[Path] = []
        for template_name, output in DOC_FILES.items():
            written.append(
                await self.renderer.render_to_file(template_name, root, output, context)
            )
        for directory in DOC_DIRS:
            ensure_dir(root / directory)
        return written
