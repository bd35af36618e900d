"""GitHub Actions pipeline for the generated solution."""

from __future__ import annotations

import re
from pathlib import Path

from .config import ScaffoldConfig
from .templates import TemplateRenderer

PIPELINE_TEMPLATE = "ci/main.yml.j2"
PIPELINE_FILE = Path(".github/workflows/main.yml")
PIPELINE_NAME = "Ultimate Integration Pipeline"


def dotnet_sdk_version(target_framework: str) -> str:
    """Map a target framework moniker to a ``setup-dotnet`` version spec.

    ``net8.0`` -> ``8.0.x``.  Unrecognised monikers are passed through.
    """
    match = re.fullmatch(r"net(\d+\.\d+)", target_framework)
    if not match:
        return target_framework
    return f"{match.group(1)}.x"


class CiWriter:
    """Writes the build/test/deploy workflow."""

    def __init__(self, config: ScaffoldConfig, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    async def generate(self, root: Path) -> Path:
        context = {
            "pipeline_name": PIPELINE_NAME,
            "dotnet_version": dotnet_sdk_version(self.config.target_framework),
        }
        return await self.renderer.render_to_file(
            PIPELINE_TEMPLATE, root, PIPELINE_FILE, context
        )
