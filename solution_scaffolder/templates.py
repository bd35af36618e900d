"""Jinja2 template rendering for solution scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``solution_scaffolder/templates/`` directory and renders them with the
project context.  File content lives entirely in the templates; the
generators only decide which template goes to which path.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .utils import write_text


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class GeneratedArtifact:
    """A file to write: a path relative to the output root and its text."""

    path: Path
    content: str


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for the generated solution.

    Templates are ``.j2`` files under a configurable template directory.
    Undefined variables raise instead of rendering as empty text so a typo in
    a template cannot silently produce a broken file.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"stubs/XmlValidator.cs.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_artifact(
        self, template_path: str, output_path: str | Path, context: dict[str, Any]
    ) -> GeneratedArtifact:
        """Render *template_path* into an artifact destined for *output_path*."""
        return GeneratedArtifact(Path(output_path), self.render(template_path, context))

    async def write_artifact(self, root: Path, artifact: GeneratedArtifact) -> Path:
        """Write *artifact* below *root*, creating parent directories."""
        out = root / artifact.path
        await asyncio.to_thread(write_text, out, artifact.content)
        return out

    async def render_to_file(
        self,
        template_path: str,
        root: Path,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write it to *output_path* below *root*."""
        artifact = self.render_artifact(template_path, output_path, context)
        return await self.write_artifact(root, artifact)
