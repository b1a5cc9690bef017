"""Markdown reporter for license detection results.

Renders results through a Jinja2 template. The bundled template produces a
table of inspected paths and their licenses followed by a list of failures.
"""

from datetime import datetime
from importlib.resources import files
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, Template

from license_detector.models import DetectionResult
from license_detector.reporters.base import BaseReporter


class MarkdownReporter(BaseReporter):
    """Reporter that generates a Markdown license report.

    Autoescaping is enabled, so paths or texts containing HTML are rendered
    inert in Markdown viewers that pass HTML through.

    Attributes:
        template: The Jinja2 template to use for rendering.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        """Initialize the Markdown reporter.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the bundled template.
        """
        if template_path:
            env = Environment(
                loader=FileSystemLoader(template_path.parent),
                autoescape=True,
            )
            self.template = env.get_template(template_path.name)
        else:
            self.template = self._load_default_template()

    def _load_default_template(self) -> Template:
        template_content = (
            files("license_detector.templates")
            .joinpath("report.md.j2")
            .read_text(encoding="utf-8")
        )
        env = Environment(autoescape=True)
        return env.from_string(template_content)

    def render(self, results: list[DetectionResult]) -> str:
        """Render detection results to Markdown.

        Args:
            results: One result per inspected path.

        Returns:
            Rendered Markdown document as a string.
        """
        return self.template.render(
            detected=[r for r in results if r.ok],
            failed=[r for r in results if not r.ok],
            generated_at=datetime.now(),
        )

    @property
    def format_name(self) -> str:
        return "markdown"

    @property
    def default_extension(self) -> str:
        return ".md"
