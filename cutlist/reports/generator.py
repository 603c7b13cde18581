"""
cutlist.reports.generator - Jinja2-based report generator.

Renders Markdown reports from templates shipped with the package.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from cutlist.io import write_text
from cutlist.reports.markdown import escape_markdown, format_frame_rate, frames_to_seconds


class ReportGenerator:
    """Jinja2-based Markdown report generator."""

    def __init__(self, template_dir: Path | None = None):
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["md_escape"] = escape_markdown
        self.env.filters["seconds"] = frames_to_seconds
        self.env.filters["fps"] = format_frame_rate

    def render(self, template_name: str, data: dict[str, Any]) -> str:
        """Render a report template to a string.

        Args:
            template_name: Name of the template file
            data: Data dictionary to inject into template

        Returns:
            Rendered report text
        """
        template = self.env.get_template(template_name)
        return template.render(**data)

    def render_to_file(
        self,
        template_name: str,
        data: dict[str, Any],
        output_path: Path,
    ) -> Path:
        """Render a report template and write it atomically.

        Args:
            template_name: Name of the template file
            data: Data dictionary to inject into template
            output_path: Path to write the report

        Returns:
            Path to the generated file
        """
        write_text(output_path, self.render(template_name, data))
        return output_path
