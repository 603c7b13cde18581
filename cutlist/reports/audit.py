"""
cutlist.reports.audit - Act-segmented Markdown cut list.

Pure rendering of a SequenceAudit: the same audit always yields the same
document.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

from cutlist.config import DEFAULT_TITLE, Act, default_acts
from cutlist.models import SequenceAudit
from cutlist.reports.acts import bucket_clips, reportable_clips
from cutlist.reports.generator import ReportGenerator

AUDIT_TEMPLATE = "audit.md.j2"


@lru_cache(maxsize=1)
def _default_generator() -> ReportGenerator:
    return ReportGenerator()


def build_audit_context(
    audit: SequenceAudit,
    acts: Sequence[Act] | None = None,
    title: str = DEFAULT_TITLE,
) -> dict[str, Any]:
    """Assemble the template data for an audit report."""
    if acts is None:
        acts = default_acts()

    return {
        "title": title,
        "frame_rate": audit.frame_rate,
        "buckets": bucket_clips(audit.clips, acts),
        "clip_count": len(reportable_clips(audit.clips)),
        "total_duration_frames": audit.total_duration_frames,
    }


def render_audit(
    audit: SequenceAudit,
    acts: Sequence[Act] | None = None,
    title: str = DEFAULT_TITLE,
    generator: ReportGenerator | None = None,
) -> str:
    """Render an audit as a Markdown document.

    Args:
        audit: Extracted sequence audit
        acts: Ordered act table (defaults to the built-in table)
        title: Document title
        generator: Report generator (defaults to the packaged templates)

    Returns:
        Markdown text
    """
    generator = generator or _default_generator()
    return generator.render(AUDIT_TEMPLATE, build_audit_context(audit, acts, title))


def generate_audit_report(
    audit: SequenceAudit,
    output_path: Path,
    acts: Sequence[Act] | None = None,
    title: str = DEFAULT_TITLE,
) -> Path:
    """Render an audit and write it to output_path."""
    return _default_generator().render_to_file(
        AUDIT_TEMPLATE, build_audit_context(audit, acts, title), output_path
    )
