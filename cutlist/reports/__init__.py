"""
cutlist.reports - Markdown report generation.

Buckets audited clips into acts and renders the cut list document.
"""

from __future__ import annotations

from cutlist.reports.acts import ActBucket, assign_act, bucket_clips
from cutlist.reports.audit import generate_audit_report, render_audit
from cutlist.reports.generator import ReportGenerator
from cutlist.reports.markdown import escape_markdown, frames_to_seconds

__all__ = [
    "ActBucket",
    "ReportGenerator",
    "assign_act",
    "bucket_clips",
    "escape_markdown",
    "frames_to_seconds",
    "generate_audit_report",
    "render_audit",
]
