"""
Cutlist - timeline audit reports for video edits.

Walks the tracks and clips of an editing sequence, resolves each clip's
on-screen text, and renders an act-segmented Markdown cut list:
sequence snapshot → clip extraction → act bucketing → Markdown report.
"""

__version__ = "0.1.0"
