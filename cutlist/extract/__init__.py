"""
cutlist.extract - Sequence extraction.

Runs against the editing host: resolves the frame rate from the sequence
timebase, resolves each clip's display text, and converts clip timing to
frames.
"""

from __future__ import annotations

from cutlist.extract.extractor import extract_audit, extract_payload, run_extraction

__all__ = ["extract_audit", "extract_payload", "run_extraction"]
