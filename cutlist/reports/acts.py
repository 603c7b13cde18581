"""
cutlist.reports.acts - Act bucketing.

Groups clips into the configured acts by start frame and numbers them in
input order across the whole report.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from cutlist.config import Act
from cutlist.models import ClipRecord


@dataclass(frozen=True)
class NumberedClip:
    number: int
    clip: ClipRecord


@dataclass
class ActBucket:
    act: Act
    clips: list[NumberedClip] = field(default_factory=list)


def assign_act(start_frame: int, acts: Sequence[Act]) -> int:
    """Return the index of the act containing start_frame.

    Frames outside every act, including negative frames, go to the last act.
    """
    for i, act in enumerate(acts):
        if act.contains(start_frame):
            return i
    return len(acts) - 1


def reportable_clips(clips: Iterable[ClipRecord]) -> list[ClipRecord]:
    """Drop clips that have neither text nor a name."""
    return [c for c in clips if c is not None and (c.text or c.name)]


def bucket_clips(clips: Iterable[ClipRecord], acts: Sequence[Act]) -> list[ActBucket]:
    """Bucket clips into acts, numbering them 1..n in input order.

    Args:
        clips: Clip records in report order
        acts: Ordered, non-empty act table

    Returns:
        One bucket per act, in act order (empty buckets included)
    """
    if not acts:
        raise ValueError("At least one act is required")

    buckets = [ActBucket(act=act) for act in acts]
    for number, clip in enumerate(reportable_clips(clips), start=1):
        buckets[assign_act(clip.start_frame, acts)].clips.append(NumberedClip(number, clip))
    return buckets
