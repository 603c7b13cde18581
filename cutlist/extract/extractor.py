"""
cutlist.extract.extractor - Sequence traversal.

Walks every clip of the active sequence and produces an immutable
SequenceAudit. Extraction is all-or-nothing: any host failure during the
walk aborts it without partial results.
"""

from __future__ import annotations

from cutlist.config import AuditConfig
from cutlist.exceptions import ExtractionError, HostScriptError, NoActiveSequenceError
from cutlist.extract.text import resolve_clip_text, trim_to_string
from cutlist.extract.timebase import (
    frame_rate_for,
    resolve_ticks_per_frame,
    seconds_to_frames,
    ticks_to_frames,
)
from cutlist.host import HostProject, HostSequence
from cutlist.logging import logger
from cutlist.models import AuditFailure, AuditOutcome, ClipRecord, FailureKind, SequenceAudit
from cutlist.payload import encode_outcome


def walk_sequence(sequence: HostSequence, config: AuditConfig) -> SequenceAudit:
    """Build an audit from a host sequence. Host errors propagate unchanged."""
    ticks_per_frame = resolve_ticks_per_frame(sequence.timebase, config.default_fps)
    frame_rate = frame_rate_for(ticks_per_frame)
    total_duration_frames = ticks_to_frames(sequence.end, ticks_per_frame)

    records: list[ClipRecord] = []
    for track_pos, track in enumerate(sequence.video_tracks):
        for clip in track.clips:
            text = resolve_clip_text(clip, config.text_param_names, config.text_keywords)
            if not text:
                logger.debug("Skipping clip with no text on track %d", track_pos + 1)
                continue

            start_frame = seconds_to_frames(clip.start.seconds, frame_rate)
            end_frame = seconds_to_frames(clip.end.seconds, frame_rate)
            records.append(
                ClipRecord.from_frames(
                    text=text,
                    name=trim_to_string(clip.name),
                    start_frame=start_frame,
                    end_frame=end_frame,
                    track_index=track_pos + 1,
                )
            )

    # list.sort is stable, so ties keep track/clip order
    records.sort(key=lambda r: r.start_frame)

    logger.debug(
        "Extracted %d clips at %.3f fps, %d frames total",
        len(records),
        frame_rate,
        total_duration_frames,
    )
    return SequenceAudit(
        frame_rate=frame_rate,
        total_duration_frames=total_duration_frames,
        clips=tuple(records),
    )


def extract_audit(project: HostProject, config: AuditConfig | None = None) -> SequenceAudit:
    """Extract an audit from the project's active sequence.

    Args:
        project: Host project exposing ``active_sequence``
        config: Audit configuration (defaults when omitted)

    Returns:
        SequenceAudit with clips sorted by start frame

    Raises:
        NoActiveSequenceError: If no sequence is open
        HostScriptError: If the host fails during traversal
    """
    if config is None:
        config = AuditConfig()

    try:
        sequence = project.active_sequence
        if sequence is None:
            raise NoActiveSequenceError()
        return walk_sequence(sequence, config)
    except NoActiveSequenceError:
        raise
    except Exception as e:
        raise HostScriptError(f"A host script error occurred: {e}", cause=e) from e


def run_extraction(project: HostProject, config: AuditConfig | None = None) -> AuditOutcome:
    """Extract an audit, returning failures as an AuditFailure value."""
    try:
        return extract_audit(project, config)
    except ExtractionError as e:
        logger.debug("Extraction failed: %s", e)
        return AuditFailure(kind=FailureKind(e.kind), message=str(e))


def extract_payload(project: HostProject, config: AuditConfig | None = None) -> str:
    """Extract an audit and encode the outcome for the host boundary."""
    return encode_outcome(run_extraction(project, config))
