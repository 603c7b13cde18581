"""
cutlist.models - Audit data models.

The extractor produces a SequenceAudit snapshot; the reporter consumes it.
Both sides share these immutable pydantic models. Field aliases carry the
camelCase names used in the extractor payload.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class FailureKind(str, Enum):
    """Why an audit could not be produced."""

    NO_ACTIVE_SEQUENCE = "no_active_sequence"
    HOST_SCRIPT_ERROR = "host_script_error"
    MALFORMED_PAYLOAD = "malformed_payload"


class ClipRecord(BaseModel):
    """One timeline clip with resolved display text and frame timing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str | None = None
    name: str | None = None
    start_frame: int = Field(alias="startFrame")
    end_frame: int = Field(alias="endFrame")
    duration_frames: int = Field(alias="durationFrames")
    track_index: int = Field(default=1, alias="trackIndex")

    @classmethod
    def from_frames(
        cls,
        text: str,
        name: str,
        start_frame: int,
        end_frame: int,
        track_index: int,
    ) -> ClipRecord:
        """Build a record, deriving a non-negative duration from the frames."""
        return cls(
            text=text,
            name=name,
            start_frame=start_frame,
            end_frame=end_frame,
            duration_frames=max(0, end_frame - start_frame),
            track_index=track_index,
        )

    @property
    def label(self) -> str:
        return self.text or self.name or ""


class SequenceAudit(BaseModel):
    """Snapshot of a sequence: frame rate, total duration and ordered clips."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frame_rate: float | None = Field(default=None, alias="frameRate")
    total_duration_frames: int = Field(alias="totalDurationFrames")
    clips: tuple[ClipRecord, ...]

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class AuditFailure(BaseModel):
    """Failed extraction: which failure kind and the underlying message."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind = FailureKind.HOST_SCRIPT_ERROR
    message: str


AuditOutcome = Union[SequenceAudit, AuditFailure]
