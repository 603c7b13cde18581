"""
cutlist.host.snapshot - Sequence snapshot host.

Loads a YAML or JSON description of a project's active sequence and exposes
it through the host protocols, so audits can run outside the editing
application (and in tests).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cutlist.exceptions import SnapshotError
from cutlist.io import read_structured


@dataclass(frozen=True)
class SnapshotTime:
    seconds: float


@dataclass
class SnapshotParam:
    display_name: str
    value: Any = None

    def get_value(self) -> Any:
        return self.value


@dataclass
class SnapshotComponent:
    properties: list[SnapshotParam] = field(default_factory=list)

    def param_for_display_name(self, name: str) -> SnapshotParam | None:
        for param in self.properties:
            if param.display_name == name:
                return param
        return None


@dataclass
class SnapshotClip:
    name: str
    start: SnapshotTime
    end: SnapshotTime


@dataclass
class SnapshotGraphicsClip(SnapshotClip):
    """Clip that carries a (possibly absent) motion graphics component."""

    component: SnapshotComponent | None = None

    def get_graphics_component(self) -> SnapshotComponent | None:
        return self.component


@dataclass
class SnapshotTrack:
    clips: list[SnapshotClip] = field(default_factory=list)


@dataclass
class SnapshotSequence:
    name: str
    timebase: Any
    end: Any
    video_tracks: list[SnapshotTrack] = field(default_factory=list)


@dataclass
class SnapshotProject:
    active_sequence: SnapshotSequence | None = None


def _seconds(value: Any, where: str) -> SnapshotTime:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SnapshotError(f"{where}: expected a number of seconds, got {value!r}")
    return SnapshotTime(float(value))


def _parse_clip(data: Any, where: str) -> SnapshotClip:
    if not isinstance(data, dict):
        raise SnapshotError(f"{where}: clip must be a mapping")

    name = data.get("name")
    name = "" if name is None else str(name)
    start = _seconds(data.get("start"), f"{where}.start")
    end = _seconds(data.get("end"), f"{where}.end")

    if "graphics" not in data:
        return SnapshotClip(name=name, start=start, end=end)

    graphics = data["graphics"]
    if graphics is None:
        return SnapshotGraphicsClip(name=name, start=start, end=end)
    if not isinstance(graphics, list):
        raise SnapshotError(f"{where}.graphics: expected a list of parameters")

    params = []
    for i, param in enumerate(graphics):
        if not isinstance(param, dict) or "display_name" not in param:
            raise SnapshotError(f"{where}.graphics[{i}]: parameter needs a display_name")
        params.append(SnapshotParam(str(param["display_name"]), param.get("value")))

    return SnapshotGraphicsClip(
        name=name,
        start=start,
        end=end,
        component=SnapshotComponent(properties=params),
    )


def parse_snapshot(data: Any) -> SnapshotProject:
    """Build a SnapshotProject from parsed snapshot data.

    Args:
        data: Mapping with an optional ``active_sequence`` entry

    Returns:
        SnapshotProject (active_sequence is None when no sequence is open)

    Raises:
        SnapshotError: If the structure is malformed
    """
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a mapping with an 'active_sequence' key")

    seq_data = data.get("active_sequence")
    if seq_data is None:
        return SnapshotProject(active_sequence=None)
    if not isinstance(seq_data, dict):
        raise SnapshotError("active_sequence must be a mapping")

    tracks_data = seq_data.get("video_tracks")
    if tracks_data is None:
        tracks_data = []
    if not isinstance(tracks_data, list):
        raise SnapshotError("active_sequence.video_tracks must be a list")

    tracks = []
    for t, track_data in enumerate(tracks_data):
        where = f"video_tracks[{t}]"
        if not isinstance(track_data, dict):
            raise SnapshotError(f"{where}: track must be a mapping")
        clips_data = track_data.get("clips")
        if clips_data is None:
            clips_data = []
        if not isinstance(clips_data, list):
            raise SnapshotError(f"{where}.clips must be a list")
        clips = [_parse_clip(c, f"{where}.clips[{j}]") for j, c in enumerate(clips_data)]
        tracks.append(SnapshotTrack(clips=clips))

    sequence = SnapshotSequence(
        name=str(seq_data.get("name", "Sequence")),
        timebase=seq_data.get("timebase"),
        end=seq_data.get("end", 0),
        video_tracks=tracks,
    )
    return SnapshotProject(active_sequence=sequence)


def load_snapshot(path: Path) -> SnapshotProject:
    """Load a sequence snapshot from a YAML or JSON file."""
    if not path.exists():
        raise SnapshotError(f"Snapshot not found: {path}")
    try:
        data = read_structured(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SnapshotError(f"Cannot parse snapshot {path}: {e}") from e
    return parse_snapshot(data)
