"""
cutlist.host - Editing host boundary.

Structural protocols for the objects the extractor walks: a project with an
active sequence, its video tracks, their clips and an optional motion
graphics component per clip. Any host binding (the snapshot loader in
cutlist.host.snapshot, or a live scripting bridge) only has to match these
shapes. Optional host features are detected with runtime-checkable
protocols rather than base classes.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostTime(Protocol):
    seconds: float


@runtime_checkable
class HostParam(Protocol):
    """A single adjustable parameter on a graphics component."""

    display_name: str

    def get_value(self) -> Any: ...


@runtime_checkable
class GraphicsComponent(Protocol):
    properties: Sequence[HostParam]


@runtime_checkable
class SupportsParamLookup(Protocol):
    """Component capability: exact lookup of a parameter by display name."""

    def param_for_display_name(self, name: str) -> HostParam | None: ...


@runtime_checkable
class HostClip(Protocol):
    name: str
    start: HostTime
    end: HostTime


@runtime_checkable
class SupportsGraphics(Protocol):
    """Clip capability: access to a motion graphics template component."""

    def get_graphics_component(self) -> GraphicsComponent | None: ...


@runtime_checkable
class HostTrack(Protocol):
    clips: Sequence[HostClip]


@runtime_checkable
class HostSequence(Protocol):
    timebase: Any
    end: Any
    video_tracks: Sequence[HostTrack]


@runtime_checkable
class HostProject(Protocol):
    active_sequence: HostSequence | None


class GraphicsSupport(str, Enum):
    """What a clip offers for graphics text lookup."""

    UNSUPPORTED = "unsupported"
    EMPTY = "empty"
    AVAILABLE = "available"


def graphics_capability(clip: Any) -> tuple[GraphicsSupport, GraphicsComponent | None]:
    """Probe a clip for a usable graphics component.

    Returns:
        (UNSUPPORTED, None) if the clip has no graphics capability,
        (EMPTY, None) if it has one but no component or no properties,
        (AVAILABLE, component) otherwise.
    """
    if not isinstance(clip, SupportsGraphics):
        return GraphicsSupport.UNSUPPORTED, None

    component = clip.get_graphics_component()
    if component is None or not isinstance(component, GraphicsComponent):
        return GraphicsSupport.EMPTY, None
    if not component.properties:
        return GraphicsSupport.EMPTY, None
    return GraphicsSupport.AVAILABLE, component


__all__ = [
    "GraphicsComponent",
    "GraphicsSupport",
    "HostClip",
    "HostParam",
    "HostProject",
    "HostSequence",
    "HostTime",
    "HostTrack",
    "SupportsGraphics",
    "SupportsParamLookup",
    "graphics_capability",
]
