"""
cutlist.timecode - Frame to timecode conversion.

Handles non-drop-frame timecode for any frame rate and 29.97 drop-frame.
"""

from __future__ import annotations


def is_drop_frame_fps(fps: float) -> bool:
    """Check if frame rate requires drop-frame timecode.

    Args:
        fps: Frames per second

    Returns:
        True if drop-frame should be used
    """
    return abs(fps - 29.97) < 0.01


def frames_to_ndf_timecode(frame: int, fps: float) -> str:
    """Convert a frame number to non-drop-frame timecode.

    Args:
        frame: Frame number (negative values clamp to 0)
        fps: Frames per second (23.976, 24, 25, 30, etc.)

    Returns:
        Timecode string in HH:MM:SS:FF format
    """
    frame = max(0, frame)
    frames_per_second = max(1, round(fps))

    ff = frame % frames_per_second
    total_seconds = frame // frames_per_second
    ss = total_seconds % 60
    mm = (total_seconds // 60) % 60
    hh = total_seconds // 3600

    return f"{hh:02d}:{mm:02d}:{ss:02d}:{ff:02d}"


def frames_to_df_timecode(frame: int) -> str:
    """Convert a 29.97 frame number to drop-frame timecode.

    Drop-frame skips frame numbers :00 and :01 at every minute mark
    except every 10th minute (00, 10, 20, 30, 40, 50).

    Args:
        frame: Frame number (negative values clamp to 0)

    Returns:
        Timecode string in HH:MM:SS;FF format (semicolon indicates drop-frame)
    """
    frame = max(0, frame)

    d = frame // 17982
    m = frame % 17982

    if m < 2:
        adjustment = 0
    else:
        adjustment = 2 * ((m - 2) // 1798)

    adjusted = frame + 18 * d + adjustment

    ff = adjusted % 30
    ss = (adjusted // 30) % 60
    mm = (adjusted // 1800) % 60
    hh = adjusted // 108000

    return f"{hh:02d}:{mm:02d}:{ss:02d};{ff:02d}"


def frames_to_timecode(frame: int, fps: float | None, drop_frame: bool = False) -> str:
    """Convert a frame number to timecode.

    Args:
        frame: Frame number
        fps: Frames per second; a missing or zero rate gives "--:--:--:--"
        drop_frame: Whether to use drop-frame (only honoured at 29.97fps)

    Returns:
        Timecode string
    """
    if not fps or fps <= 0:
        return "--:--:--:--"
    if drop_frame and is_drop_frame_fps(fps):
        return frames_to_df_timecode(frame)
    return frames_to_ndf_timecode(frame, fps)
