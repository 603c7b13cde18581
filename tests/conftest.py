"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

TICKS_PER_FRAME_24 = 10584000000


@pytest.fixture
def sample_snapshot() -> dict:
    """Return a two-track sequence snapshot at 24fps, 1440 frames long."""
    return {
        "active_sequence": {
            "name": "Spot 60",
            "timebase": TICKS_PER_FRAME_24,
            "end": 1440 * TICKS_PER_FRAME_24,
            "video_tracks": [
                {
                    "clips": [
                        {
                            "name": "Opening Title",
                            "start": 0.0,
                            "end": 2.0,
                            "graphics": [
                                {"display_name": "Source Text", "value": "The Race Begins"},
                            ],
                        },
                        {
                            "name": "Graphic",
                            "start": 20.0,
                            "end": 22.5,
                            "graphics": [
                                {"display_name": "Source Text", "value": "□□□"},
                                {"display_name": "Position", "value": "960,540"},
                                {"display_name": "Title Line", "value": "Left Behind"},
                            ],
                        },
                    ]
                },
                {
                    "clips": [
                        {"name": "  Hero Enters  ", "start": 55.0, "end": 57.0},
                        {"name": "   ", "start": 30.0, "end": 31.0},
                        {"name": "Rescue_Shot*1", "start": 26.0, "end": 28.0},
                    ]
                },
            ],
        }
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, sample_snapshot: dict) -> Path:
    """Write the sample snapshot as YAML and return its path."""
    path = tmp_path / "sequence.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(sample_snapshot, f, allow_unicode=True)
    return path


@pytest.fixture
def sample_audit_payload() -> dict:
    """Return a single-clip audit payload as the extractor emits it."""
    return {
        "frameRate": 24,
        "totalDurationFrames": 1440,
        "clips": [
            {
                "text": "Hero Enters",
                "name": "Hero Enters",
                "startFrame": 1300,
                "endFrame": 1340,
                "durationFrames": 40,
                "trackIndex": 1,
            }
        ],
    }


@pytest.fixture
def sample_config_dict() -> dict:
    """Return a config with a custom three-act table."""
    return {
        "title": "TEST CUT",
        "default_fps": 25,
        "acts": [
            {"name": "OPEN", "start": 0, "end": 100},
            {"name": "MIDDLE", "start": 100, "end": 200},
            {"name": "CLOSE", "start": 200, "end": 300},
        ],
    }


@pytest.fixture
def config_file(tmp_path: Path, sample_config_dict: dict) -> Path:
    path = tmp_path / "cutlist.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(sample_config_dict, f)
    return path
