import pytest
import yaml
from pathlib import Path
from typing import List
from vidshrink.domain.events import EncodeEnded

@pytest.fixture
def video_dir(tmp_path):
    """Directory with a few video files, a non-video file and a subdirectory."""
    d = tmp_path / "videos"
    d.mkdir()
    for name in ["movie.mov", "clip.mkv", "holiday.mp4", "old.avi"]:
        (d / name).write_bytes(b"\x00" * 2048)
    (d / "notes.txt").write_text("not a video")
    (d / "nested").mkdir()
    (d / "nested" / "inner.mp4").write_bytes(b"\x00" * 16)
    return d

@pytest.fixture
def vidshrink_yaml(tmp_path):
    conf_dir = tmp_path / "conf"
    conf_dir.mkdir()
    conf_file = conf_dir / "vidshrink.yaml"

    content = {
        'general': {
            'extensions': ['mp4', 'mov'],
            'default_suffix': '_tiny',
            'accurate_timestamps': True,
            'cleanup_on_failure': True,
        }
    }

    with open(conf_file, 'w') as f:
        yaml.dump(content, f)

    return conf_file

class FakeFFmpegAdapter:
    """Replays a fixed event list; writes output_bytes before EncodeEnded."""

    def __init__(self, events: List, output_bytes: int = 1024):
        self.events = events
        self.output_bytes = output_bytes
        self.calls = []

    def iter_events(self, input_path: Path, output_path: Path):
        self.calls.append((input_path, output_path))
        for event in self.events:
            if isinstance(event, EncodeEnded):
                output_path.write_bytes(b"\x00" * self.output_bytes)
            yield event

@pytest.fixture
def fake_ffmpeg():
    return FakeFFmpegAdapter
