import pytest
from unittest.mock import patch
from typer.testing import CliRunner
from vidshrink.main import app
from vidshrink.domain.events import EncodeStarted, EncodeProgress, EncodeError, EncodeEnded
from vidshrink.infrastructure.ffmpeg import FFmpegAdapter

runner = CliRunner()

@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # Keeps a repository conf/vidshrink.yaml out of the run
    monkeypatch.chdir(tmp_path)

@pytest.fixture
def ffmpeg_present():
    with patch("shutil.which", return_value="/usr/bin/ffmpeg"):
        yield

def _replay(events, output_bytes=512):
    def iter_events(self, input_path, output_path):
        for event in events:
            if isinstance(event, EncodeEnded):
                output_path.write_bytes(b"\x00" * output_bytes)
            yield event
    return patch.object(FFmpegAdapter, "iter_events", iter_events)

SUCCESS = [EncodeStarted(total_duration_seconds=10), EncodeProgress(elapsed_seconds=5), EncodeEnded()]

def test_missing_ffmpeg_exits_2(video_dir):
    with patch("shutil.which", return_value=None):
        result = runner.invoke(app, [str(video_dir)])
    assert result.exit_code == 2
    assert "not installed" in result.output

def test_no_videos_exits_3(tmp_path, ffmpeg_present):
    empty = tmp_path / "empty"
    empty.mkdir()
    result = runner.invoke(app, [str(empty)])
    assert result.exit_code == 3
    assert "No video files found" in result.output

def test_non_interactive_success(video_dir, ffmpeg_present):
    with _replay(SUCCESS):
        result = runner.invoke(app, [str(video_dir), "--file", "movie.mov", "--suffix", "_small"])

    assert result.exit_code == 0, result.output
    assert (video_dir / "movie_small.mp4").exists()
    assert "movie_small.mp4" in result.output
    assert "Reduction percentage: 75.00%" in result.output

def test_interactive_prompts(video_dir, ffmpeg_present):
    # Files are listed sorted: clip.mkv, holiday.mp4, movie.mov, old.avi
    with _replay(SUCCESS):
        result = runner.invoke(app, [str(video_dir)], input="2\n_x\n")

    assert result.exit_code == 0, result.output
    assert (video_dir / "holiday_x.mp4").exists()

def test_interactive_default_suffix(video_dir, ffmpeg_present):
    with _replay(SUCCESS):
        result = runner.invoke(app, [str(video_dir)], input="clip.mkv\n\n")

    assert result.exit_code == 0, result.output
    assert (video_dir / "clip_compressed.mp4").exists()

def test_encode_failure_exits_4(video_dir, ffmpeg_present):
    with _replay([EncodeStarted(total_duration_seconds=10), EncodeError(message="ffmpeg exited with code 1: bad input")]):
        result = runner.invoke(app, [str(video_dir), "-f", "old.avi", "-s", "_c"])

    assert result.exit_code == 4
    assert "bad input" in result.output

def test_unknown_file_option_exits_3(video_dir, ffmpeg_present):
    result = runner.invoke(app, [str(video_dir), "--file", "notes.txt", "--suffix", "_c"])
    assert result.exit_code == 3

def test_missing_config_exits_6(video_dir, tmp_path):
    result = runner.invoke(app, [str(video_dir), "--config", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 6

def test_config_changes_extensions(video_dir, vidshrink_yaml, ffmpeg_present):
    with _replay(SUCCESS):
        result = runner.invoke(
            app, [str(video_dir), "--config", str(vidshrink_yaml), "--file", "old.avi", "--suffix", "_c"]
        )
    # avi is not in the configured extensions
    assert result.exit_code == 3

def test_missing_output_after_success_exits_5(video_dir, ffmpeg_present):
    def iter_events(self, input_path, output_path):
        yield EncodeStarted(total_duration_seconds=10)
        yield EncodeEnded()

    with patch.object(FFmpegAdapter, "iter_events", iter_events):
        result = runner.invoke(app, [str(video_dir), "-f", "movie.mov", "-s", "_c"])

    assert result.exit_code == 5
    assert "Cannot read file sizes" in result.output
    assert "Reduction percentage" not in result.output

def test_ctrl_c_during_encode_exits_130(video_dir, ffmpeg_present):
    def iter_events(self, input_path, output_path):
        yield EncodeStarted(total_duration_seconds=10)
        raise KeyboardInterrupt

    with patch.object(FFmpegAdapter, "iter_events", iter_events):
        result = runner.invoke(app, [str(video_dir), "-f", "movie.mov", "-s", "_c"])

    assert result.exit_code == 130
    assert "Interrupted by user" in result.output
