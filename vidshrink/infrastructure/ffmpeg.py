import subprocess
import re
import logging
import shutil
from collections import deque
from pathlib import Path
from typing import Iterator, List, Optional, Union
from vidshrink.config.models import GeneralConfig
from vidshrink.domain.events import EncodeStarted, EncodeProgress, EncodeError, EncodeEnded

StatusEvent = Union[EncodeStarted, EncodeProgress, EncodeError, EncodeEnded]

DURATION_REGEX = re.compile(r"Duration:\s*([^,\s]+)")
TIME_REGEX = re.compile(r"\btime=\s*(\S+)")
LEADING_INT_REGEX = re.compile(r"^\s*([+-]?\d+)")
ERROR_TAIL_LINES = 10

def parse_timestamp(value: str, accurate: bool = False) -> Optional[int]:
    """Converts an ffmpeg HH:MM:SS.ss timestamp into an integer.

    The default drops the colons and reads the leading digits, so
    "00:01:30.50" becomes 130 rather than 90. This only matches real seconds
    below one minute. With accurate=True the fields are weighted properly.
    Returns None for values such as "N/A".
    """
    if accurate:
        parts = value.strip().split(":")
        try:
            seconds = 0.0
            for part in parts:
                seconds = seconds * 60 + float(part)
        except ValueError:
            return None
        return int(seconds)

    match = LEADING_INT_REGEX.match(value.replace(":", ""))
    if not match:
        return None
    return int(match.group(1))

class FFmpegAdapter:
    """Wrapper around ffmpeg that exposes its output as a stream of status events."""

    def __init__(self, config: GeneralConfig):
        self.config = config
        self.logger = logging.getLogger(__name__)

    def is_available(self) -> bool:
        """True when the ffmpeg binary resolves on PATH."""
        return shutil.which(self.config.ffmpeg_binary) is not None

    def _build_command(self, input_path: Path, output_path: Path) -> List[str]:
        """Constructs the ffmpeg command line arguments."""
        cmd = [
            self.config.ffmpeg_binary,
            "-y", # Overwrite output files
            "-i", str(input_path),
        ]
        cmd.extend(self.config.quality_options)
        cmd.append(str(output_path))
        return cmd

    def iter_events(self, input_path: Path, output_path: Path) -> Iterator[StatusEvent]:
        """Runs ffmpeg and yields parsed status events in emission order.

        The last event is always EncodeEnded or EncodeError.
        """
        cmd = self._build_command(input_path, output_path)
        self.logger.debug(f"FFMPEG_START: {' '.join(cmd)}")
        accurate = self.config.accurate_timestamps

        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                universal_newlines=True,
                bufsize=1
            )
        except OSError as e:
            yield EncodeError(message=f"Cannot start {self.config.ffmpeg_binary}: {e}")
            return

        # Universal newlines also split on the \r ffmpeg uses for stats lines
        tail = deque(maxlen=ERROR_TAIL_LINES)
        duration_seen = False
        try:
            for line in process.stdout:
                line = line.strip()
                if not line:
                    continue
                tail.append(line)

                if not duration_seen:
                    match = DURATION_REGEX.search(line)
                    if match:
                        duration_seen = True
                        total = parse_timestamp(match.group(1), accurate)
                        yield EncodeStarted(total_duration_seconds=total or 0)
                        continue

                match = TIME_REGEX.search(line)
                if match:
                    elapsed = parse_timestamp(match.group(1), accurate)
                    if elapsed is not None:
                        yield EncodeProgress(elapsed_seconds=elapsed)

            process.wait()
        finally:
            if process.poll() is None:
                process.kill()
                process.wait()

        if process.returncode != 0:
            detail = tail[-1] if tail else "no output"
            self.logger.debug("FFMPEG_OUTPUT:\n" + "\n".join(tail))
            yield EncodeError(message=f"ffmpeg exited with code {process.returncode}: {detail}")
        else:
            self.logger.debug(f"FFMPEG_END: {output_path} status=completed")
            yield EncodeEnded()
