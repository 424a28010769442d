import logging
from pathlib import Path
from vidshrink.config.models import AppConfig
from vidshrink.infrastructure.event_bus import EventBus
from vidshrink.infrastructure.ffmpeg import FFmpegAdapter
from vidshrink.domain.errors import EncodeFailure
from vidshrink.domain.models import CompressionResult, EncodeProgressEvent, EncodeRequest, EncodeState
from vidshrink.domain.events import (
    EncodeStarted, EncodeProgress, EncodeError, EncodeEnded,
    JobStarted, JobProgressUpdated, JobCompleted, JobFailed
)
from vidshrink.pipeline.naming import build_output_name
from vidshrink.pipeline.stats import compute_stats

class EncodeOrchestrator:
    """Drives a single ffmpeg run from spawn to CompressionResult."""

    def __init__(self, config: AppConfig, event_bus: EventBus, ffmpeg_adapter: FFmpegAdapter):
        self.config = config
        self.event_bus = event_bus
        self.ffmpeg_adapter = ffmpeg_adapter
        self.state = EncodeState.IDLE
        self.logger = logging.getLogger(__name__)

    def output_path_for(self, request: EncodeRequest) -> Path:
        name = build_output_name(
            request.input_path.name,
            request.output_suffix,
            self.config.general.output_extension,
        )
        return request.input_path.with_name(name)

    def encode(self, request: EncodeRequest) -> CompressionResult:
        """Blocks until ffmpeg ends; raises EncodeFailure or StatsIOFailure."""
        output_path = self.output_path_for(request)
        self.logger.info(f"Encoding {request.input_path} -> {output_path}")

        self.state = EncodeState.STARTING
        self.event_bus.publish(JobStarted(request=request, output_path=output_path))

        total_seconds = 0
        for event in self.ffmpeg_adapter.iter_events(request.input_path, output_path):
            if isinstance(event, EncodeStarted):
                self.state = EncodeState.RUNNING
                total_seconds = event.total_duration_seconds
                self.logger.debug(f"Source duration: {total_seconds}")
                self._publish_progress(request, output_path, total_seconds, 0)
            elif isinstance(event, EncodeProgress):
                self.state = EncodeState.RUNNING
                self._publish_progress(request, output_path, total_seconds, event.elapsed_seconds)
            elif isinstance(event, EncodeError):
                self._fail(request, output_path, event.message)
            elif isinstance(event, EncodeEnded):
                return self._complete(request, output_path)

        self._fail(request, output_path, "ffmpeg output ended without a completion status")

    def _publish_progress(self, request: EncodeRequest, output_path: Path, total: int, elapsed: int):
        progress = EncodeProgressEvent(total_duration_seconds=total, elapsed_seconds=elapsed)
        self.event_bus.publish(JobProgressUpdated(request=request, output_path=output_path, progress=progress))

    def _fail(self, request: EncodeRequest, output_path: Path, message: str):
        self.state = EncodeState.FAILED
        self.logger.error(f"Encoding {request.input_path} failed: {message}")
        self.event_bus.publish(JobFailed(request=request, output_path=output_path, error_message=message))

        if self.config.general.cleanup_on_failure and output_path.exists():
            output_path.unlink()
            self.logger.info(f"Removed partial output {output_path}")

        raise EncodeFailure(message)

    def _complete(self, request: EncodeRequest, output_path: Path) -> CompressionResult:
        self.state = EncodeState.COMPLETED
        self.event_bus.publish(JobCompleted(request=request, output_path=output_path))

        # ffmpeg has exited, so both sizes are final
        stats = compute_stats(request.input_path, output_path)
        self.logger.info(
            f"Reduced {request.input_path.name} from {stats.input_size_mb:.2f}MB "
            f"to {stats.output_size_mb:.2f}MB ({stats.reduction_percent:.2f}%)"
        )
        return CompressionResult(
            input_path=request.input_path,
            output_path=output_path,
            input_size_mb=stats.input_size_mb,
            output_size_mb=stats.output_size_mb,
            reduction_percent=stats.reduction_percent,
        )
