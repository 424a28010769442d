from vidshrink.infrastructure.event_bus import EventBus
from vidshrink.ui.spinner import ProgressSpinner
from vidshrink.ui.progress import format_label
from vidshrink.domain.events import JobStarted, JobProgressUpdated, JobCompleted, JobFailed

STARTING_TEXT = "Compressing video..."
COMPLETED_TEXT = "Compressing completed!"

class UIManager:
    """Subscribes to EventBus and drives the spinner."""

    def __init__(self, bus: EventBus, spinner: ProgressSpinner):
        self.bus = bus
        self.spinner = spinner
        self._setup_subscriptions()

    def _setup_subscriptions(self):
        self.bus.subscribe(JobStarted, self.on_job_started)
        self.bus.subscribe(JobProgressUpdated, self.on_job_progress)
        self.bus.subscribe(JobCompleted, self.on_job_completed)
        self.bus.subscribe(JobFailed, self.on_job_failed)

    def on_job_started(self, event: JobStarted):
        self.spinner.start(STARTING_TEXT)

    def on_job_progress(self, event: JobProgressUpdated):
        progress = event.progress
        self.spinner.update(format_label(progress.total_duration_seconds, progress.elapsed_seconds))

    def on_job_completed(self, event: JobCompleted):
        self.spinner.succeed(COMPLETED_TEXT)

    def on_job_failed(self, event: JobFailed):
        self.spinner.fail(event.error_message)
