from pathlib import Path
from pydantic import BaseModel
from .models import EncodeProgressEvent, EncodeRequest

class Event(BaseModel):
    """Base class for all domain events."""
    pass

# Status events parsed from the encoder output stream.

class EncodeStarted(Event):
    total_duration_seconds: int

class EncodeProgress(Event):
    elapsed_seconds: int

class EncodeError(Event):
    message: str

class EncodeEnded(Event):
    pass

# Events published on the bus for the progress display.

class JobEvent(Event):
    request: EncodeRequest
    output_path: Path

class JobStarted(JobEvent):
    pass

class JobProgressUpdated(JobEvent):
    progress: EncodeProgressEvent

class JobCompleted(JobEvent):
    pass

class JobFailed(JobEvent):
    error_message: str
