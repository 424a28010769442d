from enum import Enum
from pathlib import Path
from pydantic import BaseModel, ConfigDict

class EncodeState(str, Enum):
    IDLE = "IDLE"
    STARTING = "STARTING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"

class VideoFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path

class EncodeRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_suffix: str

class EncodeProgressEvent(BaseModel):
    total_duration_seconds: int
    elapsed_seconds: int

class SizeStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_size_mb: float
    output_size_mb: float
    reduction_percent: float

class CompressionResult(BaseModel):
    """Terminal record of a successful encode."""
    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_path: Path
    input_size_mb: float
    output_size_mb: float
    reduction_percent: float
