from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

class GeneralConfig(BaseModel):
    extensions: List[str] = Field(default_factory=lambda: ["mp4", "mov", "avi", "mkv"])
    output_extension: str = "mp4"
    default_suffix: str = "_compressed"
    ffmpeg_binary: str = "ffmpeg"
    quality_options: List[str] = Field(default_factory=lambda: ["-q:v", "0"])
    accurate_timestamps: bool = False
    cleanup_on_failure: bool = False
    log_file: Optional[Path] = None
    debug: bool = False

    @field_validator('extensions')
    @classmethod
    def strip_leading_dots(cls, v: List[str]) -> List[str]:
        cleaned = [ext.lstrip(".") for ext in v]
        if not all(cleaned):
            raise ValueError("Extensions must not be empty.")
        return cleaned

    @field_validator('output_extension')
    @classmethod
    def validate_output_extension(cls, v: str) -> str:
        v = v.lstrip(".")
        if not v or "." in v:
            raise ValueError(f"Invalid output extension {v!r}.")
        return v

class AppConfig(BaseModel):
    general: GeneralConfig = Field(default_factory=GeneralConfig)
