"""Settings value object with validation."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ...config import CROPPER_DEFAULTS, OutputFormat


class Settings(BaseModel):
    """Immutable settings for one cropping session."""
    
    model_config = ConfigDict(frozen=True)
    
    # Preprocessing
    blur: int = Field(default=CROPPER_DEFAULTS.blur, ge=1)
    thresh: int = Field(default=CROPPER_DEFAULTS.thresh, ge=0, le=255)
    max_val: int = Field(default=CROPPER_DEFAULTS.max_val, ge=0, le=255)
    
    # Region filtering
    min_area_ratio: float = Field(default=CROPPER_DEFAULTS.min_area_ratio, gt=0.0, lt=1.0)
    
    # Output
    output_format: OutputFormat = OutputFormat.PNG
    jpeg_quality: int = Field(default=CROPPER_DEFAULTS.jpeg_quality, ge=1, le=100)
    write_output: bool = False
    input_dir: Path | None = None
    output_dir: Path | None = None
    
    @field_validator('blur')
    @classmethod
    def validate_blur(cls, v: int) -> int:
        """Median blur needs an odd kernel size."""
        if v % 2 == 0:
            raise ValueError(f"blur must be odd, got {v}")
        return v
    
    @model_validator(mode='after')
    def validate_output(self) -> Settings:
        if self.write_output and self.output_dir is None:
            raise ValueError("output_dir is required when write_output is enabled")
        return self


__all__ = ['Settings', 'OutputFormat']
