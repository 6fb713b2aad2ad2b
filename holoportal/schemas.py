"""Pydantic schemas for the perception simulation recording API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RecordingStatus(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_recording: bool = Field(alias="recording")


class StopRecordingError(BaseModel):
    """Error document the stop endpoint returns in place of recording data."""

    reason: str = Field(alias="Reason")


class StartRecordingOptions(BaseModel):
    """Which data streams a new recording captures."""

    model_config = ConfigDict(frozen=True)

    record_head: bool = Field(default=True, description="Record head pose. Default: True.")
    record_hands: bool = Field(default=True, description="Record hand data. Default: True.")
    record_spatial_mapping: bool = Field(
        default=True, description="Record spatial mapping data. Default: True."
    )
    record_environment: bool = Field(
        default=True, description="Record environment data. Default: True."
    )

    def to_query(self, name: str) -> str:
        """Encode the start payload. ``name`` goes in as-is, without escaping."""
        flags = (
            ("head", self.record_head),
            ("hands", self.record_hands),
            ("spatialMapping", self.record_spatial_mapping),
            ("environment", self.record_environment),
        )
        parts = [f"{key}={1 if value else 0}" for key, value in flags]
        parts.append(f"name={name}")
        return "&".join(parts)
