from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

from config import thresholds

VisualSpeed = Literal["Slow", "Medium", "Fast"]

class CalibrationProfile(BaseModel):
    """Per-user calibration baseline. Read-only once built."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    avg_tap_duration_ms: float = Field(thresholds.DEFAULT_TAP_DURATION_MS, alias="avgTapDurationMs")
    avg_jitter_px: float = Field(thresholds.DEFAULT_JITTER_PX, alias="avgJitterPx")
    avg_pressure: float = Field(thresholds.DEFAULT_PRESSURE, alias="avgPressure")
    response_latency_ms: float = Field(thresholds.DEFAULT_RESPONSE_LATENCY_MS, alias="responseLatencyMs")
    inhibition_errors: int = Field(thresholds.DEFAULT_INHIBITION_ERRORS, alias="inhibitionErrors")
    gaze_accuracy_px: float = Field(thresholds.DEFAULT_GAZE_ACCURACY_PX, alias="gazeAccuracyPx")
    visual_processing_speed: VisualSpeed = Field(thresholds.DEFAULT_VISUAL_SPEED, alias="visualProcessingSpeed")

    def to_payload(self) -> Dict[str, Any]:
        """camelCase JSON-ready dict, the persisted form."""
        return self.model_dump(by_alias=True)

# field name -> storage name
PROFILE_FIELD_ALIASES: Dict[str, str] = {
    name: info.alias for name, info in CalibrationProfile.model_fields.items()
}

# transient calibration result name -> profile field name
CALIBRATION_FIELD_MAP: Dict[str, str] = {
    "avgTapDuration": "avg_tap_duration_ms",
    "avgJitter": "avg_jitter_px",
    "avgPressure": "avg_pressure",
    "avgResponseTime": "response_latency_ms",
    "inhibitionErrors": "inhibition_errors",
    "gazeAccuracy": "gaze_accuracy_px",
    "visualProcessingSpeed": "visual_processing_speed",
}
