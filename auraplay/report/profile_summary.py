from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from config import thresholds as t
from auraplay.profile.profile_models import CalibrationProfile


def motor_stability(jitter: float) -> str:
    if jitter < t.MOTOR_EXCELLENT_JITTER:
        return "Excellent"
    if jitter < t.MOTOR_GOOD_JITTER:
        return "Good"
    return "Needs Support"


def response_speed(latency: float) -> str:
    if latency < t.RESPONSE_FAST_MS:
        return "Fast"
    if latency < t.RESPONSE_AVERAGE_MS:
        return "Average"
    return "Slow"


def impulse_control(errors: int) -> str:
    if errors == 0:
        return "Excellent"
    if errors < t.IMPULSE_GOOD_ERRORS:
        return "Good"
    return "Developing"


def visual_tracking(gaze: float) -> str:
    if gaze < t.VISUAL_EXCELLENT_GAZE:
        return "Excellent"
    if gaze < t.VISUAL_GOOD_GAZE:
        return "Good"
    return "Needs Support"


@dataclass
class ProfileSummary:
    """Qualitative labels for the dashboard, plus the raw profile."""
    motor_stability: str
    response_speed: str
    impulse_control: str
    visual_tracking: str
    raw_data: CalibrationProfile

    def labels(self) -> Dict[str, str]:
        return {
            "motorStability": self.motor_stability,
            "responseSpeed": self.response_speed,
            "impulseControl": self.impulse_control,
            "visualTracking": self.visual_tracking,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {**self.labels(), "rawData": self.raw_data.to_payload()}


def summarize_profile(profile: CalibrationProfile) -> ProfileSummary:
    return ProfileSummary(
        motor_stability=motor_stability(profile.avg_jitter_px),
        response_speed=response_speed(profile.response_latency_ms),
        impulse_control=impulse_control(profile.inhibition_errors),
        visual_tracking=visual_tracking(profile.gaze_accuracy_px),
        raw_data=profile,
    )
