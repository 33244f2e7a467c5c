"""
Game A: Water Park Focus Float.

Adaptations:
    - Jitter -> target size (shaky hands need larger targets)
    - Response latency -> target movement speed and game speed
    - Inhibition errors -> distraction level
"""

from __future__ import annotations

from typing import Optional

from config import thresholds as t
from auraplay.adaptation.adaptation_rules import apply_rule
from auraplay.adaptation.game_settings import WaterParkSettings
from auraplay.observability import EventSink
from auraplay.profile.profile_models import CalibrationProfile

GAME = "waterPark"


def water_park_settings(
    profile: CalibrationProfile,
    sink: Optional[EventSink] = None,
) -> WaterParkSettings:
    settings = WaterParkSettings()
    jitter = profile.avg_jitter_px
    latency = profile.response_latency_ms
    errors = profile.inhibition_errors

    if jitter > t.WATER_PARK_JITTER_THRESHOLD:
        apply_rule(
            settings,
            {"target_size": settings.target_size
             + (jitter - t.WATER_PARK_JITTER_THRESHOLD) * t.WATER_PARK_JITTER_GROWTH},
            game=GAME, rule="jitter_target_size", sink=sink,
            inputs={"jitter": jitter},
            message="High jitter detected ({jitter}px). Target size increased to {target_size}px",
        )

    if latency > t.WATER_PARK_SLOW_LATENCY_MS:
        slowdown = min(t.WATER_PARK_MAX_SLOWDOWN, t.WATER_PARK_SLOW_LATENCY_MS / latency)
        apply_rule(
            settings,
            {"target_movement_speed": settings.target_movement_speed * slowdown,
             "game_speed": slowdown},
            game=GAME, rule="latency_slowdown", sink=sink,
            inputs={"latency": latency},
            message="Slow response time ({latency}ms). Game speed reduced to {game_speed:.2f}x",
        )

    if errors > t.WATER_PARK_HIGH_ERRORS:
        apply_rule(
            settings, {"distraction_level": "None"},
            game=GAME, rule="errors_distraction", sink=sink,
            inputs={"errors": errors},
            message="High inhibition errors ({errors}). Distractions removed",
        )
    elif errors > t.WATER_PARK_SOME_ERRORS:
        apply_rule(
            settings, {"distraction_level": "Low"},
            game=GAME, rule="errors_distraction", sink=sink,
            inputs={"errors": errors},
            message="Some inhibition errors ({errors}). Distractions kept low",
        )

    return settings
