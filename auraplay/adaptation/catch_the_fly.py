"""
Game D: Catch the Fly.

Adaptations:
    - Gaze accuracy -> assist radius ("magnet" around the fly)
    - Latency / visual processing speed -> fly speed, size and pattern.
      Slow branch is checked first; first match wins.
    - Accurate gaze + quick responses -> a second fly (independent of the above)
"""

from __future__ import annotations

from typing import Optional

from config import thresholds as t
from auraplay.adaptation.adaptation_rules import apply_rule
from auraplay.adaptation.game_settings import CatchTheFlySettings
from auraplay.observability import EventSink
from auraplay.profile.profile_models import CalibrationProfile

GAME = "catchFly"


def catch_the_fly_settings(
    profile: CalibrationProfile,
    sink: Optional[EventSink] = None,
) -> CatchTheFlySettings:
    settings = CatchTheFlySettings()
    gaze = profile.gaze_accuracy_px
    latency = profile.response_latency_ms
    speed = profile.visual_processing_speed

    if gaze > t.FLY_LOOSE_GAZE_PX:
        apply_rule(
            settings, {"gaze_assist_radius": gaze * t.FLY_ASSIST_SCALE},
            game=GAME, rule="gaze_assist_radius", sink=sink,
            inputs={"gaze": gaze},
            message="Low gaze accuracy ({gaze}px). Assist radius increased to {gaze_assist_radius:.1f}px",
        )
    elif gaze < t.FLY_TIGHT_GAZE_PX:
        apply_rule(
            settings, {"gaze_assist_radius": t.FLY_TIGHT_ASSIST_RADIUS},
            game=GAME, rule="gaze_assist_radius", sink=sink,
            inputs={"gaze": gaze},
            message="High gaze accuracy ({gaze}px). Assist radius reduced to {gaze_assist_radius}px",
        )

    if latency > t.FLY_SLOW_LATENCY_MS or speed == "Slow":
        apply_rule(
            settings,
            {"fly_speed": t.FLY_SLOW_SPEED, "fly_size": t.FLY_SLOW_SIZE,
             "fly_movement_pattern": "Predictable"},
            game=GAME, rule="visual_speed_flies", sink=sink,
            inputs={"latency": latency, "speed": speed},
            message="Slow visual processing. Flies larger ({fly_size}px) and slower ({fly_speed}px/frame)",
        )
    elif latency < t.FLY_FAST_LATENCY_MS or speed == "Fast":
        apply_rule(
            settings,
            {"fly_speed": t.FLY_FAST_SPEED, "fly_size": t.FLY_FAST_SIZE,
             "fly_movement_pattern": "Erratic"},
            game=GAME, rule="visual_speed_flies", sink=sink,
            inputs={"latency": latency, "speed": speed},
            message="Fast visual processing. Flies smaller ({fly_size}px) and erratic",
        )

    if gaze < t.FLY_SKILLED_GAZE_PX and latency < t.FLY_SKILLED_LATENCY_MS:
        apply_rule(
            settings, {"multiply_flies": t.FLY_SKILLED_COUNT},
            game=GAME, rule="skilled_multiple_flies", sink=sink,
            inputs={"gaze": gaze, "latency": latency},
            message="High skill detected. Multiple flies enabled ({multiply_flies})",
        )

    return settings
