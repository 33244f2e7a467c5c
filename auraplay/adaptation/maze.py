"""
Game B: Maze Stillness.

Adaptations:
    - Jitter -> path width
    - Tap duration -> stop signal duration (impulsive tappers get shorter freezes)
    - Pressure -> tremor tolerance (high muscle tone)
"""

from __future__ import annotations

from typing import Optional

from config import thresholds as t
from auraplay.adaptation.adaptation_rules import apply_rule
from auraplay.adaptation.game_settings import MazeSettings
from auraplay.observability import EventSink
from auraplay.profile.profile_models import CalibrationProfile

GAME = "maze"


def maze_settings(
    profile: CalibrationProfile,
    sink: Optional[EventSink] = None,
) -> MazeSettings:
    settings = MazeSettings()
    jitter = profile.avg_jitter_px
    tap = profile.avg_tap_duration_ms
    pressure = profile.avg_pressure

    if jitter > t.MAZE_JITTER_THRESHOLD:
        apply_rule(
            settings,
            {"path_width": settings.path_width + jitter * t.MAZE_JITTER_WIDENING},
            game=GAME, rule="jitter_path_width", sink=sink,
            inputs={"jitter": jitter},
            message="Jitter detected ({jitter}px). Maze path widened to {path_width}px",
        )

    if tap < t.IMPULSIVE_TAP_MS:
        apply_rule(
            settings, {"stop_signal_duration": t.MAZE_SHORT_STOP_MS},
            game=GAME, rule="tap_stop_signal", sink=sink,
            inputs={"tap": tap},
            message="Impulsive tapping detected ({tap}ms). Stop duration reduced to {stop_signal_duration}ms",
        )
    elif tap > t.DELIBERATE_TAP_MS:
        apply_rule(
            settings, {"stop_signal_duration": t.MAZE_LONG_STOP_MS},
            game=GAME, rule="tap_stop_signal", sink=sink,
            inputs={"tap": tap},
            message="Deliberate tapping ({tap}ms). Stop duration extended to {stop_signal_duration}ms",
        )

    if pressure > t.MAZE_HIGH_PRESSURE:
        apply_rule(
            settings,
            {"tremor_tolerance": settings.tremor_tolerance + t.MAZE_TOLERANCE_BONUS},
            game=GAME, rule="pressure_tremor_tolerance", sink=sink,
            inputs={"pressure": pressure},
            message="High pressure detected ({pressure}). Tremor tolerance increased to {tremor_tolerance}px",
        )

    return settings
