"""
Game C: Fruit Ninja.

Adaptations:
    - Response latency -> gravity and spawn rate
    - Inhibition errors -> bomb distinctness and probability
    - Tap duration -> combo window
"""

from __future__ import annotations

from typing import Optional

from config import thresholds as t
from auraplay.adaptation.adaptation_rules import apply_rule
from auraplay.adaptation.game_settings import FruitNinjaSettings
from auraplay.observability import EventSink
from auraplay.profile.profile_models import CalibrationProfile

GAME = "fruitNinja"


def fruit_ninja_settings(
    profile: CalibrationProfile,
    sink: Optional[EventSink] = None,
) -> FruitNinjaSettings:
    settings = FruitNinjaSettings()
    latency = profile.response_latency_ms
    errors = profile.inhibition_errors
    tap = profile.avg_tap_duration_ms

    if latency > t.FRUIT_SLOW_LATENCY_MS:
        apply_rule(
            settings,
            {"gravity": t.FRUIT_SLOW_GRAVITY, "spawn_rate": t.FRUIT_SLOW_SPAWN_MS},
            game=GAME, rule="latency_gravity", sink=sink,
            inputs={"latency": latency},
            message="Slow reaction time ({latency}ms). Gravity reduced, spawn rate slowed",
        )
    elif latency < t.FRUIT_FAST_LATENCY_MS:
        apply_rule(
            settings,
            {"gravity": t.FRUIT_FAST_GRAVITY, "spawn_rate": t.FRUIT_FAST_SPAWN_MS},
            game=GAME, rule="latency_gravity", sink=sink,
            inputs={"latency": latency},
            message="Fast reaction time ({latency}ms). Gravity raised, spawn rate quickened",
        )

    if errors > t.FRUIT_HIGH_ERRORS:
        apply_rule(
            settings,
            {"bomb_visual_distinctness": t.FRUIT_DISTINCT_BOMBS,
             "bomb_probability": t.FRUIT_FEWER_BOMBS},
            game=GAME, rule="errors_bombs", sink=sink,
            inputs={"errors": errors},
            message="High inhibition errors ({errors}). Bombs more distinct, probability reduced",
        )
    elif errors == 0:
        apply_rule(
            settings, {"bomb_probability": t.FRUIT_MORE_BOMBS},
            game=GAME, rule="errors_bombs", sink=sink,
            inputs={"errors": errors},
            message="No inhibition errors. Bomb probability raised to {bomb_probability}",
        )

    if tap < t.IMPULSIVE_TAP_MS:
        apply_rule(
            settings, {"combo_window_ms": t.FRUIT_SHORT_COMBO_MS},
            game=GAME, rule="tap_combo_window", sink=sink,
            inputs={"tap": tap},
            message="Impulsive tapping ({tap}ms). Combo window shortened to {combo_window_ms}ms",
        )
    elif tap > t.DELIBERATE_TAP_MS:
        apply_rule(
            settings, {"combo_window_ms": t.FRUIT_LONG_COMBO_MS},
            game=GAME, rule="tap_combo_window", sink=sink,
            inputs={"tap": tap},
            message="Deliberate tapping ({tap}ms). Combo window widened to {combo_window_ms}ms",
        )

    return settings
