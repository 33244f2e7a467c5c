from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal

from config import thresholds

DistractionLevel = Literal["None", "Low", "Medium", "High"]
MazeComplexity = Literal["Simple", "Medium", "Complex"]
FlyMovementPattern = Literal["Smooth", "Erratic", "Predictable"]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class _Settings:
    def to_dict(self) -> Dict[str, Any]:
        """camelCase keys, as the game pages read them."""
        return {_camel(k): v for k, v in asdict(self).items()}


@dataclass
class WaterParkSettings(_Settings):
    """Game A: aiming and sustained attention."""
    target_size: float = thresholds.WATER_PARK_TARGET_SIZE                    # radius, px
    water_stream_speed: float = thresholds.WATER_PARK_STREAM_SPEED            # projectile speed
    target_movement_speed: float = thresholds.WATER_PARK_TARGET_MOVEMENT_SPEED
    distraction_level: DistractionLevel = thresholds.WATER_PARK_DISTRACTION
    game_speed: float = thresholds.WATER_PARK_GAME_SPEED                      # overall multiplier


@dataclass
class MazeSettings(_Settings):
    """Game B: motor inhibition and steadiness."""
    path_width: float = thresholds.MAZE_PATH_WIDTH                 # corridor width, px
    tremor_tolerance: float = thresholds.MAZE_TREMOR_TOLERANCE     # allowed drift during STOP, px
    stop_signal_duration: int = thresholds.MAZE_STOP_SIGNAL_MS     # freeze length, ms
    maze_complexity: MazeComplexity = thresholds.MAZE_COMPLEXITY


@dataclass
class FruitNinjaSettings(_Settings):
    """Game C: impulse control (go/no-go) and reaction time."""
    gravity: float = thresholds.FRUIT_GRAVITY
    bomb_probability: float = thresholds.FRUIT_BOMB_PROBABILITY
    bomb_visual_distinctness: float = thresholds.FRUIT_BOMB_DISTINCTNESS
    combo_window_ms: int = thresholds.FRUIT_COMBO_WINDOW_MS
    spawn_rate: int = thresholds.FRUIT_SPAWN_RATE_MS


@dataclass
class CatchTheFlySettings(_Settings):
    """Game D: eye tracking and visual attention."""
    fly_size: float = thresholds.FLY_SIZE
    fly_speed: float = thresholds.FLY_SPEED                        # px per frame
    gaze_assist_radius: float = thresholds.FLY_GAZE_ASSIST_RADIUS  # "magnet" zone, px
    fly_movement_pattern: FlyMovementPattern = thresholds.FLY_PATTERN
    multiply_flies: int = thresholds.FLY_COUNT
