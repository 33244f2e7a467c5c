"""
Adaptation Module.

One rule set per game; each is a pure function of the calibration profile
returning a fresh settings object.
"""

from typing import Callable, Dict

from auraplay.adaptation.catch_the_fly import catch_the_fly_settings
from auraplay.adaptation.fruit_ninja import fruit_ninja_settings
from auraplay.adaptation.game_settings import (
    CatchTheFlySettings,
    FruitNinjaSettings,
    MazeSettings,
    WaterParkSettings,
)
from auraplay.adaptation.maze import maze_settings
from auraplay.adaptation.water_park import water_park_settings

# game key -> rule set
GAME_RULES: Dict[str, Callable] = {
    "waterPark": water_park_settings,
    "maze": maze_settings,
    "fruitNinja": fruit_ninja_settings,
    "catchFly": catch_the_fly_settings,
}

__all__ = [
    "GAME_RULES",
    "water_park_settings",
    "maze_settings",
    "fruit_ninja_settings",
    "catch_the_fly_settings",
    "WaterParkSettings",
    "MazeSettings",
    "FruitNinjaSettings",
    "CatchTheFlySettings",
]
