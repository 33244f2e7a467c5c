from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

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
from auraplay.observability import EventSink
from auraplay.profile.profile_models import CalibrationProfile
from auraplay.report.profile_summary import ProfileSummary, summarize_profile


def iso_timestamp(dt: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a trailing Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class AdaptationReport:
    profile_summary: ProfileSummary
    water_park: WaterParkSettings
    maze: MazeSettings
    fruit_ninja: FruitNinjaSettings
    catch_fly: CatchTheFlySettings
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profileSummary": self.profile_summary.to_dict(),
            "gameSettings": {
                "waterPark": self.water_park.to_dict(),
                "maze": self.maze.to_dict(),
                "fruitNinja": self.fruit_ninja.to_dict(),
                "catchFly": self.catch_fly.to_dict(),
            },
            "timestamp": iso_timestamp(self.created_at),
        }


def build_report(
    profile: CalibrationProfile,
    sink: Optional[EventSink] = None,
    now: Optional[datetime] = None,
) -> AdaptationReport:
    """Run every game's rule set once and bundle the results. Nothing is cached."""
    return AdaptationReport(
        profile_summary=summarize_profile(profile),
        water_park=water_park_settings(profile, sink),
        maze=maze_settings(profile, sink),
        fruit_ninja=fruit_ninja_settings(profile, sink),
        catch_fly=catch_the_fly_settings(profile, sink),
        created_at=now or datetime.now(timezone.utc),
    )
