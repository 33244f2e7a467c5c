"""
Adaptation Engine.

Session-level facade: holds one immutable CalibrationProfile and hands
out per-game settings, the profile summary and the adaptation report.

    Profile ──┬──> water park rules ──> WaterParkSettings
              ├──> maze rules ────────> MazeSettings
              ├──> fruit ninja rules ─> FruitNinjaSettings
              ├──> catch-the-fly rules> CatchTheFlySettings
              └──> summary ───────────> AdaptationReport (all of the above)

Recalibration replaces the profile (with_profile / reset), it is never
mutated in place.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from config.settings import settings as app_settings
from auraplay.adaptation import (
    GAME_RULES,
    CatchTheFlySettings,
    FruitNinjaSettings,
    MazeSettings,
    WaterParkSettings,
    catch_the_fly_settings,
    fruit_ninja_settings,
    maze_settings,
    water_park_settings,
)
from auraplay.observability import NULL_SINK, EventSink, make_event_sink
from auraplay.profile import (
    CalibrationProfile,
    KeyValueStore,
    load_profile,
    make_store,
    profile_from_payload,
    save_profile,
)
from auraplay.profile.profile_loader import ProfilePayload
from auraplay.report import AdaptationReport, ProfileSummary, build_report, summarize_profile


class AdaptationEngine:
    """Profile -> game settings for one session."""

    def __init__(
        self,
        profile: Optional[ProfilePayload] = None,
        sink: Optional[EventSink] = None,
    ):
        self.profile = profile_from_payload(profile) if profile is not None else CalibrationProfile()
        self.sink = sink or NULL_SINK

    # -------------------------------------------------------------------------
    # PROFILE LIFECYCLE
    # -------------------------------------------------------------------------

    @classmethod
    def load_from_storage(
        cls,
        store: Optional[KeyValueStore] = None,
        key: Optional[str] = None,
        transient_calibration: Optional[Mapping[str, Any]] = None,
        sink: Optional[EventSink] = None,
    ) -> "AdaptationEngine":
        return cls(load_profile(store, key, transient_calibration), sink)

    def save(self, store: Optional[KeyValueStore], key: Optional[str] = None) -> bool:
        return save_profile(store, self.profile, key)

    def with_profile(self, profile: ProfilePayload) -> "AdaptationEngine":
        return AdaptationEngine(profile, self.sink)

    # -------------------------------------------------------------------------
    # GAME SETTINGS
    # -------------------------------------------------------------------------

    def get_water_park_settings(self) -> WaterParkSettings:
        return water_park_settings(self.profile, self.sink)

    def get_maze_settings(self) -> MazeSettings:
        return maze_settings(self.profile, self.sink)

    def get_fruit_ninja_settings(self) -> FruitNinjaSettings:
        return fruit_ninja_settings(self.profile, self.sink)

    def get_catch_the_fly_settings(self) -> CatchTheFlySettings:
        return catch_the_fly_settings(self.profile, self.sink)

    def get_settings(self, game: str, sink: Optional[EventSink] = None):
        """Settings by game key (waterPark, maze, fruitNinja, catchFly). KeyError if unknown."""
        rules = GAME_RULES[game]
        return rules(self.profile, sink or self.sink)

    # -------------------------------------------------------------------------
    # SUMMARY & REPORT
    # -------------------------------------------------------------------------

    def get_profile_summary(self) -> ProfileSummary:
        return summarize_profile(self.profile)

    def generate_adaptation_report(
        self,
        now: Optional[datetime] = None,
        sink: Optional[EventSink] = None,
    ) -> AdaptationReport:
        return build_report(self.profile, sink or self.sink, now)


# =============================================================================
# SINGLETON
# =============================================================================

_store_instance: Optional[KeyValueStore] = None
_engine_instance: Optional[AdaptationEngine] = None


def get_profile_store() -> KeyValueStore:
    """Get or create the configured profile store."""
    global _store_instance
    if _store_instance is None:
        _store_instance = make_store(
            app_settings.storage_backend,
            sqlite_path=app_settings.sqlite_path,
            storage_dir=app_settings.storage_dir,
        )
    return _store_instance


def get_adaptation_engine() -> AdaptationEngine:
    """Get or create the session engine, loading the profile once."""
    global _engine_instance
    if _engine_instance is None:
        sink = make_event_sink(app_settings.event_sink, app_settings.event_log_dir)
        _engine_instance = AdaptationEngine.load_from_storage(get_profile_store(), sink=sink)
    return _engine_instance


def reset_adaptation_engine(engine: Optional[AdaptationEngine] = None) -> None:
    """Replace (or drop) the session engine, e.g. after recalibration."""
    global _engine_instance
    _engine_instance = engine


__all__ = [
    "AdaptationEngine",
    "get_adaptation_engine",
    "get_profile_store",
    "reset_adaptation_engine",
]
