import json
from datetime import datetime, timezone

import pytest

from auraplay import engine as engine_module
from auraplay.engine import AdaptationEngine, get_adaptation_engine, reset_adaptation_engine
from auraplay.observability import CollectingEventSink
from auraplay.profile import CalibrationProfile, InMemoryStore, default_profile
from config.settings import Settings, settings as app_settings

KEY = "auraCalibrationProfile"


@pytest.fixture
def fresh_singleton(monkeypatch):
    store = InMemoryStore()
    monkeypatch.setattr(engine_module, "_store_instance", store)
    monkeypatch.setattr(app_settings, "event_sink", "none")
    reset_adaptation_engine()
    yield store
    reset_adaptation_engine()


def test_engine_defaults_to_default_profile():
    assert AdaptationEngine().profile == default_profile()


def test_engine_accepts_raw_payload():
    engine = AdaptationEngine({"avgJitterPx": 11})
    assert engine.get_water_park_settings().target_size == 52


def test_default_profile_through_all_getters():
    engine = AdaptationEngine()
    assert engine.get_water_park_settings().to_dict() == {
        "targetSize": 50, "waterStreamSpeed": 10, "targetMovementSpeed": 2,
        "distractionLevel": "Low", "gameSpeed": 1.0,
    }
    assert engine.get_maze_settings().to_dict() == {
        "pathWidth": 84, "tremorTolerance": 5, "stopSignalDuration": 2000,
        "mazeComplexity": "Medium",
    }
    assert engine.get_fruit_ninja_settings().combo_window_ms == 300
    assert engine.get_catch_the_fly_settings().multiply_flies == 1


def test_getters_do_not_touch_profile():
    engine = AdaptationEngine({"avgJitterPx": 20, "responseLatencyMs": 900})
    before = engine.profile.model_copy()
    engine.generate_adaptation_report()
    engine.get_water_park_settings()
    assert engine.profile == before


def test_get_settings_by_key():
    engine = AdaptationEngine({"avgTapDurationMs": 50})
    assert engine.get_settings("maze").stop_signal_duration == 1500
    assert engine.get_settings("fruitNinja").combo_window_ms == 200
    with pytest.raises(KeyError):
        engine.get_settings("pong")


def test_engine_sink_receives_events():
    sink = CollectingEventSink()
    engine = AdaptationEngine({"gazeAccuracyPx": 45}, sink=sink)
    engine.get_catch_the_fly_settings()
    assert [e.rule for e in sink.events] == ["gaze_assist_radius"]


def test_report_from_engine():
    now = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    report = AdaptationEngine().generate_adaptation_report(now=now).to_dict()
    assert report["profileSummary"]["impulseControl"] == "Good"
    assert report["timestamp"] == "2026-01-02T03:04:05.000Z"


def test_load_and_save_roundtrip_through_store():
    store = InMemoryStore()
    engine = AdaptationEngine({"avgPressure": 0.8})
    assert engine.save(store, KEY) is True
    loaded = AdaptationEngine.load_from_storage(store, KEY)
    assert loaded.profile.avg_pressure == 0.8
    assert loaded.get_maze_settings().tremor_tolerance == 10


def test_load_from_storage_falls_back_to_calibration():
    engine = AdaptationEngine.load_from_storage(
        InMemoryStore(), KEY, transient_calibration={"avgResponseTime": 700}
    )
    assert engine.profile.response_latency_ms == 700
    assert engine.get_fruit_ninja_settings().gravity == 0.3


def test_with_profile_replaces_not_mutates():
    engine = AdaptationEngine()
    recalibrated = engine.with_profile({"avgJitterPx": 30})
    assert engine.profile.avg_jitter_px == 8
    assert recalibrated.profile.avg_jitter_px == 30
    assert recalibrated.sink is engine.sink


def test_singleton_loads_once(fresh_singleton):
    fresh_singleton.put(KEY, json.dumps({"inhibitionErrors": 5}))
    first = get_adaptation_engine()
    fresh_singleton.put(KEY, json.dumps({"inhibitionErrors": 0}))
    assert get_adaptation_engine() is first
    assert first.profile.inhibition_errors == 5


def test_settings_env_prefix(monkeypatch):
    monkeypatch.setenv("AURA_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("AURA_PROFILE_STORAGE_KEY", "otherKey")
    s = Settings()
    assert s.storage_backend == "memory"
    assert s.profile_storage_key == "otherKey"
    assert s.event_sink == "console"
