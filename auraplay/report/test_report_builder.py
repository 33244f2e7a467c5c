from datetime import datetime, timedelta, timezone

import pytest

from auraplay.observability import CollectingEventSink
from auraplay.profile import CalibrationProfile, default_profile
from auraplay.report import build_report, iso_timestamp, summarize_profile
from auraplay.report.profile_summary import (
    impulse_control,
    motor_stability,
    response_speed,
    visual_tracking,
)


def test_default_profile_summary():
    # jitter 8 and gaze 30 sit on the lower edge of the "Good" buckets
    assert summarize_profile(default_profile()).labels() == {
        "motorStability": "Good",
        "responseSpeed": "Average",
        "impulseControl": "Good",
        "visualTracking": "Good",
    }


def test_excellent_summary():
    p = CalibrationProfile(avg_jitter_px=5, response_latency_ms=300, inhibition_errors=0, gaze_accuracy_px=20)
    assert summarize_profile(p).labels() == {
        "motorStability": "Excellent",
        "responseSpeed": "Fast",
        "impulseControl": "Excellent",
        "visualTracking": "Excellent",
    }


@pytest.mark.parametrize("jitter,label", [(7.9, "Excellent"), (8, "Good"), (14, "Good"), (15, "Needs Support")])
def test_motor_stability_buckets(jitter, label):
    assert motor_stability(jitter) == label


@pytest.mark.parametrize("latency,label", [(349, "Fast"), (350, "Average"), (549, "Average"), (550, "Slow")])
def test_response_speed_buckets(latency, label):
    assert response_speed(latency) == label


@pytest.mark.parametrize("errors,label", [(0, "Excellent"), (1, "Good"), (2, "Developing"), (9, "Developing")])
def test_impulse_control_buckets(errors, label):
    assert impulse_control(errors) == label


@pytest.mark.parametrize("gaze,label", [(24, "Excellent"), (25, "Good"), (39, "Good"), (40, "Needs Support")])
def test_visual_tracking_buckets(gaze, label):
    assert visual_tracking(gaze) == label


def test_summary_keeps_raw_profile():
    p = CalibrationProfile(avg_jitter_px=16)
    d = summarize_profile(p).to_dict()
    assert d["motorStability"] == "Needs Support"
    assert d["rawData"] == p.to_payload()
    assert d["rawData"]["avgJitterPx"] == 16


def test_report_structure():
    now = datetime(2026, 3, 1, 9, 30, 15, 123456, tzinfo=timezone.utc)
    report = build_report(default_profile(), now=now).to_dict()
    assert set(report) == {"profileSummary", "gameSettings", "timestamp"}
    assert set(report["gameSettings"]) == {"waterPark", "maze", "fruitNinja", "catchFly"}
    assert report["gameSettings"]["maze"]["pathWidth"] == 84
    assert report["gameSettings"]["waterPark"]["targetSize"] == 50
    assert report["timestamp"] == "2026-03-01T09:30:15.123Z"


def test_report_is_built_fresh_each_time():
    sink = CollectingEventSink()
    p = CalibrationProfile(avg_jitter_px=12)
    first = build_report(p, sink)
    second = build_report(p, sink)
    assert first.maze == second.maze
    assert first.maze is not second.maze
    # the water park jitter rule fires once per build
    assert len([e for e in sink.events if e.rule == "jitter_target_size"]) == 2


def test_iso_timestamp_converts_to_utc():
    local = datetime(2026, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert iso_timestamp(local) == "2026-03-01T10:00:00.000Z"
    assert iso_timestamp(datetime(2026, 3, 1)) == "2026-03-01T00:00:00.000Z"
