import json

import pytest
from fastapi.testclient import TestClient

from auraplay.engine import (
    AdaptationEngine,
    get_adaptation_engine,
    get_profile_store,
    reset_adaptation_engine,
)
from auraplay.main import app
from auraplay.profile import InMemoryStore
from config.settings import settings


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store):
    engine = AdaptationEngine({"avgTapDurationMs": 50})
    app.dependency_overrides[get_adaptation_engine] = lambda: engine
    app.dependency_overrides[get_profile_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
    reset_adaptation_engine()


def test_root_and_health(client):
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/").json()["games"] == ["waterPark", "maze", "fruitNinja", "catchFly"]


def test_get_profile(client):
    body = client.get("/profile").json()
    assert body["avgTapDurationMs"] == 50
    assert body["visualProcessingSpeed"] == "Medium"


def test_settings_endpoint(client):
    body = client.get("/settings/maze").json()
    assert body["game"] == "maze"
    assert body["settings"]["stopSignalDuration"] == 1500
    assert "events" not in body


def test_settings_trace(client):
    body = client.get("/settings/fruitNinja", params={"trace": "true"}).json()
    assert body["settings"]["comboWindowMs"] == 200
    assert [e["rule"] for e in body["events"]] == ["tap_combo_window"]


def test_unknown_game_is_404(client):
    assert client.get("/settings/pong").status_code == 404


def test_report_endpoint(client):
    body = client.get("/report").json()
    assert body["profileSummary"]["motorStability"] == "Good"
    assert body["gameSettings"]["fruitNinja"]["comboWindowMs"] == 200
    assert body["timestamp"].endswith("Z")


def test_put_profile_saves_and_replaces(client, store):
    resp = client.put("/profile", json={"avgJitterPx": 20, "gazeAccuracyPx": 50})
    body = resp.json()
    assert resp.status_code == 200
    assert body["saved"] is True
    assert body["profile"]["avgJitterPx"] == 20
    assert body["profile"]["avgTapDurationMs"] == 150
    stored = json.loads(store.get(settings.profile_storage_key))
    assert stored["gazeAccuracyPx"] == 50
