import json

import pytest

from auraplay.observability import (
    AdaptationEvent,
    CollectingEventSink,
    ConsoleEventSink,
    JsonlEventSink,
    NullEventSink,
    make_event_sink,
)


def make_event():
    return AdaptationEvent(
        game="maze",
        rule="jitter_path_width",
        message="Jitter detected (9px). Maze path widened to 87px",
        changes={"path_width": (60, 87)},
        inputs={"jitter": 9},
    )


def test_event_to_dict():
    d = make_event().to_dict()
    assert d["changes"] == {"path_width": {"before": 60, "after": 87}}
    assert d["inputs"] == {"jitter": 9}
    assert d["timestamp"].endswith("+00:00")


def test_console_sink(capsys):
    ConsoleEventSink().emit(make_event())
    assert capsys.readouterr().out == "[Adaptive] Jitter detected (9px). Maze path widened to 87px\n"


def test_jsonl_sink_appends(tmp_path):
    sink = JsonlEventSink(str(tmp_path / "logs"))
    sink.emit(make_event())
    sink.emit(make_event())
    files = list((tmp_path / "logs").glob("adaptation_*.jsonl"))
    assert len(files) == 1
    lines = files[0].read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])["rule"] == "jitter_path_width"


def test_collecting_sink():
    sink = CollectingEventSink()
    sink.emit(make_event())
    assert len(sink.for_game("maze")) == 1
    assert sink.for_game("catchFly") == []
    assert sink.to_list()[0]["game"] == "maze"
    sink.clear()
    assert sink.events == []


def test_make_event_sink(tmp_path):
    assert isinstance(make_event_sink("none"), NullEventSink)
    assert isinstance(make_event_sink("Console"), ConsoleEventSink)
    assert isinstance(make_event_sink("jsonl", str(tmp_path)), JsonlEventSink)
    with pytest.raises(ValueError):
        make_event_sink("statsd")
