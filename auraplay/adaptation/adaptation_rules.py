from __future__ import annotations

from typing import Any, Dict, Optional

from auraplay.observability import NULL_SINK, AdaptationEvent, EventSink


def apply_rule(
    settings: Any,
    updates: Dict[str, Any],
    *,
    game: str,
    rule: str,
    message: str,
    inputs: Optional[Dict[str, Any]] = None,
    sink: Optional[EventSink] = None,
) -> None:
    """
    Set fields on a freshly built settings object and report the change.

    `message` is formatted with the after-values of the updated fields.
    """
    changes = {}
    for name, value in updates.items():
        changes[name] = (getattr(settings, name), value)
        setattr(settings, name, value)

    (sink or NULL_SINK).emit(AdaptationEvent(
        game=game,
        rule=rule,
        message=message.format(**{**(inputs or {}), **updates}),
        changes=changes,
        inputs=dict(inputs or {}),
    ))
