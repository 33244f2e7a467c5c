"""
Profile Loader.

Resolves the session's CalibrationProfile:
    1. explicit payload (if the caller has one)
    2. persisted profile under the fixed storage key
    3. transient calibration result from earlier in the session
    4. the default "typical" profile

Storage problems never propagate: reads fall back to defaults and
writes report False.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from config.settings import settings
from auraplay.profile.profile_models import (
    CALIBRATION_FIELD_MAP,
    PROFILE_FIELD_ALIASES,
    CalibrationProfile,
)
from auraplay.profile.storage import KeyValueStore

ProfilePayload = Union[CalibrationProfile, Mapping[str, Any]]


def default_profile() -> CalibrationProfile:
    return CalibrationProfile()


def _offending_fields(error: ValidationError) -> set[str]:
    bad = set()
    for err in error.errors():
        if not err.get("loc"):
            continue
        loc = str(err["loc"][0])
        for name, alias in PROFILE_FIELD_ALIASES.items():
            if loc in (name, alias):
                bad.update((name, alias))
    return bad


def profile_from_payload(payload: ProfilePayload) -> CalibrationProfile:
    """
    Build a profile from a raw payload (camelCase or snake_case keys).

    Missing, None or invalid fields fall back to their defaults one by one;
    the rest of the payload is kept.
    """
    if isinstance(payload, CalibrationProfile):
        return payload
    if not isinstance(payload, Mapping):
        raise TypeError(f"profile payload must be a mapping, got {type(payload).__name__}")

    data = {k: v for k, v in payload.items() if v is not None}
    try:
        return CalibrationProfile.model_validate(data)
    except ValidationError as e:
        bad = _offending_fields(e)
        print(f"[ProfileLoader] Invalid profile fields {sorted(bad)}, using defaults for them")
        data = {k: v for k, v in data.items() if k not in bad}
        return CalibrationProfile.model_validate(data)


def profile_from_calibration(result: Mapping[str, Any]) -> CalibrationProfile:
    """Map a transient calibration result (avgJitter, avgResponseTime, ...) onto a profile."""
    data = {
        field_name: result.get(source)
        for source, field_name in CALIBRATION_FIELD_MAP.items()
    }
    return profile_from_payload(data)


def _read_persisted(store: KeyValueStore, key: str) -> Optional[CalibrationProfile]:
    try:
        raw = store.get(key)
        if not raw:
            return None
        parsed = json.loads(raw)
        if not isinstance(parsed, dict):
            print(f"[ProfileLoader] Stored profile under '{key}' is not an object, ignoring")
            return None
        return profile_from_payload(parsed)
    except Exception as e:
        print(f"[ProfileLoader] Could not read stored profile: {e}")
        return None


def load_profile(
    store: Optional[KeyValueStore] = None,
    key: Optional[str] = None,
    transient_calibration: Optional[Mapping[str, Any]] = None,
) -> CalibrationProfile:
    """Persisted profile, else transient calibration, else defaults. Never raises."""
    key = key or settings.profile_storage_key

    if store is not None:
        profile = _read_persisted(store, key)
        if profile is not None:
            return profile

    if transient_calibration:
        try:
            return profile_from_calibration(transient_calibration)
        except Exception as e:
            print(f"[ProfileLoader] Could not use calibration result: {e}")

    return default_profile()


def save_profile(
    store: Optional[KeyValueStore],
    profile: CalibrationProfile,
    key: Optional[str] = None,
) -> bool:
    """Persist the profile as JSON. Failures are printed and reported as False."""
    if store is None:
        return False
    key = key or settings.profile_storage_key
    try:
        return bool(store.put(key, json.dumps(profile.to_payload())))
    except Exception as e:
        print(f"[ProfileLoader] Could not save profile: {e}")
        return False


def resolve_profile(
    payload: Optional[ProfilePayload] = None,
    store: Optional[KeyValueStore] = None,
    key: Optional[str] = None,
    transient_calibration: Optional[Mapping[str, Any]] = None,
) -> CalibrationProfile:
    """An explicit payload wins; otherwise fall through to load_profile."""
    if payload is not None:
        return profile_from_payload(payload)
    return load_profile(store, key, transient_calibration)
