"""
Profile Module.

Calibration profile model, key-value storage and profile resolution.
"""

from auraplay.profile.profile_models import CalibrationProfile, VisualSpeed
from auraplay.profile.profile_loader import (
    default_profile,
    load_profile,
    profile_from_calibration,
    profile_from_payload,
    resolve_profile,
    save_profile,
)
from auraplay.profile.storage import (
    InMemoryStore,
    JsonFileStore,
    KeyValueStore,
    SqliteStore,
    StorageError,
    make_store,
)

__all__ = [
    "CalibrationProfile",
    "VisualSpeed",
    "default_profile",
    "load_profile",
    "profile_from_calibration",
    "profile_from_payload",
    "resolve_profile",
    "save_profile",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "SqliteStore",
    "StorageError",
    "make_store",
]
