"""Squad construction: roster store, persistence and engine."""

from .persistence import (
    ROSTER_KEY,
    STORAGE_DIR,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    SavedPick,
    StorageError,
    deserialize_roster,
    serialize_roster,
)
from .roster import RosterStore
from .engine import ActionResult, AuctionEngine

__all__ = [
    # Persistence
    "ROSTER_KEY",
    "STORAGE_DIR",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "SavedPick",
    "StorageError",
    "deserialize_roster",
    "serialize_roster",
    # Roster
    "RosterStore",
    # Engine
    "ActionResult",
    "AuctionEngine",
]
