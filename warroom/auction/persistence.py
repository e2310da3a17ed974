"""Key-value persistence for the auction roster."""

import json
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, NamedTuple, Optional, Sequence

from ..models.squad import RosterEntry


logger = logging.getLogger(__name__)

# Default storage directory
STORAGE_DIR = Path.home() / ".warroom"

# Key the roster is saved under
ROSTER_KEY = "iplSquad"

ROSTER_FORMAT_VERSION = 1


class StorageError(Exception):
    """Raised when the store cannot read or write a key."""

    pass


class SavedPick(NamedTuple):
    """A roster entry as stored: player ID and price at purchase."""

    id: str
    final_value: Optional[float] = None


class KeyValueStore(ABC):
    """Minimal load/save store the roster is persisted through."""

    @abstractmethod
    def load(self, key: str) -> Optional[str]:
        """
        Load the serialized value for a key.

        Returns:
            The stored string, or None if the key has never been saved.
        """
        pass

    @abstractmethod
    def save(self, key: str, value: str) -> None:
        """Store a serialized value under a key."""
        pass


class MemoryStore(KeyValueStore):
    """Store that keeps values in a dict for the life of the process."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """
    Store that writes one JSON file per key.

    Each file wraps the value with the key and a timestamp so stray files
    in the directory are never mistaken for saved rosters.
    """

    def __init__(self, storage_dir: Optional[Path] = None) -> None:
        """
        Initialize the store.

        Args:
            storage_dir: Directory for stored files.
        """
        self.storage_dir = storage_dir or STORAGE_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        """Get the file path for a key."""
        safe_key = re.sub(r"[^A-Za-z0-9_.-]", "_", key)
        return self.storage_dir / f"{safe_key}.json"

    def load(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                entry = json.load(f)
            return entry["value"]
        except (OSError, json.JSONDecodeError, KeyError, TypeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def save(self, key: str, value: str) -> None:
        entry = {
            "key": key,
            "timestamp": datetime.now().isoformat(),
            "value": value,
        }
        path = self._path(key)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(entry, f)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e


def serialize_roster(roster: Sequence[RosterEntry]) -> str:
    """
    Serialize a roster snapshot.

    Only player identities and the valuation shown at purchase time are
    stored. The valuation is recomputed from the player feed on load and
    the stored price only flags drift.
    """
    payload: dict[str, Any] = {
        "version": ROSTER_FORMAT_VERSION,
        "players": [
            {"id": entry.id, "final_value": entry.final_value}
            for entry in roster
        ],
    }
    return json.dumps(payload)


def deserialize_roster(data: str) -> list[SavedPick]:
    """
    Read the ordered picks from a serialized roster.

    Payloads without a stored price load with final_value None.

    Raises:
        StorageError: If the payload is not a serialized roster.
    """
    try:
        payload = json.loads(data)
        picks = []
        for item in payload["players"]:
            price = item.get("final_value")
            picks.append(SavedPick(str(item["id"]), float(price) if price is not None else None))
        return picks
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise StorageError(f"Malformed roster payload: {e}") from e
