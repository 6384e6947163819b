"""Date-keyed mood record store.

The whole store is one JSON document of the form
``{"version": "1.0", "moods": {"YYYY-MM-DD": {...}}}``. Every write
re-serializes the document to a sibling temp file and atomically replaces
the canonical file, so readers never observe a half-written document.

There is no cross-process locking: two processes writing the same file
race, and the last rename wins.
"""
import copy
import json
import logging
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .errors import InvalidInput, StorageFailure
from .validation import is_complete_record, is_date_key, validate_date_key

logger = logging.getLogger(__name__)

STORE_VERSION = "1.0"


def _empty_document() -> dict:
    return {"version": STORE_VERSION, "moods": {}}


class MoodStore:
    """
    Base store implementing get/put/delete/list over a whole-document
    read-modify-write cycle. Subclasses supply document I/O.
    """

    def __init__(self):
        self._lock = threading.Lock()

    # -- document I/O -----------------------------------------------------

    def _read_document(self) -> dict:
        raise NotImplementedError

    def _write_document(self, document: dict) -> None:
        raise NotImplementedError

    def _load(self) -> dict:
        document = self._read_document()
        if not isinstance(document, dict):
            raise StorageFailure("Mood store document is not a JSON object")
        moods = document.setdefault("moods", {})
        if not isinstance(moods, dict):
            raise StorageFailure("Mood store 'moods' field is not a JSON object")
        for key, record in moods.items():
            if not is_date_key(key):
                raise StorageFailure(f"Mood store holds a record under malformed date {key!r}")
            if not is_complete_record(record):
                raise StorageFailure(f"Mood store holds a malformed record for {key}")
        return document

    # -- public contract --------------------------------------------------

    def get(self, date: str) -> Optional[dict]:
        """Return the record stored for date, or None if there is none."""
        with self._lock:
            record = self._load()["moods"].get(date)
        logger.debug(f"[MOOD STORE] get {date}: {'hit' if record is not None else 'miss'}")
        return copy.deepcopy(record)

    def put(self, date: str, record: dict) -> None:
        """Store record under date, replacing whatever was there."""
        validate_date_key(date)
        if not is_complete_record(record):
            raise InvalidInput(f"Refusing to store an incomplete or out-of-range record for {date}")
        with self._lock:
            document = self._load()
            replaced = date in document["moods"]
            document["moods"][date] = dict(record)
            document["version"] = STORE_VERSION
            self._write_document(document)
        logger.info(f"[MOOD STORE] {'Replaced' if replaced else 'Created'} record for {date}")

    def delete(self, date: str) -> bool:
        """Remove the record for date. Returns False if there was none."""
        with self._lock:
            document = self._load()
            if date not in document["moods"]:
                logger.debug(f"[MOOD STORE] delete {date}: not found")
                return False
            del document["moods"][date]
            document["version"] = STORE_VERSION
            self._write_document(document)
        logger.info(f"[MOOD STORE] Deleted record for {date}")
        return True

    def list_all(self) -> dict[str, dict]:
        with self._lock:
            moods = self._load()["moods"]
        return copy.deepcopy(moods)

    def export(self) -> dict:
        """Snapshot of the whole store with export metadata."""
        with self._lock:
            document = self._load()
        return {
            "exportDate": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "moods": copy.deepcopy(document["moods"]),
            "version": document.get("version", STORE_VERSION),
        }


class JsonFileMoodStore(MoodStore):
    """Mood store persisted as a single JSON file on disk."""

    def __init__(self, path):
        super().__init__()
        self.path = Path(path)

    @property
    def tmp_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    def _read_document(self) -> dict:
        if not self.path.exists():
            # Lazy initialization on first access
            document = _empty_document()
            self._write_document(document)
            logger.info(f"[MOOD STORE] Initialized empty store at {self.path}")
            return document

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"[MOOD STORE] Failed to read {self.path}: {e}")
            raise StorageFailure(f"Could not read mood store: {e}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"[MOOD STORE] Corrupt document at {self.path}: {e}")
            raise StorageFailure(f"Mood store is not valid JSON: {e}") from e

    def _write_document(self, document: dict) -> None:
        tmp = self.tmp_path
        payload = json.dumps(document, indent=2, ensure_ascii=False) + "\n"

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error(f"[MOOD STORE] Failed to write {self.path}: {e}")
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                pass
            raise StorageFailure(f"Could not write mood store: {e}") from e


class InMemoryMoodStore(MoodStore):
    """Mood store kept in process memory. Nothing survives a restart."""

    def __init__(self, moods: Optional[dict] = None):
        super().__init__()
        self._document = _empty_document()
        if moods:
            self._document["moods"] = copy.deepcopy(moods)

    def _read_document(self) -> dict:
        return copy.deepcopy(self._document)

    def _write_document(self, document: dict) -> None:
        self._document = copy.deepcopy(document)
