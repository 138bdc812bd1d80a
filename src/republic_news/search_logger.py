"""Search logger for recording each search attempt to a JSON file."""

import dataclasses
import uuid
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from republic_news.data import DeviceState


class SearchRecord(BaseModel):
    """Record of a single search attempt."""

    run_id: str
    trigger: str
    query: str
    device: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    outcome: str | None = None
    message: str | None = None
    article_count: int = 0
    duration_seconds: float = 0.0


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, enums, Pydantic models, lists, dicts, and primitives.
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _serialize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class SearchLogger:
    """Writes one JSON log file per search attempt.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SearchRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_search(self, trigger: str, query: str, device: DeviceState) -> None:
        """Begin a new search record.

        Args:
            trigger: What started the search ("mount" or "submit").
            query: Query text sent to the provider.
            device: Device state sampled for this attempt.
        """
        if not self._enabled:
            return

        self._record = SearchRecord(
            run_id=str(uuid.uuid4()),
            trigger=trigger,
            query=query,
            device=_serialize(device),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def finish_search(
        self,
        outcome: str,
        *,
        message: str | None = None,
        article_count: int = 0,
        duration_seconds: float = 0.0,
    ) -> Path | None:
        """Write the current search record to a JSON file.

        Args:
            outcome: Name of the state the search ended in.
            message: Error message, if the search failed.
            article_count: Number of articles kept after truncation.
            duration_seconds: Wall-clock time of the request.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        record = self._record
        self._record = None
        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.outcome = outcome
        record.message = message
        record.article_count = article_count
        record.duration_seconds = round(duration_seconds, 4)

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # search_2026-02-12T14-30-00_<id8>.json; colons are not portable in filenames
        ts = record.started_at.replace(":", "-").split(".")[0].split("+")[0]
        filepath = self._log_dir / f"search_{ts}_{record.run_id[:8]}.json"

        filepath.write_text(record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
