"""Data models for the todo tracker.

Exposes the Todo dataclass plus its JSON mapping. Key names follow the
files written by the original Go tool (snake_case, with the legacy
"done" flag mirrored from "is_done") so old documents load unchanged.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional
import re

from errors import StorageError

DEADLINE_FORMAT = "%Y/%m/%d %H:%M:%S"
# Go's time.Time{} marshals to this; treat it as "never set".
ZERO_TIME_PREFIX = "0001-01-01T00:00:00"
_FRACTION_RE = re.compile(r"\.(\d+)")


@dataclass
class Todo:
    """A single task record.

    Fields:
        id: Positive integer, max existing id + 1 at creation; never reused.
        task: Description text, fixed at creation.
        limit: Deadline, naive local time.
        created_at / updated_at: Naive local timestamps.
        deleted_at: None until soft deletion.
        is_done / is_deleted: Lifecycle flags; once True, never reset.
    """
    id: int
    task: str
    limit: datetime
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
    is_done: bool = False
    is_deleted: bool = False

    def to_dict(self) -> Dict[str, Any]:
        # insertion order is the on-disk field order
        return {
            'id': self.id,
            'task': self.task,
            'done': self.is_done,
            'limit': _format_ts(self.limit),
            'created_at': _format_ts(self.created_at),
            'updated_at': _format_ts(self.updated_at),
            'deleted_at': _format_ts(self.deleted_at),
            'is_done': self.is_done,
            'is_deleted': self.is_deleted,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Todo":
        if not isinstance(raw, Mapping):
            raise StorageError(f"Todo record must be an object, got {type(raw).__name__}.")
        tid = raw.get('id')
        task = raw.get('task')
        if not isinstance(tid, int) or isinstance(tid, bool):
            raise StorageError(f"Todo record has invalid id: {tid!r}")
        if not isinstance(task, str):
            raise StorageError(f"Todo {tid} has invalid task: {task!r}")
        limit = _parse_ts(raw.get('limit'), 'limit', tid)
        created_at = _parse_ts(raw.get('created_at'), 'created_at', tid)
        updated_at = _parse_ts(raw.get('updated_at'), 'updated_at', tid)
        if limit is None or created_at is None:
            raise StorageError(f"Todo {tid} is missing limit or created_at.")
        return cls(
            id=tid,
            task=task,
            limit=limit,
            created_at=created_at,
            updated_at=updated_at or created_at,
            deleted_at=_parse_ts(raw.get('deleted_at'), 'deleted_at', tid),
            is_done=bool(raw.get('is_done')) or bool(raw.get('done')),
            is_deleted=bool(raw.get('is_deleted')),
        )

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Todo(id={self.id}, task={self.task}, done={self.is_done}, deleted={self.is_deleted})"


def _format_ts(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_ts(value: Any, field: str, tid: int) -> Optional[datetime]:
    """Parse an ISO timestamp; None/zero-time sentinel -> None."""
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise StorageError(f"Todo {tid} has invalid {field}: {value!r}")
    if value.startswith(ZERO_TIME_PREFIX):
        return None
    text = value[:-1] + '+00:00' if value.endswith('Z') else value
    # fromisoformat before 3.11 wants exactly six fraction digits
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text)
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise StorageError(f"Todo {tid} has invalid {field}: {value!r}") from exc
