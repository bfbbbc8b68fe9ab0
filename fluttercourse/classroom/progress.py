"""
ProgressTracker - Track learner progress in ~/.fluttercourse/progress.json.

Stores progress separately from course content:
- Completed lessons with first-completion time
- Current (last viewed) lesson

Every mutation re-reads the file, applies the change and writes the whole
record back, so trackers sharing one file do not overwrite each other.
"""

import json
import logging
import os
import tempfile
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from fluttercourse.config import get_settings
from fluttercourse.errors import ProgressLoadFailure, ProgressPersistFailure
from fluttercourse.schemas import ProgressRecord

logger = logging.getLogger(__name__)

_path_locks: dict[str, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    """Get the process-wide lock for a progress file."""
    key = os.path.abspath(path)
    with _path_locks_guard:
        return _path_locks.setdefault(key, threading.Lock())


class ProgressTracker:
    """
    Track one learner's progress in a JSON file.

    Mutations on any tracker for the same file are serialized by one lock
    and applied to the latest saved record. If a write fails,
    ProgressPersistFailure is raised after the in-memory record was updated;
    that record is kept (not re-read) and written again on the next mutation.
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize progress tracker and load any saved progress.

        Args:
            path: Path to progress.json (default: from settings)
        """
        self.path = Path(path) if path else get_settings().progress_path
        self._lock = _lock_for(self.path)
        self._unsaved = False
        self.record = ProgressRecord()
        self.load()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    @staticmethod
    def read_record(path: Path) -> ProgressRecord:
        """
        Read a progress record from disk.

        Raises:
            FileNotFoundError: If the file does not exist
            ProgressLoadFailure: If the file exists but cannot be parsed
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except OSError as e:
            raise ProgressLoadFailure(path, str(e)) from e

        if not text.strip():
            raise ProgressLoadFailure(path, "file is empty")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProgressLoadFailure(path, f"invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise ProgressLoadFailure(path, "expected a JSON object")

        try:
            return ProgressRecord.model_validate(data)
        except ValidationError as e:
            raise ProgressLoadFailure(path, f"invalid progress data ({e.error_count()} errors)") from e

    def load(self) -> ProgressRecord:
        """
        Load progress from disk.

        A missing or unreadable file yields an empty record; neither is an error.
        """
        try:
            record = self.read_record(self.path)
        except FileNotFoundError:
            logger.info(f"No saved progress at {self.path}, starting fresh")
            record = ProgressRecord()
        except ProgressLoadFailure as e:
            logger.warning(f"{e}; starting fresh")
            record = ProgressRecord()

        with self._lock:
            self.record = record
            self._unsaved = False
        return record

    def _refresh(self):
        """Adopt the saved record before a mutation. Caller holds the lock."""
        if self._unsaved:
            return
        try:
            self.record = self.read_record(self.path)
        except FileNotFoundError:
            pass
        except ProgressLoadFailure as e:
            logger.warning(f"{e}; keeping in-memory progress")

    def save(self):
        """Write the full record to disk."""
        with self._lock:
            self._write()

    def _write(self):
        """Overwrite the progress file atomically. Caller holds the lock."""
        payload = self.record.to_json()
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            self._unsaved = True
            if tmp_name and os.path.exists(tmp_name):
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug(f"Could not remove temp file {tmp_name}")
            logger.warning(f"Error saving progress to {self.path}: {e}")
            raise ProgressPersistFailure(self.path, e) from e
        self._unsaved = False

    # -------------------------------------------------------------------------
    # Lesson Progress
    # -------------------------------------------------------------------------

    def mark_complete(self, lesson_id: str) -> bool:
        """
        Mark a lesson as completed.

        Idempotent: an already-completed lesson keeps its first completion time.

        Returns:
            True if the lesson was newly completed
        """
        with self._lock:
            self._refresh()
            if lesson_id in self.record.completed_lesson_ids:
                return False
            self.record.completed_lesson_ids.add(lesson_id)
            self.record.completion_timestamps[lesson_id] = datetime.now()
            self.record.total_completed_count += 1
            self._write()
        logger.info(f"Lesson {lesson_id} completed")
        return True

    def is_completed(self, lesson_id: str) -> bool:
        """Check if a lesson is completed."""
        return lesson_id in self.record.completed_lesson_ids

    def get_completion_date(self, lesson_id: str) -> Optional[datetime]:
        """Get the first completion time of a lesson."""
        return self.record.completion_timestamps.get(lesson_id)

    def get_completed_lesson_ids(self) -> set[str]:
        """Get set of completed lesson IDs."""
        return set(self.record.completed_lesson_ids)

    def get_completed_count(self) -> int:
        return self.record.total_completed_count

    def reset_lesson(self, lesson_id: str) -> bool:
        """
        Mark a lesson as not completed.

        Returns:
            True if the lesson was completed before
        """
        with self._lock:
            self._refresh()
            if lesson_id not in self.record.completed_lesson_ids:
                return False
            self.record.completed_lesson_ids.discard(lesson_id)
            self.record.completion_timestamps.pop(lesson_id, None)
            self.record.total_completed_count -= 1
            self._write()
        return True

    # -------------------------------------------------------------------------
    # Learner State
    # -------------------------------------------------------------------------

    def get_current_lesson_id(self) -> Optional[str]:
        """Get the ID of the last viewed lesson."""
        return self.record.current_lesson_id

    def set_current_lesson(self, lesson_id: str):
        """Set the last viewed lesson. Called on every view."""
        with self._lock:
            self._refresh()
            self.record.current_lesson_id = lesson_id
            self._write()

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_progress_percentage(self, total_lessons: int) -> float:
        """Get completion percentage in [0, 100]."""
        if total_lessons <= 0:
            return 0.0
        # stale ids from an older catalog can outnumber current lessons
        return min(100.0, self.record.total_completed_count * 100.0 / total_lessons)

    def get_completion_stats(self, total_lessons: int) -> dict:
        """
        Get completion statistics.

        Args:
            total_lessons: Total number of lessons in the course

        Returns:
            Dictionary with completion stats
        """
        completed = self.record.total_completed_count
        return {
            "total_lessons": total_lessons,
            "completed": completed,
            "remaining": max(total_lessons - completed, 0),
            "completion_percent": round(self.get_progress_percentage(total_lessons), 1),
        }

    def reset_all_progress(self):
        """Forget all completions and the current lesson."""
        with self._lock:
            self.record = ProgressRecord()
            self._write()
