"""In-memory note repository. Contents live until the process exits."""

import itertools
import logging
import threading

from demo_server.domain.models import Note
from demo_server.domain.values import NoteId

logger = logging.getLogger(__name__)


class InMemoryNoteRepository:
    """Dict-backed, lock-protected note store with a sequential id counter."""

    def __init__(self) -> None:
        self._notes: dict[NoteId, Note] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, note: Note) -> None:
        with self._lock:
            self._notes[note.id] = note
        logger.debug("Saved note %s", note.id)

    def find_by_id(self, note_id: NoteId) -> Note | None:
        with self._lock:
            return self._notes.get(note_id)

    def find_all(self) -> list[Note]:
        with self._lock:
            return list(self._notes.values())

    def next_identity(self) -> NoteId:
        with self._lock:
            return NoteId(next(self._ids))

    @property
    def count(self) -> int:
        """Number of stored notes."""
        with self._lock:
            return len(self._notes)
