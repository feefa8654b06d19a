"""Note management use case."""

from demo_server.domain.models import Note, normalize_title
from demo_server.domain.values import NoteId
from demo_server.errors import InvalidArgumentError, NotFoundError
from demo_server.ports.outbound import Clock, Logger, NoteRepository


class NoteService:
    """Creates and queries notes through the injected repository."""

    def __init__(self, repository: NoteRepository, clock: Clock, logger: Logger) -> None:
        self._repository = repository
        self._clock = clock
        self._logger = logger

    def create_note(self, title: str, content: str) -> Note:
        """Validate, assign the next id and store a new note.

        The title is checked before an id is drawn so rejected notes leave no
        gap in the id sequence.
        """
        self._logger.info(f"Creating note with title: {title!r}")
        title = normalize_title(title)
        if not isinstance(content, str):
            raise InvalidArgumentError("Content must be a string")
        note = Note(
            id=self._repository.next_identity(),
            title=title,
            content=content,
            created=self._clock.now(),
        )
        self._repository.save(note)
        self._logger.info(f"Created note with ID: {note.id}")
        return note

    def list_notes(self) -> list[Note]:
        notes = sorted(self._repository.find_all(), key=lambda n: n.id.value)
        self._logger.info(f"Found {len(notes)} notes")
        return notes

    def get_note(self, note_id: NoteId) -> Note:
        self._logger.info(f"Retrieving note with ID: {note_id}")
        note = self._repository.find_by_id(note_id)
        if note is None:
            raise NotFoundError(f"Note not found: {note_id}")
        return note
