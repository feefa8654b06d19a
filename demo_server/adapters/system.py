"""Clock and logger adapters over the standard library."""

import logging
from datetime import UTC, datetime


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(UTC)


class StdlibLogger:
    """:class:`Logger` port implemented with :mod:`logging`.

    Handlers are configured by the entry point; they write to stderr (and an
    optional side file), never to the protocol stream.
    """

    def __init__(self, name: str = "demo_server") -> None:
        self._logger = logging.getLogger(name)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str, cause: BaseException | None = None) -> None:
        self._logger.error(message, exc_info=cause)
