"""Typed failures raised by the domain, services and adapters.

Each failure kind has its own class; callers branch on the type, never on the
message text.
"""


class DemoServerError(Exception):
    """Base class for every expected, user-facing failure."""


class InvalidArgumentError(DemoServerError):
    """An argument or domain invariant was violated."""


class NotFoundError(DemoServerError):
    """The requested note, resource, prompt, tool, file or city does not exist."""


class RejectedOperationError(DemoServerError):
    """The domain refuses to perform the operation (e.g. division by zero)."""


class GatewayError(DemoServerError):
    """An upstream service failed: network error, timeout, bad status or payload."""


class FileSystemError(DemoServerError):
    """A filesystem call failed with an I/O error."""
