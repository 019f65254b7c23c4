"""Exceptions raised by the translation pipeline."""


class LingoPivotError(Exception):
    """Base class for all pipeline errors."""


class BackendError(LingoPivotError):
    """A model backend failed to load or to translate."""

    def __init__(self, backend: str, message: str):
        self.backend = backend
        super().__init__(f"{backend}: {message}")


class BackendTimeoutError(BackendError):
    """A model backend call exceeded the configured timeout."""

    def __init__(self, backend: str, timeout: float):
        self.timeout = timeout
        super().__init__(backend, f"timed out after {timeout:g}s")


class StaleRequestError(LingoPivotError):
    """A queued request waited longer than the queue expiry."""

    def __init__(self, age: float, expiry: float):
        self.age = age
        self.expiry = expiry
        super().__init__(f"request waited {age:.1f}s in queue (limit {expiry:g}s)")


class QueueFullError(LingoPivotError):
    """The pending-request queue reached its capacity."""


class DataLoadError(LingoPivotError):
    """An external data file could not be read or parsed."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")
