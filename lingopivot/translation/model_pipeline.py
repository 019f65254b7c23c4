"""Lazy, single-flight model backend with bounded queueing and load progress."""

import asyncio
import logging
import time
from dataclasses import dataclass, asdict
from enum import Enum
from typing import AsyncGenerator, Callable, Optional, Set

from ..config import Config
from ..exceptions import BackendError, BackendTimeoutError, QueueFullError, StaleRequestError
from ..languages.registry import LanguageRegistry
from .clients import TranslationBackend, create_backend

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    """Backend load status."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


TERMINAL_STATUSES = (LoadStatus.READY, LoadStatus.FAILED)


@dataclass
class LoadProgress:
    """Progress update for a backend load."""
    status: LoadStatus
    percentage: float
    message: str
    backend: str = ""
    pending: int = 0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


class ModelPipeline:
    """
    Runs translations through a model backend.

    The backend is loaded on first use. Concurrent callers share one
    in-flight load; a failed load is retried by the next call. Requests
    that arrive while the backend loads wait in a bounded queue and are
    rejected when they waited longer than the queue expiry. Every backend
    call runs in a worker thread under a timeout.
    """

    def __init__(
        self,
        backend: TranslationBackend,
        registry: Optional[LanguageRegistry] = None,
        timeout: float = 10.0,
        load_timeout: float = 60.0,
        queue_size: int = 100,
        queue_expiry: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the pipeline.

        Args:
            backend: Backend that performs the translations
            registry: Registry used to build backend language codes
            timeout: Seconds allowed per translation call
            load_timeout: Seconds allowed for the backend load
            queue_size: Maximum requests waiting for the load
            queue_expiry: Seconds after which a waiting request is stale
            clock: Time source, replaceable in tests
        """
        self.backend = backend
        self.registry = registry or LanguageRegistry()
        self.timeout = timeout
        self.load_timeout = load_timeout
        self.queue_size = queue_size
        self.queue_expiry = queue_expiry
        self._clock = clock
        self._load_task: Optional[asyncio.Task] = None
        self._pending = 0
        self._subscribers: Set[asyncio.Queue] = set()
        self._progress = LoadProgress(
            status=LoadStatus.IDLE,
            percentage=0.0,
            message="Backend not loaded",
            backend=backend.name,
        )

    @classmethod
    def from_config(
        cls, config: Config, registry: Optional[LanguageRegistry] = None
    ) -> Optional["ModelPipeline"]:
        """Build a pipeline for the configured backend, or None when disabled."""
        if not config.model_enabled:
            return None
        registry = registry or LanguageRegistry()
        language_names = {
            registry.model_code(name): name.title() for name in registry.supported_languages()
        }
        backend = create_backend(config, language_names=language_names)
        if backend is None:
            return None
        return cls(
            backend,
            registry=registry,
            timeout=config.model_timeout_seconds,
            queue_size=config.model_queue_size,
            queue_expiry=config.model_queue_expiry_seconds,
        )

    @property
    def status(self) -> LoadStatus:
        return self._progress.status

    @property
    def is_ready(self) -> bool:
        return self._progress.status == LoadStatus.READY

    @property
    def pending(self) -> int:
        return self._pending

    def snapshot(self) -> LoadProgress:
        """Get the latest progress."""
        return self._progress

    async def ensure_loaded(self) -> None:
        """Load the backend, or wait for the load already in flight."""
        if self.is_ready:
            return
        if self._load_task is None:
            self._load_task = asyncio.ensure_future(self._load())
        await asyncio.shield(self._load_task)

    def start_loading(self) -> None:
        """Start loading in the background without waiting."""
        if not self.is_ready and self._load_task is None:
            self._load_task = asyncio.ensure_future(self._load())

    async def translate(self, text: str, source: str, target: str) -> str:
        """
        Translate text with the backend.

        Args:
            text: Text to translate
            source: Source language identifier
            target: Target language identifier

        Returns:
            The backend's translation

        Raises:
            QueueFullError: Too many requests are waiting for the load
            StaleRequestError: The request waited longer than the queue expiry
            BackendError: The load or the call failed
            BackendTimeoutError: The call exceeded the timeout
        """
        if not self.is_ready:
            await self._wait_for_load()

        source_code = self.registry.model_code(source)
        target_code = self.registry.model_code(target)
        name = self.backend.name
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.backend.translate, text, source_code, target_code),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise BackendTimeoutError(name, self.timeout)
        except BackendError:
            raise
        except Exception as e:
            raise BackendError(name, str(e)) from e

    async def _wait_for_load(self) -> None:
        if self._pending >= self.queue_size:
            raise QueueFullError(f"{self._pending} requests already waiting for {self.backend.name}")

        queued_at = self._clock()
        self._pending += 1
        try:
            await self.ensure_loaded()
        finally:
            self._pending -= 1

        age = self._clock() - queued_at
        if age > self.queue_expiry:
            raise StaleRequestError(age, self.queue_expiry)

    async def _load(self) -> None:
        name = self.backend.name
        self._set_progress(LoadStatus.LOADING, 10.0, f"Loading {name} backend")
        logger.info("Loading %s backend", name)
        try:
            await asyncio.wait_for(asyncio.to_thread(self.backend.load), timeout=self.load_timeout)
        except asyncio.TimeoutError:
            error: BackendError = BackendTimeoutError(name, self.load_timeout)
        except BackendError as e:
            error = e
        except Exception as e:
            error = BackendError(name, str(e))
        else:
            self._set_progress(LoadStatus.READY, 100.0, f"{name} backend ready")
            logger.info("%s backend ready", name)
            return

        # Let the next caller retry
        self._load_task = None
        self._set_progress(LoadStatus.FAILED, 0.0, str(error))
        logger.warning("Model backend failed to load: %s", error)
        raise error

    def _set_progress(self, status: LoadStatus, percentage: float, message: str) -> None:
        self._progress = LoadProgress(
            status=status,
            percentage=percentage,
            message=message,
            backend=self.backend.name,
            pending=self._pending,
        )
        for queue in list(self._subscribers):
            queue.put_nowait(self._progress)

    async def progress(
        self, heartbeat: Optional[float] = None
    ) -> AsyncGenerator[Optional[LoadProgress], None]:
        """
        Stream load progress.

        Yields the current state first, then every change until the backend
        is ready or has failed. When ``heartbeat`` seconds pass without a
        change, yields None so callers can keep a connection alive.
        """
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.add(queue)
        try:
            current = self.snapshot()
            yield current
            if current.status in TERMINAL_STATUSES:
                return
            while True:
                try:
                    event = await asyncio.wait_for(queue.get(), timeout=heartbeat)
                except asyncio.TimeoutError:
                    yield None
                    continue
                yield event
                if event.status in TERMINAL_STATUSES:
                    return
        finally:
            self._subscribers.discard(queue)
