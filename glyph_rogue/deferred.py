"""Deferred (asynchronously loaded) assets.

A :class:`DeferredAsset` wraps a load-and-transform computation that runs on
a background executor. The frame loop never waits on it; instead it polls via
:meth:`DeferredAsset.execute` every frame::

    atlas = DeferredAsset(lambda: build_atlas(...), name="tileset")
    ...
    atlas.execute(lambda a: draw_tiles(a))   # no-op until the load finishes

States move ``PENDING -> READY`` or ``PENDING -> FAILED`` exactly once and the
resolved result is cached for the lifetime of the asset.
"""

import logging
from concurrent import futures
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from enum import StrEnum, auto
from typing import Any, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

_DEFAULT_EXECUTOR: Optional[ThreadPoolExecutor] = None


def default_executor() -> ThreadPoolExecutor:
    """Process-wide background pool shared by all assets."""
    global _DEFAULT_EXECUTOR
    if _DEFAULT_EXECUTOR is None:
        _DEFAULT_EXECUTOR = ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="asset-loader"
        )
    return _DEFAULT_EXECUTOR


class InlineExecutor(Executor):
    """Executor that runs submitted work immediately on the caller's thread.

    Used by headless tools and tests where deterministic, already-resolved
    assets are preferable to background loading.
    """

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future


class AssetStatus(StrEnum):
    PENDING = auto()
    READY = auto()
    FAILED = auto()


class DeferredAsset(Generic[T]):
    """A value that becomes available once a background load completes.

    Attributes:
        name: Label used in log messages.
    """

    def __init__(
        self,
        loader: Callable[[], T],
        executor: Optional[Executor] = None,
        name: str = "asset",
    ):
        self._setup(name, executor or default_executor(), AssetStatus.PENDING)
        self._future = self._executor.submit(loader)

    def _setup(
        self,
        name: str,
        executor: Executor,
        status: AssetStatus,
        value: Optional[T] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.name = name
        self._executor = executor
        self._status = status
        self._value = value
        self._error = error
        self._future: Optional[Future] = None

    @classmethod
    def ready(cls, value: T, name: str = "asset") -> "DeferredAsset[T]":
        """Build an asset that is already resolved to ``value``."""
        asset: DeferredAsset[T] = cls.__new__(cls)
        asset._setup(name, InlineExecutor(), AssetStatus.READY, value=value)
        return asset

    @classmethod
    def failed(cls, error: BaseException, name: str = "asset") -> "DeferredAsset[T]":
        """Build an asset that has already failed with ``error``."""
        asset: DeferredAsset[T] = cls.__new__(cls)
        asset._setup(name, InlineExecutor(), AssetStatus.FAILED, error=error)
        return asset

    def poll(self) -> AssetStatus:
        """Return the current status without blocking.

        A finished background load is promoted to READY / FAILED here, on the
        caller's thread, so readers only ever observe a settled state.
        """
        if self._status is AssetStatus.PENDING and self._future is not None:
            if self._future.done():
                error = self._future.exception()
                if error is None:
                    self._value = self._future.result()
                    self._status = AssetStatus.READY
                    logger.debug("Asset '%s' is ready", self.name)
                else:
                    self._error = error
                    self._status = AssetStatus.FAILED
                    logger.warning("Asset '%s' failed to load: %s", self.name, error)
        return self._status

    @property
    def status(self) -> AssetStatus:
        return self.poll()

    @property
    def is_ready(self) -> bool:
        return self.poll() is AssetStatus.READY

    @property
    def is_failed(self) -> bool:
        return self.poll() is AssetStatus.FAILED

    @property
    def error(self) -> Optional[BaseException]:
        """The load failure, if any (``None`` while pending or when ready)."""
        self.poll()
        return self._error

    def execute(self, action: Callable[[T], Any]) -> bool:
        """Run ``action`` with the value if it is ready.

        Pending and failed assets are silent no-ops; absence of a value is not
        a failure, so this always reports success.
        """
        if self.poll() is AssetStatus.READY:
            action(self._value)  # type: ignore[arg-type]
        return True

    def execute_or(self, action: Callable[[T], Any], fallback: Callable[[], Any]) -> bool:
        """Like :meth:`execute` but calls ``fallback`` when no value is available."""
        if self.poll() is AssetStatus.READY:
            action(self._value)  # type: ignore[arg-type]
        else:
            fallback()
        return True

    def result(self, timeout: Optional[float] = None) -> T:
        """Block until resolved; return the value or raise the load error.

        Never call this from the frame loop. It exists for chained loads
        (running on worker threads) and headless tools.
        """
        if self._future is not None:
            return self._future.result(timeout)
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    def wait(self, timeout: Optional[float] = None) -> AssetStatus:
        """Block until resolved (or ``timeout`` elapses) and return the status."""
        if self._future is not None:
            futures.wait([self._future], timeout=timeout)
        return self.poll()

    def map(self, fn: Callable[[T], U], name: Optional[str] = None) -> "DeferredAsset[U]":
        """Derive a new asset by transforming this one once it resolves.

        The transform runs on the executor, not on the polling thread. If this
        asset fails, or ``fn`` raises, the derived asset fails.
        """
        return DeferredAsset(
            lambda: fn(self.result()),
            executor=self._executor,
            name=name or f"{self.name}:mapped",
        )

    def __repr__(self) -> str:
        return f"DeferredAsset(name={self.name!r}, status={self._status.value})"
