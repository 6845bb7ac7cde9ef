"""
schedulers for delayed calls.

delay() never talks to threads directly: it hands a callback and a minimum wait
to a Scheduler. ThreadingScheduler runs each callback on its own timer thread,
ManualScheduler runs them only when advance() moves its clock forward.
"""
import heapq
import itertools
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from .types import *

logger = logging.getLogger(__name__)


def callable_name(fn: Callable[..., Any]) -> str:
    """best-effort readable name for log messages"""
    target = getattr(fn, 'func', fn)  # unwrap functools.partial
    return getattr(target, '__qualname__', repr(target))


class DelayHandle:
    """tracks one scheduled callback. cancel() only wins before the callback starts."""

    def __init__(self, on_cancel: Optional[Callable[[], Any]] = None):
        self._on_cancel = on_cancel
        self._lock = threading.Lock()
        self._started = False
        self._cancelled = False
        self._done = False
        self._settled = threading.Event()

    @property
    def cancelled(self) -> bool: return self._cancelled

    @property
    def done(self) -> bool: return self._done

    def cancel(self) -> bool:
        """prevent the callback from running. false if it already started or was cancelled."""
        with self._lock:
            if self._started or self._cancelled:
                return False
            self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()
        self._settled.set()
        return True

    def on_cancel(self, hook: Callable[[], Any]) -> None:
        """register what cancel() should also stop, e.g. the timer backing this handle"""
        with self._lock:
            self._on_cancel = hook

    def wait(self, timeout: Optional[float] = None) -> bool:
        """block until the callback finished or was cancelled. false on timeout."""
        return self._settled.wait(timeout)

    def _claim(self) -> bool:
        with self._lock:
            if self._cancelled:
                return False
            self._started = True
            return True

    def _complete(self) -> None:
        self._done = True
        self._settled.set()

    def __repr__(self) -> str:
        return f"DelayHandle(done={self._done}, cancelled={self._cancelled})"


class Scheduler(ABC):
    @abstractmethod
    def schedule(self, callback: Callable[[], Any], delay_seconds: float) -> DelayHandle:
        """run callback once, no earlier than delay_seconds from now"""
        pass


@dataclass
class SchedulerConfig:
    """configuration for timer threads"""
    daemon: bool = True
    thread_name_prefix: str = 'funqy-delay'


class ThreadingScheduler(Scheduler):
    """one threading.Timer per scheduled callback"""

    def __init__(self, config: Optional[SchedulerConfig] = None):
        self.config = config or SchedulerConfig()

    def schedule(self, callback: Callable[[], Any], delay_seconds: float) -> DelayHandle:
        handle = DelayHandle()
        timer = threading.Timer(delay_seconds, self._fire, args=(handle, callback))
        timer.daemon = self.config.daemon
        timer.name = f"{self.config.thread_name_prefix}-{callable_name(callback)}"
        handle.on_cancel(timer.cancel)
        timer.start()
        logger.debug(f"scheduled {callable_name(callback)} in {delay_seconds:.3f}s")
        return handle

    @staticmethod
    def _fire(handle: DelayHandle, callback: Callable[[], Any]) -> None:
        if not handle._claim():
            return
        try:
            callback()
        except Exception:
            # nobody is waiting on a timer thread to re-raise to
            logger.exception(f"delayed call to {callable_name(callback)} failed")
        finally:
            handle._complete()


class ManualScheduler(Scheduler):
    """
    deterministic scheduler: callbacks run only inside advance(), in due-time
    order (ties in scheduling order), on the caller's thread. exceptions from
    callbacks propagate out of advance().
    """

    def __init__(self):
        self.now = 0.0
        self._queue: List[Tuple[float, int, Callable[[], Any], DelayHandle]] = []
        self._sequence = itertools.count()

    def schedule(self, callback: Callable[[], Any], delay_seconds: float) -> DelayHandle:
        handle = DelayHandle()
        heapq.heappush(self._queue, (self.now + delay_seconds, next(self._sequence), callback, handle))
        return handle

    @property
    def pending(self) -> int:
        return sum(1 for *_, handle in self._queue if not handle.cancelled)

    def advance(self, seconds: float) -> int:
        """move the clock forward and run everything that came due. returns how many ran."""
        deadline = self.now + seconds
        ran = 0
        while self._queue and self._queue[0][0] <= deadline:
            due, _, callback, handle = heapq.heappop(self._queue)
            self.now = due
            if not handle._claim():
                continue
            try:
                callback()
            finally:
                handle._complete()
            ran += 1
        self.now = deadline
        return ran


DEFAULT_SCHEDULER = ThreadingScheduler()
