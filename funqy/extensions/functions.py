from __future__ import annotations
import logging
from functools import partial, wraps
from ..types import *
from ..scheduler import DEFAULT_SCHEDULER, DelayHandle, Scheduler, callable_name

logger = logging.getLogger(__name__)


def once(func: Callable[[], T]) -> Callable[..., T]:
    """
    wrap func so it runs at most once. the first call invokes func() without
    forwarding arguments; every call returns that first result (None included).
    if func raises, nothing is cached and the next call tries again.
    """
    result = MISSING

    @wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal result
        if result is MISSING:
            logger.debug(f"once: first call to {callable_name(func)}")
            result = func()
        return result

    return wrapper


def _cache_key(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> str:
    # arguments whose str() forms coincide share an entry, e.g. 1 and "1"
    parts = [str(arg) for arg in args] + [f"{name}={value}" for name, value in sorted(kwargs.items())]
    return ','.join(parts)


def memoize(func: Callable[..., T]) -> Callable[..., T]:
    """
    cache func's results keyed by its joined argument values.
    meant for primitive arguments; each memoize() call owns a separate cache.
    """
    results: Dict[str, T] = {}

    @wraps(func)
    def wrapper(*args, **kwargs):
        key = _cache_key(args, kwargs)
        if key not in results:
            logger.debug(f"memoize: cache miss for {callable_name(func)}({key})")
            results[key] = func(*args, **kwargs)
        return results[key]

    return wrapper


def delay(func: Callable[..., Any], wait_ms: float, *args: Any,
          scheduler: Optional[Scheduler] = None, **kwargs: Any) -> DelayHandle:
    """
    call func(*args, **kwargs) once, no sooner than wait_ms milliseconds from now.
    returns immediately with a handle that can cancel the call before it starts.
    """
    if wait_ms < 0:
        raise ValueError(f"wait_ms must be non-negative, got {wait_ms}")
    target = scheduler if scheduler is not None else DEFAULT_SCHEDULER
    return target.schedule(partial(func, *args, **kwargs), wait_ms / 1000)
