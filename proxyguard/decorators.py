import time
from collections.abc import Callable
from functools import wraps

from loguru import logger

from . import logs as ls
from .types_defs import LoadableProtocol


def ensure_loaded[T](func: Callable[..., T]) -> Callable[..., T]:
    @wraps(func)
    def wrapper(self: LoadableProtocol, *args, **kwargs) -> T:
        self._ensure_loaded()
        return func(self, *args, **kwargs)

    return wrapper


def timing_decorator[**P, T](func: Callable[P, T]) -> Callable[P, T]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            logger.debug(ls.FUNC_TIMING.format(func=func.__qualname__, time=elapsed))

    return wrapper

