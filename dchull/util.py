import logging
import time
import typing as t

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO):
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        root.addHandler(logging.StreamHandler())


def timeit(method):
    def timed(*args, **kw):
        ts = time.time()
        result = method(*args, **kw)
        te = time.time()
        logger.debug("%s elapsed time: %f sec",
                     method.__qualname__, (te - ts))
        return result

    return timed


def elapsed_ms(func: t.Callable, *args, **kw) -> t.Tuple[t.Any, float]:
    ts = time.perf_counter()
    result = func(*args, **kw)
    te = time.perf_counter()
    return result, (te - ts) * 1000.0


class Numbers:
    current: int

    def __init__(self):
        self.current = 0

    def __iter__(self) -> 'Numbers':
        return self

    def __next__(self) -> int:
        self.current += 1
        return self.current

    def next(self) -> int:
        return next(self)
