import asyncio
import functools
import logging
import math
import sys
import typing as t
from concurrent import futures

import numpy as np
import psutil
from dataclasses import dataclass

from dchull import (args, constants, convex_hull, data, geometry, graph,
                    merge, util)

logger = logging.getLogger(__name__)

Range = t.Tuple[int, int]


async def _processor(
    executor,
    queue,
    func: (),
    args_list: t.List[t.Any],
    chunksize: int = 1,
    **kwargs: t.Dict[t.Any, t.Any]
):
    for f in executor.map(functools.partial(func, **kwargs), args_list,
                          chunksize=chunksize):
        await queue.put(f)


async def _consumer(queue, chunk_count: int):
    completed_chunks = 0
    results = [None] * chunk_count
    while completed_chunks < chunk_count:
        chunk = await queue.get()
        results[completed_chunks] = chunk
        completed_chunks += 1
    return results


def _is_leaf(left: int, right: int, depth: int) -> bool:
    return depth <= 0 or right - left + 1 <= constants.BASE_CASE_SIZE


def _leaf_ranges(left: int, right: int, depth: int) -> t.Iterator[Range]:
    if _is_leaf(left, right, depth):
        yield left, right
        return
    mid = (left + right) // 2
    yield from _leaf_ranges(left, mid, depth - 1)
    yield from _leaf_ranges(mid + 1, right, depth - 1)


def _assemble(
    left: int,
    right: int,
    depth: int,
    leaves: t.Iterator[data.Hull],
) -> data.Hull:
    # consumes leaves in the order _leaf_ranges produced them
    if _is_leaf(left, right, depth):
        return next(leaves)
    mid = (left + right) // 2
    left_hull = _assemble(left, mid, depth - 1, leaves)
    right_hull = _assemble(mid + 1, right, depth - 1, leaves)
    return merge.merge_hulls(left_hull, right_hull)


def available_cpus() -> int:
    p = psutil.Process()
    if hasattr(p, "cpu_affinity"):
        return len(p.cpu_affinity()) or 1
    return psutil.cpu_count() or 1


class Processor:
    """
    Builds hulls with the lower levels of the recursion tree spread over a
    process pool. Leaves are the same index ranges the serial recursion
    visits, so results match convex_hull.convex_hull exactly.
    """
    _executor_count: int
    _executor: futures.ProcessPoolExecutor
    _loop: asyncio.AbstractEventLoop
    threshold: int

    def __init__(
        self,
        workers: t.Optional[int] = None,
        threshold: int = constants.PARALLEL_THRESHOLD,
    ):
        self._executor_count = workers or available_cpus()
        self._executor = futures.ProcessPoolExecutor(
            max_workers=self._executor_count
        )
        self._loop = asyncio.new_event_loop()
        self.threshold = threshold

    def __enter__(self) -> 'Processor':
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def workers(self) -> int:
        return self._executor_count

    def close(self):
        self._executor.shutdown()
        self._loop.close()

    async def _gather(
        self,
        func: (),
        args_list: t.List[t.Any],
        chunksize: int,
        **kwargs: t.Dict[t.Any, t.Any],
    ) -> t.List[t.Any]:
        queue = asyncio.Queue()
        _, results = await asyncio.gather(
            _processor(self._executor, queue, func, args_list,
                       chunksize=chunksize, **kwargs),
            _consumer(queue, len(args_list))
        )
        return results

    def process(
        self,
        func: (),
        args_list: t.List[t.Any],
        chunksize: int = 1,
        **kwargs: t.Dict[t.Any, t.Any],
    ) -> t.List[t.Any]:
        return self._loop.run_until_complete(
            self._gather(func, args_list, chunksize, **kwargs))

    def default_depth(self) -> int:
        return max(1, math.ceil(math.log2(self._executor_count)))

    @util.timeit
    def hull(
        self,
        points: t.Sequence[data.Point],
        depth: t.Optional[int] = None,
    ) -> data.Hull:
        if len(points) < constants.MIN_HULL_SIZE:
            return list(points)
        ordered = convex_hull.sort_points(points)
        if len(ordered) < self.threshold:
            return convex_hull.sorted_hull(ordered)

        if depth is None:
            depth = self.default_depth()
        right = len(ordered) - 1
        ranges = list(_leaf_ranges(0, right, depth))
        logger.debug("Computing %s leaf hulls on %s workers",
                     len(ranges), self._executor_count)
        leaves = self.process(convex_hull.sorted_hull,
                              [ordered[lo:hi + 1] for lo, hi in ranges])
        return _assemble(0, right, depth, iter(leaves))


@dataclass(frozen=True)
class BenchmarkRow:
    size: int
    time_ms: float
    hull_size: int
    ratio: float
    verified: t.Optional[bool] = None


def verify_hull(points: t.Sequence[data.Point], hull: data.Hull) -> bool:
    if not geometry.is_convex(hull):
        logger.warning("Hull of %s points is not convex", len(points))
        return False
    outside = [p for p in points if not geometry.encloses(hull, p)]
    if outside:
        logger.warning("%s of %s points lie outside the hull, first %s",
                       len(outside), len(points), outside[0])
        return False
    return True


def benchmark_points(
    points: t.Sequence[data.Point],
    processor: t.Optional[Processor] = None,
    verify: bool = False,
) -> t.Tuple[BenchmarkRow, data.Hull]:
    compute = processor.hull if processor else convex_hull.convex_hull
    hull, time_ms = util.elapsed_ms(compute, points)
    n = len(points)
    nlogn = n * np.log2(n) if n > 1 else 0.0
    ratio = time_ms / nlogn if nlogn else 0.0
    verified = verify_hull(points, hull) if verify else None
    row = BenchmarkRow(n, time_ms, len(hull), float(ratio), verified)
    logger.debug("Benchmarked %s", row)
    return row, hull


@util.timeit
def benchmark(
    sizes: t.Iterable[int] = constants.DEFAULT_SIZES,
    seed: int = constants.DEFAULT_SEED,
    processor: t.Optional[Processor] = None,
    verify: bool = False,
) -> t.List[BenchmarkRow]:
    rows = []
    for n in sizes:
        row, _ = benchmark_points(data.random_points(n, seed=seed),
                                  processor=processor, verify=verify)
        rows.append(row)
    return rows


def format_table(rows: t.Iterable[BenchmarkRow]) -> str:
    lines = [
        "%-12s %-15s %-15s %-15s" % ("Input Size", "Time (ms)",
                                     "Hull Size", "Time/n log n"),
        "-" * 56,
    ]
    for row in rows:
        lines.append("%-12d %-15.3f %-15d %-15.6f" % (
            row.size, row.time_ms, row.hull_size, row.ratio))
    return "\n".join(lines)


def format_example(points: t.Sequence[data.Point], hull: data.Hull) -> str:
    lines = ["Detailed Example:", "=================", "Input points:"]
    lines.extend(f"  {p}" for p in points)
    lines.append("")
    lines.append("Convex hull (counterclockwise):")
    lines.extend(f"  {p}" for p in hull)
    return "\n".join(lines)


def draw_map(
    points: t.Sequence[data.Point],
    hull: data.Hull,
    title: str = "",
) -> graph.Map:
    m = graph.Map(title)
    m.draw_points(points)
    m.draw_hull(hull)
    return m


def _run(startup_args, processor: t.Optional[Processor]) -> int:
    if startup_args.datafile:
        logger.info("Loading %s", startup_args.datafile)
        points = data.load_datafile(startup_args.datafile)
        row, hull = benchmark_points(points, processor=processor,
                                     verify=startup_args.verify)
        rows = [row]
    else:
        rows = benchmark(startup_args.sizes, seed=startup_args.seed,
                         processor=processor, verify=startup_args.verify)
        points, hull = None, None

    print("Convex Hull - Divide and Conquer Algorithm")
    print("==========================================\n")
    print(format_table(rows))

    example = list(data.EXAMPLE_POINTS)
    print("\n")
    print(format_example(example, convex_hull.convex_hull(example)))

    if startup_args.plot or startup_args.save:
        if points is None:
            points = data.random_points(startup_args.sizes[-1],
                                        seed=startup_args.seed)
            hull = convex_hull.convex_hull(points)
        m = draw_map(points, hull, f"Convex hull of {len(points)} points")
        if startup_args.save:
            m.save(startup_args.save)
            logger.info("Saved plot to %s", startup_args.save)
        if startup_args.plot:
            m.show()
        m.close()

    if any(row.verified is False for row in rows):
        logger.error("Hull verification failed")
        return 1
    return 0


@util.timeit
def main(argv: t.Optional[t.Sequence[str]] = None) -> int:
    startup_args = args.parse_args(argv)
    util.setup_logging(logging.DEBUG if startup_args.verbose
                       else logging.INFO)
    processor = (Processor(workers=startup_args.workers)
                 if startup_args.parallel else None)
    try:
        return _run(startup_args, processor)
    except (data.InvalidInputError, OSError) as e:
        logger.error("%s", e)
        return 1
    finally:
        if processor:
            processor.close()


if __name__ == '__main__':
    sys.exit(main())
