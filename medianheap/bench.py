import cProfile
import itertools
import time
from dataclasses import dataclass
from pstats import Stats
from typing import Callable, Optional

from .environment import BenchSettings, log_level
from .median import MedianHeap
from .monitoring import configure, logger
from .numberops import int_mean


@dataclass
class BenchResult:
    count: int
    rounds: int
    seconds: float
    median: Optional[int]

    @property
    def us_per_push(self) -> float:
        return self.seconds / (self.count * self.rounds) * 1_000_000


def profile(func: Callable, n: int = 10):
    pr = cProfile.Profile()
    pr.enable()

    res = func()

    pr.disable()
    stats = Stats(pr)
    stats.sort_stats("time").print_stats(n)
    return res


def push_up_and_down(size: int) -> MedianHeap[int]:
    heap: MedianHeap[int] = MedianHeap(average=int_mean)
    heap.extend(itertools.chain(range(size), reversed(range(size))))
    return heap


def run_push_benchmark(settings: BenchSettings) -> BenchResult:
    heap = None
    start = time.perf_counter()
    for _ in range(settings.rounds):
        heap = push_up_and_down(settings.size)
    seconds = time.perf_counter() - start

    res = BenchResult(
        count=len(heap),
        rounds=settings.rounds,
        seconds=seconds,
        median=heap.median(),
    )
    logger.info(
        f"{res.rounds} x {res.count} pushes in {res.seconds:.4f}s, "
        f"{res.us_per_push:.3f} us/push, median {res.median}"
    )
    return res


def main():
    configure(log_level)
    settings = BenchSettings.from_env()
    logger.info(f"bench settings: {settings}")
    if settings.profile:
        profile(lambda: run_push_benchmark(settings))
    else:
        run_push_benchmark(settings)


if __name__ == "__main__":
    main()
