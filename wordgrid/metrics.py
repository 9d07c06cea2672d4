import logging
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass

logger = logging.getLogger("wordgrid")


class StageTimer:
    """Collects per-stage timing for one solve (CLI run or HTTP request)."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)  # ms
            logger.info("stage=%s elapsed=%.1fms", name, self.timings[name])

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}


@dataclass
class SearchStats:
    """Counters filled in by a grid search."""

    paths_expanded: int = 0
    paths_pruned: int = 0
    words_recorded: int = 0

    def merge(self, other: "SearchStats") -> None:
        self.paths_expanded += other.paths_expanded
        self.paths_pruned += other.paths_pruned
        self.words_recorded += other.words_recorded

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
