from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor

from wordgrid.metrics import SearchStats
from wordgrid.trie import Status, Trie, TrieFrozenError

logger = logging.getLogger("wordgrid")

GRID_SIZE = 4
MIN_WORD_LENGTH = 3

Coord = tuple[int, int]
Grid = Sequence[Sequence[str]]


class GridShapeError(ValueError):
    """Raised when the grid is not size x size."""


def check_grid(grid: Grid, size: int = GRID_SIZE):
    if len(grid) != size:
        raise GridShapeError(f"Invalid grid size: expected {size} rows, got {len(grid)}")
    for y, row in enumerate(grid):
        if len(row) != size:
            raise GridShapeError(f"Invalid grid size: row {y} has {len(row)} cells, expected {size}")


def neighbors(pos: Coord, size: int = GRID_SIZE) -> list[Coord]:
    """All 8-directional neighbours of ``pos`` inside the grid."""
    x, y = pos
    adj = []
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size:
                adj.append((nx, ny))
    return adj


def all_cells(size: int = GRID_SIZE) -> list[Coord]:
    return [(x, y) for x in range(size) for y in range(size)]


def search(
    grid: Grid,
    trie: Trie,
    size: int = GRID_SIZE,
    min_length: int = MIN_WORD_LENGTH,
    starts: Iterable[Coord] | None = None,
    stats: SearchStats | None = None,
) -> dict[str, tuple[Coord, ...]]:
    """Breadth-first search over simple paths, pruned by the trie.

    Returns a mapping of each word found to the first path (in BFS order)
    that spells it. ``starts`` restricts which cells seed the frontier.
    Words shorter than three letters are never recorded, whatever
    ``min_length`` says.
    """
    check_grid(grid, size)
    if stats is None:
        stats = SearchStats()
    min_length = max(min_length, MIN_WORD_LENGTH)

    adjacency = {pos: neighbors(pos, size) for pos in all_cells(size)}
    seeds = all_cells(size) if starts is None else list(starts)
    for pos in seeds:
        if pos not in adjacency:
            raise ValueError(f"Start cell {pos} is outside the {size}x{size} grid")
    frontier: deque[tuple[Coord, tuple[Coord, ...]]] = deque((pos, (pos,)) for pos in seeds)
    found: dict[str, tuple[Coord, ...]] = {}

    while frontier:
        pos, path = frontier.popleft()
        word = "".join(grid[y][x] for x, y in path)

        status = trie.classify(word)
        if status is Status.IMPOSSIBLE:
            stats.paths_pruned += 1
            continue
        if status is Status.WORD and len(word) >= min_length and word not in found:
            found[word] = path
            stats.words_recorded += 1

        stats.paths_expanded += 1
        for n in adjacency[pos]:
            if n not in path:
                frontier.append((n, path + (n,)))

    return found


def _by_length(words: Iterable[str]) -> list[str]:
    return sorted(words, key=lambda w: (len(w), w))


def solve(
    grid: Grid,
    trie: Trie,
    size: int = GRID_SIZE,
    min_length: int = MIN_WORD_LENGTH,
    stats: SearchStats | None = None,
) -> list[str]:
    """Every dictionary word traceable on ``grid``, shortest first.

    Raises GridShapeError if the grid is not size x size.
    """
    found = search(grid, trie, size, min_length, stats=stats)
    return _by_length(found)


def solve_parallel(
    grid: Grid,
    trie: Trie,
    size: int = GRID_SIZE,
    workers: int = 4,
    min_length: int = MIN_WORD_LENGTH,
    stats: SearchStats | None = None,
) -> list[str]:
    """Same result as :func:`solve`, with starting cells spread over worker processes.

    Each worker receives a copy of the trie once, through the pool
    initializer, so it must be frozen first. Starting a pool and shipping a
    large trie costs time of its own; this only pays off on big
    dictionaries.
    """
    if not trie.frozen:
        raise TrieFrozenError("trie must be frozen before it is shared between searches")
    check_grid(grid, size)

    cells = all_cells(size)
    workers = max(1, min(workers, len(cells)))
    partitions = [cells[i::workers] for i in range(workers)]
    logger.debug("Searching %d cells across %d worker processes", len(cells), workers)

    rows = [list(row) for row in grid]
    found: set[str] = set()
    total = SearchStats()
    with ProcessPoolExecutor(max_workers=workers, initializer=init_worker, initargs=(trie,)) as executor:
        futures = [
            executor.submit(search_partition, rows, size, min_length, part)
            for part in partitions
        ]
        for fut in futures:
            words, part_stats = fut.result()
            found.update(words)
            total.merge(part_stats)

    if stats is not None:
        stats.merge(total)
    return _by_length(found)


worker_trie: Trie | None = None
"""Trie held by each worker process."""


def init_worker(trie: Trie) -> None:
    global worker_trie
    worker_trie = trie


def search_partition(
    grid: Grid, size: int, min_length: int, starts: list[Coord]
) -> tuple[list[str], SearchStats]:
    """Worker task: search from ``starts`` against the worker's trie."""
    if worker_trie is None:
        raise RuntimeError("Worker trie not initialized. Call init_worker first.")
    stats = SearchStats()
    found = search(grid, worker_trie, size, min_length, starts, stats)
    return list(found), stats
