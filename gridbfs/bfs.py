import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

PASSABLE = 0
BLOCKED = 1

# right, down, left, up
# NOTE: this order is the tie-break rule between equally short paths
DIRECTIONS: Tuple[Position, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


# ----------------------------------------------------
# Result types
# ----------------------------------------------------
@dataclass(frozen=True)
class PathResult:
    path: List[Position]
    steps: int


class SearchStatus(str, Enum):
    """Why a search ended. Everything except FOUND maps to "no path"."""
    FOUND = "found"
    MALFORMED_GRID = "malformed_grid"
    INVALID_ENDPOINT = "invalid_endpoint"
    UNREACHABLE = "unreachable"


@dataclass
class SearchReport:
    result: Optional[PathResult]
    status: SearchStatus
    expansions: int = 0
    discovered: int = 0
    max_frontier: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


# ----------------------------------------------------
# Validation
# ----------------------------------------------------
def check_grid(grid: Sequence[Sequence[int]]) -> bool:
    """
    Entry gate: the grid needs at least one row, a non-empty first row,
    and every row a sequence of the same length as the first.
    """
    if grid is None or len(grid) == 0 or not hasattr(grid[0], "__len__") or len(grid[0]) == 0:
        return False
    cols = len(grid[0])
    return all(hasattr(row, "__len__") and len(row) == cols for row in grid)


def is_valid_position(position: Position, grid: Sequence[Sequence[int]]) -> bool:
    """
    True if position lies inside the grid and the cell is passable.
    Bounds are tested before indexing so negative coordinates never wrap.
    """
    row, col = position
    return (0 <= row < len(grid)
            and 0 <= col < len(grid[0])
            and grid[row][col] == PASSABLE)


# ----------------------------------------------------
# Path reconstruction
# ----------------------------------------------------
def reconstruct_path(predecessors: Dict[Position, Position], start: Position, end: Position) -> PathResult:
    path = [end]
    current = end
    while current != start:
        if current not in predecessors:
            raise AssertionError(f"predecessor chain broken at {current} (start={start}, end={end})")
        current = predecessors[current]
        path.append(current)
        # an acyclic chain can't be longer than the map plus the start
        if len(path) > len(predecessors) + 1:
            raise AssertionError(f"predecessor chain from {end} never reaches {start}")
    path.reverse()
    return PathResult(path=path, steps=len(path) - 1)


# ----------------------------------------------------
# BFS
# ----------------------------------------------------
def bfs_search(grid: Sequence[Sequence[int]], start: Position, end: Position) -> SearchReport:
    """
    Breadth-first search from start to end over 4-connected passable cells.

    Always returns a SearchReport; bad input and unreachable targets come back
    with result=None and a status saying which case it was. Only a broken
    predecessor chain (a bug, not bad input) raises.
    """
    if not check_grid(grid):
        logger.debug("no path: malformed grid")
        return SearchReport(None, SearchStatus.MALFORMED_GRID)

    start, end = tuple(start), tuple(end)
    if not is_valid_position(start, grid) or not is_valid_position(end, grid):
        logger.debug("no path: invalid endpoint start=%s end=%s", start, end)
        return SearchReport(None, SearchStatus.INVALID_ENDPOINT)

    frontier = deque([start])
    visited = {start}
    predecessors: Dict[Position, Position] = {}
    expansions = 0
    max_frontier = 1

    while frontier:
        current = frontier.popleft()
        expansions += 1

        if current == end:
            return SearchReport(
                reconstruct_path(predecessors, start, end),
                SearchStatus.FOUND,
                expansions=expansions,
                discovered=len(visited),
                max_frontier=max_frontier,
            )

        row, col = current
        for dr, dc in DIRECTIONS:
            nbr = (row + dr, col + dc)
            if is_valid_position(nbr, grid) and nbr not in visited:
                visited.add(nbr)
                predecessors[nbr] = current
                frontier.append(nbr)
        max_frontier = max(max_frontier, len(frontier))

    logger.debug("no path: %s unreachable from %s after %d expansions", end, start, expansions)
    return SearchReport(
        None,
        SearchStatus.UNREACHABLE,
        expansions=expansions,
        discovered=len(visited),
        max_frontier=max_frontier,
    )


def find_shortest_path(grid: Sequence[Sequence[int]], start: Position, end: Position) -> Optional[PathResult]:
    """Shortest path from start to end, or None when there isn't one."""
    return bfs_search(grid, start, end).result
