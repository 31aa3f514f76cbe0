# dijkstra.py
# Unit-cost Dijkstra on the same 4-connected grid model as bfs.py.
# Shares no code with the BFS so it can be used to cross-check it.
import heapq
from typing import List, Optional, Tuple

PASSABLE = 0


# ---------------------------------------------
def is_free(pos: Tuple[int, int], grid: List[List[int]]) -> bool:
    r, c = pos
    H, W = len(grid), len(grid[0])
    return 0 <= r < H and 0 <= c < W and grid[r][c] == PASSABLE


# ---------------------------------------------
def get_neighbors(pos: Tuple[int, int], grid: List[List[int]]) -> List[Tuple[int, int]]:
    r, c = pos
    nbrs = []
    for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
        if is_free((r + dr, c + dc), grid):
            nbrs.append((r + dr, c + dc))
    return nbrs


# ---------------------------------------------
def dijkstra(grid: List[List[int]], start: Tuple[int, int], goal: Tuple[int, int]) -> Optional[List[Tuple[int, int]]]:
    if len(grid) == 0 or len(grid[0]) == 0:
        return None
    if not is_free(start, grid) or not is_free(goal, grid):
        return None

    open_list = []
    heapq.heappush(open_list, (0, start, None))
    came_from = {}
    cost_so_far = {start: 0}

    while open_list:
        g, current, parent = heapq.heappop(open_list)

        if current in came_from:
            continue
        came_from[current] = parent

        if current == goal:
            path = []
            while current is not None:
                path.append(current)
                current = came_from[current]
            return path[::-1]

        for neighbor in get_neighbors(current, grid):
            new_cost = g + 1
            if neighbor not in cost_so_far or new_cost < cost_so_far[neighbor]:
                cost_so_far[neighbor] = new_cost
                heapq.heappush(open_list, (new_cost, neighbor, current))

    return None


def dijkstra_steps(grid: List[List[int]], start: Tuple[int, int], goal: Tuple[int, int]) -> Optional[int]:
    path = dijkstra(grid, start, goal)
    return None if path is None else len(path) - 1
