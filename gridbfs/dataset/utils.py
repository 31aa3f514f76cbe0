from typing import List, Optional, Sequence, Tuple
import csv
import os

import numpy as np
from PIL import Image, ImageDraw

from gridbfs.bfs import BLOCKED, PASSABLE, find_shortest_path

# MovingAI octile maps: '.', 'G' and 'S' are walkable, these are not
OBSTACLE_CHARS = {"@", "O", "T", "W"}


def load_map(path: str) -> List[List[str]]:
    """
    Read a MovingAI octile .map file:

        type octile
        height H
        width W
        map
        <H rows of W chars>

    Returns the rows as lists of chars in row-major (row, col) order.
    """
    with open(path, 'r') as f:
        header = [f.readline().split() for _ in range(4)]
        if (len(header[1]) != 2 or header[1][0] != "height"
                or len(header[2]) != 2 or header[2][0] != "width"
                or header[3] != ["map"]):
            raise ValueError(f"{path}: not an octile map header")
        H = int(header[1][1])
        W = int(header[2][1])
        grid = [list(f.readline().rstrip('\r\n')) for _ in range(H)]

    for r, row in enumerate(grid):
        if len(row) != W:
            raise ValueError(f"{path}: row {r} has width {len(row)}, expected {W}")
    return grid


def to_binary_grid(char_grid: List[List[str]], obstacle_chars=OBSTACLE_CHARS) -> List[List[int]]:
    return [[BLOCKED if ch in obstacle_chars else PASSABLE for ch in row] for row in char_grid]


def load_grid(path: str) -> List[List[int]]:
    return to_binary_grid(load_map(path))


def sample_feasible_pairs(grid: Sequence[Sequence[int]], sample_count: int,
                          seed: Optional[int] = None) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """
    Returns up to sample_count (start, goal) pairs of passable cells that BFS
    can connect. Gives up after sample_count * 10 draws.
    """
    free = np.argwhere(np.asarray(grid) == PASSABLE)
    if len(free) == 0:
        return []

    rng = np.random.default_rng(seed)
    pairs = []
    attempts = 0
    max_attempts = sample_count * 10

    while len(pairs) < sample_count and attempts < max_attempts:
        s, g = free[rng.integers(len(free), size=2)]
        start, goal = (int(s[0]), int(s[1])), (int(g[0]), int(g[1]))
        if find_shortest_path(grid, start, goal) is not None:
            pairs.append((start, goal))
        attempts += 1

    return pairs


def save_samples_to_csv(map_path: str, samples: List[Tuple[Tuple[int, int], Tuple[int, int]]], output_dir: str = '.') -> str:
    """
    Save start/goal pairs to <mapname>_samples.csv in output_dir.
    Returns the path to the CSV file.
    """
    map_name = os.path.splitext(os.path.basename(map_path))[0]
    file_path = os.path.join(output_dir, f"{map_name}_samples.csv")

    with open(file_path, 'w', newline='') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(['start_row', 'start_col', 'goal_row', 'goal_col'])
        for (sr, sc), (gr, gc) in samples:
            writer.writerow([sr, sc, gr, gc])

    return file_path


def save_map_with_markers(
    grid: Sequence[Sequence[int]],
    path: Optional[List[Tuple[int, int]]] = None,
    start: Optional[Tuple[int, int]] = None,
    goal: Optional[Tuple[int, int]] = None,
    marker_radius: int = 2,
    filename: str = "map_path.png"
):
    """
    Save the grid as a PNG with:
    - blocked cells in black
    - free cells in white
    - path in red
    - start circled in green, goal circled in blue
    One pixel per cell; PIL takes (x, y) so (row, col) is flipped when drawing.
    """
    h, w = len(grid), len(grid[0])
    img = Image.new("RGB", (w, h), color=(255, 255, 255))
    draw = ImageDraw.Draw(img)
    path_set = set(path) if path else set()

    for r in range(h):
        for c in range(w):
            if (r, c) in path_set:
                draw.point((c, r), fill=(255, 0, 0))
            elif grid[r][c] != PASSABLE:
                draw.point((c, r), fill=(0, 0, 0))

    for center, color in [(start, (0, 255, 0)), (goal, (0, 0, 255))]:
        if center:
            cr, cc = center
            bbox = [cc - marker_radius, cr - marker_radius,
                    cc + marker_radius, cr + marker_radius]
            draw.ellipse(bbox, outline=color)
    img.save(filename)
    return filename


if __name__ == "__main__":
    map_file = "dataset/boston/Boston_0_1024.map"
    grid = load_grid(map_file)

    pairs = sample_feasible_pairs(grid, sample_count=100, seed=0)

    output_dir = "dataset/boston"
    csv_path = save_samples_to_csv(map_file, pairs, output_dir)
    print(f"Saved {len(pairs)} samples to {csv_path}")
