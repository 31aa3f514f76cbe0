import csv

import pytest
from PIL import Image

from gridbfs.dataset.test_maps import format_grid, print_grid, tests
from gridbfs.dataset.utils import (
    load_grid,
    load_map,
    sample_feasible_pairs,
    save_map_with_markers,
    save_samples_to_csv,
    to_binary_grid,
)

OCTILE_MAP = "type octile\nheight 3\nwidth 4\nmap\n....\n.@T.\n..W.\n"


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "small.map"
    path.write_text(OCTILE_MAP)
    return str(path)


def test_load_map(map_file):
    grid = load_map(map_file)
    assert len(grid) == 3
    assert grid[0] == ['.', '.', '.', '.']
    assert grid[1] == ['.', '@', 'T', '.']


def test_load_grid(map_file):
    assert load_grid(map_file) == [
        [0, 0, 0, 0],
        [0, 1, 1, 0],
        [0, 0, 1, 0],
    ]


def test_load_map_bad_header(tmp_path):
    path = tmp_path / "bad.map"
    path.write_text("type octile\nwidth 4\nheight 3\nmap\n....\n")
    with pytest.raises(ValueError):
        load_map(str(path))


def test_load_map_short_row(tmp_path):
    path = tmp_path / "short.map"
    path.write_text("type octile\nheight 2\nwidth 4\nmap\n....\n..\n")
    with pytest.raises(ValueError):
        load_map(str(path))


def test_to_binary_grid_custom_obstacles():
    assert to_binary_grid([['.', '#'], ['@', '.']], obstacle_chars={'#'}) == [[0, 1], [0, 0]]


def test_sample_feasible_pairs():
    grid = tests["walls_5x5"]["grid"]
    pairs = sample_feasible_pairs(grid, sample_count=50, seed=3)
    assert len(pairs) == 50
    for (sr, sc), (gr, gc) in pairs:
        assert grid[sr][sc] == 0
        assert grid[gr][gc] == 0
    assert pairs == sample_feasible_pairs(grid, sample_count=50, seed=3)


def test_sample_feasible_pairs_no_free_cells():
    assert sample_feasible_pairs([[1, 1], [1, 1]], sample_count=5) == []


def test_save_samples_to_csv(tmp_path):
    out = save_samples_to_csv("maps/Boston_0_1024.map", [((0, 0), (2, 3)), ((1, 0), (0, 3))], str(tmp_path))
    assert out.endswith("Boston_0_1024_samples.csv")
    with open(out, newline='') as f:
        rows = list(csv.DictReader(f))
    assert rows[0] == {'start_row': '0', 'start_col': '0', 'goal_row': '2', 'goal_col': '3'}
    assert len(rows) == 2


def test_save_map_with_markers(tmp_path):
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    out = str(tmp_path / "render.png")
    save_map_with_markers(grid, path=[(0, 0), (0, 1), (0, 2)], filename=out)
    img = Image.open(out).convert("RGB")
    assert img.size == (3, 3)
    assert img.getpixel((1, 0)) == (255, 0, 0)   # path cell (0, 1)
    assert img.getpixel((1, 1)) == (0, 0, 0)     # wall
    assert img.getpixel((0, 2)) == (255, 255, 255)


def test_save_map_with_markers_start_goal(tmp_path):
    out = str(tmp_path / "markers.png")
    save_map_with_markers([[0] * 10 for _ in range(10)], start=(5, 5), goal=(2, 2), marker_radius=1, filename=out)
    img = Image.open(out).convert("RGB")
    assert (0, 255, 0) in [img.getpixel((x, y)) for x in range(3, 8) for y in range(3, 8)]


def test_format_grid():
    text = format_grid([[0, 1], [0, 0]], path=[(0, 0), (1, 0), (1, 1)])
    assert text == "P X\nP P"


def test_print_grid(capsys):
    print_grid([[0, 1]])
    assert capsys.readouterr().out == ". X\n\n"


def test_sample_feasible_pairs_are_connected():
    # two free regions split by a wall column
    grid = [
        [0, 0, 1, 0],
        [0, 0, 1, 0],
    ]
    pairs = sample_feasible_pairs(grid, sample_count=30, seed=11)
    assert pairs
    for start, goal in pairs:
        assert (start[1] < 2) == (goal[1] < 2)


def test_sample_feasible_pairs_gives_up():
    # 100 isolated cells: only start == goal connects, so 200 draws fall short
    grid = [[0, 1] * 100]
    pairs = sample_feasible_pairs(grid, sample_count=20, seed=5)
    assert len(pairs) < 20
    assert all(start == goal for start, goal in pairs)
