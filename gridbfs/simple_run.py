#!/usr/bin/env python3
import time

from gridbfs.bfs import bfs_search, check_grid
from gridbfs.dataset.test_maps import tests, print_grid
from gridbfs.dataset.utils import load_grid, save_map_with_markers


def parse_position(value) -> tuple:
    """Accepts "row,col" or an existing (row, col) pair."""
    if isinstance(value, str):
        parts = value.split(',')
        if len(parts) != 2:
            raise ValueError(f"expected 'row,col', got {value!r}")
        return tuple(int(p) for p in parts)
    return tuple(value)


def run_search(config):
    """
    Runs BFS with the given config dict and prints the outcome.

    config keys:
      map    – path to an octile .map file; the built-in 5x5 example if absent
      start  – "row,col"
      goal   – "row,col"
      render – optional PNG path to draw the grid and path into
    """
    if config.get("map"):
        grid = load_grid(config["map"])
    else:
        grid = tests["walls_5x5"]["grid"]
    start = parse_position(config["start"])
    goal  = parse_position(config["goal"])

    t0 = time.perf_counter()
    report = bfs_search(grid, start, goal)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    print(f"Map              : {config.get('map') or 'built-in 5x5'}")
    print(f"Start -> Goal    : {start} -> {goal}")
    print(f"Status           : {report.status.value}")
    print(f"Time             : {elapsed_ms:.2f} ms")
    print(f"Expansions       : {report.expansions}")
    print(f"Discovered       : {report.discovered}")
    print(f"Max frontier     : {report.max_frontier}")

    if report.found:
        print(f"Steps            : {report.result.steps}")
        print(f"Path             : {report.result.path}")
        if len(grid) <= 40 and len(grid[0]) <= 40:
            print()
            print_grid(grid, report.result.path)
    else:
        print("No path found.")

    if config.get("render") and check_grid(grid):
        path = report.result.path if report.found else None
        save_map_with_markers(grid, path=path, start=start, goal=goal, filename=config["render"])
        print(f"Saved render to {config['render']}")

    return report


if __name__ == "__main__":
    config = {
        "map"    : None,
        "start"  : "0,0",
        "goal"   : "4,4",
        "render" : None,
    }
    run_search(config)
