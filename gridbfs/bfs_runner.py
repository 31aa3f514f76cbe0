import os
import csv
import json
import time

from gridbfs.bfs import bfs_search
from gridbfs.dataset.utils import load_grid

SAMPLE_COLUMNS = ['start_row', 'start_col', 'goal_row', 'goal_col']
METRIC_COLUMNS = ['expansions', 'discovered', 'max_frontier']


def run_tests_from_csv(samples_csv_path: str, map_path: str, output_dir: str = '.', enable_metrics: bool = False) -> str:
    """
    Read start/goal pairs from samples_csv_path, run BFS for each on the map
    at map_path, and write results to <mapname>_results_bfs.csv.
    Returns the results CSV path.
    """
    grid = load_grid(map_path)
    map_name = os.path.splitext(os.path.basename(map_path))[0]
    results_path = os.path.join(output_dir, f"{map_name}_results_bfs.csv")

    with open(samples_csv_path, 'r', newline='') as infile, \
         open(results_path, 'w', newline='') as outfile:
        reader = csv.DictReader(infile)
        missing = [col for col in SAMPLE_COLUMNS if col not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"{samples_csv_path}: missing columns {missing}")

        fieldnames = reader.fieldnames + ['algo', 'time_ms', 'steps', 'path']
        if enable_metrics:
            fieldnames += METRIC_COLUMNS
        writer = csv.DictWriter(outfile, fieldnames=fieldnames)
        writer.writeheader()

        for row in reader:
            start = (int(row['start_row']), int(row['start_col']))
            goal = (int(row['goal_row']), int(row['goal_col']))

            t0 = time.perf_counter()
            report = bfs_search(grid, start, goal)
            elapsed_ms = (time.perf_counter() - t0) * 1000.0

            out_row = row.copy()
            out_row.update({
                'algo': 'bfs',
                'time_ms': f"{elapsed_ms:.3f}",
                'steps': report.result.steps if report.found else -1,
                'path': json.dumps(report.result.path) if report.found else "[]",
            })
            if enable_metrics:
                out_row.update({
                    'expansions':   report.expansions,
                    'discovered':   report.discovered,
                    'max_frontier': report.max_frontier,
                })
            writer.writerow(out_row)

    return results_path


if __name__ == "__main__":
    samples_csv = "./dataset/boston/Boston_0_1024_samples.csv"
    map_file    = "./dataset/boston/Boston_0_1024.map"
    output_dir  = "./results"

    print(f"Running BFS on samples from {samples_csv}")
    results_csv = run_tests_from_csv(samples_csv, map_file, output_dir, enable_metrics=True)
    print(f"Results saved to {results_csv}")
