import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

EFFORT_COLUMNS = ('steps', 'expansions', 'discovered', 'max_frontier')


def load_metrics(csv_path: str) -> pd.DataFrame:
    """Read a bfs_runner results CSV written with enable_metrics=True."""
    df = pd.read_csv(csv_path)
    missing = [col for col in EFFORT_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"{csv_path}: missing columns {missing} (run with enable_metrics=True)")
    for col in EFFORT_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors='coerce')
    return df


def effort_by_steps(df: pd.DataFrame) -> pd.DataFrame:
    """
    Mean expansions/discovered per path length, found searches only.
    overhead is expansions per cell on the path: 1.0 means BFS dequeued
    nothing but the path itself.
    """
    found = df[df['steps'] >= 0]
    table = found.groupby('steps').agg(
        samples=('expansions', 'size'),
        expansions=('expansions', 'mean'),
        discovered=('discovered', 'mean'),
    )
    table['overhead'] = table['expansions'] / (table.index.to_numpy() + 1)
    return table


def summarize_effort(df: pd.DataFrame) -> dict:
    found = df[df['steps'] >= 0]
    missed = df[df['steps'] < 0]
    overhead = found['expansions'] / (found['steps'] + 1)
    return {
        'found_mean_expansions': float(found['expansions'].mean()) if len(found) else float('nan'),
        'found_mean_overhead': float(overhead.mean()) if len(found) else float('nan'),
        # an exhausted search has seen its whole component
        'unreachable_mean_discovered': float(missed['discovered'].mean()) if len(missed) else float('nan'),
        'peak_frontier': int(df['max_frontier'].max()) if len(df) else 0,
    }


def plot_expansion_histogram(df: pd.DataFrame, bins: int = 20, save_path: str = None):
    """Histogram of expansions per search, found and unreachable stacked."""
    found = df[df['steps'] >= 0]['expansions'].to_numpy()
    missed = df[df['steps'] < 0]['expansions'].to_numpy()
    edges = np.histogram_bin_edges(df['expansions'].to_numpy(), bins=bins)

    fig = plt.figure()
    plt.hist([found, missed], bins=edges, stacked=True, label=['found', 'unreachable'])
    plt.xlabel('Expansions')
    plt.ylabel('Searches')
    plt.title('BFS expansions per search')
    plt.legend()
    plt.grid(True, axis='y', ls='--', alpha=0.5)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        plt.close(fig)
        print(f"Saved expansion histogram to {save_path}")
    else:
        plt.show()
    return edges


if __name__ == "__main__":
    results_dir = "./results"
    map_name = "Boston_0_1024"

    df = load_metrics(os.path.join(results_dir, f"{map_name}_results_bfs.csv"))
    print(effort_by_steps(df))
    print("Summary:", summarize_effort(df))
    plot_expansion_histogram(df, save_path=os.path.join(results_dir, f"{map_name}_expansions.png"))
