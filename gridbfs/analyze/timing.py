import os
import pandas as pd
import matplotlib.pyplot as plt


def load_results(csv_path: str) -> pd.DataFrame:
    df = pd.read_csv(csv_path)
    for col in ('time_ms', 'steps'):
        if col not in df.columns:
            raise ValueError(f"{csv_path}: missing column {col!r}")
        df[col] = pd.to_numeric(df[col], errors='coerce')
    return df


def summarize_results(df: pd.DataFrame) -> dict:
    """
    Aggregate a bfs_runner results table. Rows with steps == -1 are searches
    that found no path; mean_steps only counts the found ones.
    """
    found = df[df['steps'] >= 0]
    samples = len(df)
    return {
        'samples': samples,
        'found': len(found),
        'found_ratio': len(found) / samples if samples else 0.0,
        'mean_time_ms': float(df['time_ms'].mean()) if samples else float('nan'),
        'mean_steps': float(found['steps'].mean()) if len(found) else float('nan'),
    }


def plot_time_vs_steps(df: pd.DataFrame, save_path: str = None):
    """
    Scatter of search time against path length for the searches that found a
    path, with the mean time per path length drawn on top.
    """
    found = df[df['steps'] >= 0]
    per_len = found.groupby('steps')['time_ms'].mean()

    fig = plt.figure()
    plt.scatter(found['steps'], found['time_ms'], s=8, alpha=0.5, label='search')
    plt.plot(per_len.index, per_len.values, color='red', label='mean')
    plt.xlabel('Path length (steps)')
    plt.ylabel('Time (ms)')
    plt.title('BFS time vs path length')
    plt.legend()
    plt.grid(True)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        plt.close(fig)
        print(f"Saved timing plot to {save_path}")
    else:
        plt.show()


if __name__ == "__main__":
    results_dir = "./results"
    map_name = "Boston_0_1024"

    df = load_results(os.path.join(results_dir, f"{map_name}_results_bfs.csv"))
    print("Summary:", summarize_results(df))
    plot_time_vs_steps(df, save_path=os.path.join(results_dir, f"{map_name}_time_vs_steps.png"))
