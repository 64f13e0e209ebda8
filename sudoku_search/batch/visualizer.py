"""Charts of batch solve times."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .runner import PuzzleResult


class Visualizer:
    """
    Chart generator for batch results.

    Writes PNG files into ``output_dir``.
    """

    COLOR = "#2ecc71"

    def __init__(self, results: List[PuzzleResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: Per-puzzle results from a BatchRunner.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_distribution(),
            self.plot_time_per_puzzle(),
        ]

    def plot_time_distribution(self) -> str:
        """Histogram of solve times in milliseconds."""
        fig, ax = plt.subplots(figsize=(10, 6))

        times_ms = np.array([r.time_seconds for r in self.results]) * 1000
        sns.histplot(times_ms, bins=min(30, max(1, len(times_ms))), color=self.COLOR, ax=ax)

        if len(times_ms):
            median = float(np.median(times_ms))
            ax.axvline(median, color="black", linestyle="--", linewidth=1)
            ax.annotate(f"median {median:.3f} ms",
                        xy=(median, ax.get_ylim()[1] * 0.95),
                        xytext=(5, 0),
                        textcoords="offset points",
                        fontsize=10)

        ax.set_xlabel('Time (ms)', fontsize=12)
        ax.set_ylabel('Puzzles', fontsize=12)
        ax.set_title('Solve Time Distribution', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_time_per_puzzle(self) -> str:
        """Bar chart of solve time per puzzle with backtracks on a second axis."""
        fig, ax = plt.subplots(figsize=(12, 6))

        ids = np.array([r.puzzle_id for r in self.results])
        times_ms = np.array([r.time_seconds for r in self.results]) * 1000
        backtracks = np.array([r.backtracks for r in self.results])

        ax.bar(ids, times_ms, color=self.COLOR, edgecolor='black', linewidth=0.5)
        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Time (ms)', fontsize=12)
        ax.set_ylim(bottom=0)

        ax2 = ax.twinx()
        ax2.plot(ids, backtracks, color="#e74c3c", marker="o", linewidth=1)
        ax2.set_ylabel('Backtracks', fontsize=12)
        ax2.set_ylim(bottom=0)

        ax.set_title('Solve Time per Puzzle', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_per_puzzle.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path
