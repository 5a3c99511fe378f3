"""
Plotting functions for visualizing headless run results.
"""

from typing import Dict

import matplotlib.pyplot as plt

from ..core.config import CLASSIFICATION_COLORS
from .export import CATEGORY_NAMES


def _hex(category_name: str) -> str:
    r, g, b = CLASSIFICATION_COLORS[category_name.upper()]
    return f"#{r:02x}{g:02x}{b:02x}"


def plot_classification_over_time(results: Dict, output_file: str = "flock_classification.png",
                                  show: bool = False) -> str:
    """
    Plot the share of boids dominated by each force over time.

    Args:
        results: Results from a single HeadlessSimulation run
        output_file: Output filename for the plot
        show: Open an interactive window after saving

    Returns:
        Path to saved plot file
    """
    timeseries = results["timeseries"]
    frames = [s["frame"] for s in timeseries]

    shares = []
    for name in CATEGORY_NAMES:
        shares.append([
            s["classification"][name] / s["boid_count"] if s["boid_count"] else 0.0
            for s in timeseries
        ])

    fig, (ax_tags, ax_cohesion) = plt.subplots(2, 1, figsize=(12, 9), sharex=True)

    ax_tags.stackplot(frames, shares, labels=[n.capitalize() for n in CATEGORY_NAMES],
                      colors=[_hex(n) for n in CATEGORY_NAMES],
                      edgecolor='#444444', linewidth=0.3)
    ax_tags.set_ylabel('Share of boids', fontsize=12, fontweight='bold')
    ax_tags.set_ylim(0, 1)
    ax_tags.set_title('Dominant Steering Force Over Time', fontsize=14, fontweight='bold', pad=20)
    ax_tags.legend(fontsize=10, loc='upper right', framealpha=0.9)

    cohesion = [s["cohesion"] for s in timeseries]
    ax_cohesion.plot(frames, cohesion, linewidth=2, color='#4ECDC4')
    ax_cohesion.set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    ax_cohesion.set_ylabel('Cohesion (avg dist to centroid)', fontsize=12, fontweight='bold')
    ax_cohesion.grid(True, alpha=0.3, linestyle='--')

    if cohesion:
        ax_cohesion.annotate(f'{cohesion[-1]:.0f}', xy=(frames[-1], cohesion[-1]),
                             xytext=(5, 5), textcoords='offset points', fontsize=9, color='#4ECDC4')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file
