"""
Export functions for saving simulation results to CSV and JSON.
"""

import csv
import json
from typing import Any, Dict, List

import numpy as np

from ..core.agents.boid import ForceCategory


CATEGORY_NAMES = [category.name.lower() for category in ForceCategory]

TIMESERIES_FIELDS = ['trial', 'frame', 'boid_count', 'avg_speed', 'cohesion'] + \
    [f"tagged_{name}" for name in CATEGORY_NAMES]

SUMMARY_METRICS = [
    "avg_speed", "avg_cohesion", "final_speed", "final_cohesion",
    "final_boid_count", "elapsed_time_seconds",
]


def export_results_to_csv(trial_results: List[Dict], filename: str = "flock_timeseries.csv") -> str:
    """
    Export the sampled time series of every trial to CSV.

    Args:
        trial_results: Results from HeadlessSimulation.run, one per trial
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TIMESERIES_FIELDS)
        writer.writeheader()

        for index, result in enumerate(trial_results):
            trial = result.get("trial", index + 1)
            for sample in result["timeseries"]:
                row = {
                    'trial': trial,
                    'frame': sample['frame'],
                    'boid_count': sample['boid_count'],
                    'avg_speed': f"{sample['avg_speed']:.4f}",
                    'cohesion': f"{sample['cohesion']:.2f}",
                }
                for name in CATEGORY_NAMES:
                    row[f"tagged_{name}"] = sample['classification'].get(name, 0)
                writer.writerow(row)

    print(f"\nCSV results saved to: {filename}")
    return filename


def export_report(report: Dict[str, Any], filename: str = "flock_report.json") -> str:
    """
    Export a full run report to JSON.

    Args:
        report: Complete results dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(report, f, indent=2)

    print(f"\nReport saved to: {filename}")
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple trials

    Returns:
        Dictionary with mean and std for each metric
    """
    if not trial_results:
        return {}

    aggregates = {}

    for metric in SUMMARY_METRICS:
        values = np.array([r[metric] for r in trial_results if r.get(metric) is not None], dtype=float)
        if values.size:
            aggregates[f"{metric}_mean"] = float(values.mean())
            aggregates[f"{metric}_std"] = float(values.std(ddof=1)) if values.size > 1 else 0.0

    return aggregates
