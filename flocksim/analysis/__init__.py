"""
Analysis module for plotting and exporting simulation results.
"""

from .plotting import plot_classification_over_time
from .export import export_results_to_csv, export_report, calculate_aggregate_stats

__all__ = [
    'plot_classification_over_time',
    'export_results_to_csv',
    'export_report',
    'calculate_aggregate_stats',
]
