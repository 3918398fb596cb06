"""
Data exporters for extracted subjects.

Each exporter handles a specific output format (CSV, JSON, summary JSON).
"""

from .csv import export_csv, subjects_dataframe
from .json import export_subjects_json
from .summary import export_summary_json

__all__ = [
    "subjects_dataframe",
    "export_csv",
    "export_subjects_json",
    "export_summary_json",
]
