"""Summary exporter combining subject statistics and parse quality metrics."""

import json
import logging
from pathlib import Path
from typing import Optional

from ..metrics import ParseMetrics

logger = logging.getLogger(__name__)


def export_summary_json(stats: dict, output_path: Path, metrics: Optional[ParseMetrics] = None) -> Path:
    """
    Write the extraction summary as JSON.

    The document holds the subject statistics under "subjects" and, when
    metrics are given, the parse quality report under "parse". Subject names
    and schemes are written as UTF-8 text, not escaped.

    Args:
        stats: Dictionary of statistics from print_stats()
        output_path: Path to output JSON file
        metrics: Optional parse metrics of the same run

    Returns:
        Path to the created JSON file
    """
    summary = {"subjects": stats}
    if metrics is not None:
        summary["parse"] = metrics.report()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2, ensure_ascii=False)

    logger.info(f"Summary of {stats.get('total', 0):,} subject(s) saved to: {output_path}")
    return output_path
