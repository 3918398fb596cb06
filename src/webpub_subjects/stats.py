"""Statistics and reporting for extracted subjects."""

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

logger = logging.getLogger(__name__)

# Number of entries shown in distributions
_TOP_N = 10


def print_stats(df: pd.DataFrame, output_path: Optional[Path] = None) -> dict:
    """
    Print and return statistics about the extracted subjects.

    Args:
        df: DataFrame containing subject records (see subjects_dataframe)
        output_path: Optional path to save statistics as text file

    Returns:
        Dictionary of computed statistics
    """
    total = len(df)
    lines: list[str] = []  # Collect output for file

    def output(msg: str = "") -> None:
        """Log message and collect for file output."""
        logger.info(msg)
        lines.append(msg)

    # Helper to safely count non-null values
    def count_notna(col: str) -> int:
        if col in df.columns:
            return int(df[col].notna().sum())
        return 0

    stats = {
        "total": total,
        "manifests": int(df["manifest"].nunique()) if "manifest" in df.columns else 0,
        "unique_names": int(df["name"].nunique()) if "name" in df.columns else 0,
        "with_sort_as": count_notna("sort_as"),
        "with_scheme": count_notna("scheme"),
        "with_code": count_notna("code"),
        "with_links": count_notna("link_hrefs"),
    }

    output("=" * 60)
    output("Statistics")
    output("=" * 60)

    output(f"Total subjects: {stats['total']:,}")

    # Guard against division by zero
    if total == 0:
        logger.warning("No subjects found - statistics unavailable")
        stats["scheme_counts"] = {}
        stats["top_names"] = {}
        _write(lines, output_path)
        return stats

    output(f"Manifests with subjects: {stats['manifests']:,}")
    output(f"Unique names: {stats['unique_names']:,}")

    def log_stat(label: str, key: str) -> None:
        val = stats[key]
        output(f"  {label}: {val:,} ({val / total * 100:.1f}%)")

    output("")
    output("Optional fields:")
    log_stat("With Sort As", "with_sort_as")
    log_stat("With Scheme", "with_scheme")
    log_stat("With Code", "with_code")
    log_stat("With Links", "with_links")

    # Scheme distribution
    stats["scheme_counts"] = {}
    if stats["with_scheme"] > 0:
        output("")
        output("Scheme distribution:")
        scheme_counts = df["scheme"].value_counts()
        stats["scheme_counts"] = {str(k): int(v) for k, v in scheme_counts.items()}
        for scheme, count in scheme_counts.head(_TOP_N).items():
            output(f"  {scheme}: {count:,}")

    # Most frequent names
    output("")
    output("Most frequent subjects:")
    name_counts = df["name"].value_counts().head(_TOP_N)
    stats["top_names"] = {str(k): int(v) for k, v in name_counts.items()}
    for name, count in name_counts.items():
        if pd.notna(name):
            output(f"  {name}: {count:,}")

    _write(lines, output_path)
    return stats


def _write(lines: list[str], output_path: Optional[Path]) -> None:
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write("\n".join(lines))
        logger.info(f"Statistics saved to: {output_path}")
