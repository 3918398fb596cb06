"""CSV exporter for extracted subjects."""

import csv
import logging
from pathlib import Path

import pandas as pd

from ..models import SubjectRecord, serialize_subject

logger = logging.getLogger(__name__)

# Column order of the exported table
COLUMNS = ["manifest", "position", "name", "sort_as", "scheme", "code", "languages", "link_hrefs"]


def subjects_dataframe(records: list[SubjectRecord]) -> pd.DataFrame:
    """
    Build a DataFrame from subject records.

    List fields are serialized as pipe-separated strings; an empty input
    still yields the expected columns.
    """
    return pd.DataFrame([serialize_subject(r) for r in records], columns=COLUMNS)


def export_csv(
    df: pd.DataFrame,
    output_path: Path,
    quoting: int = csv.QUOTE_NONNUMERIC,
) -> Path:
    """
    Export subjects to CSV.

    Rows are written in the order of the DataFrame, which keeps manifests in
    load order and subjects in manifest order.

    Args:
        df: DataFrame containing subject records
        output_path: Path to output CSV file
        quoting: CSV quoting style (default: QUOTE_NONNUMERIC)

    Returns:
        Path to the created CSV file
    """
    # Ensure parent directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df.to_csv(output_path, index=False, quoting=quoting)
    logger.info(f"Subjects saved to: {output_path}")

    return output_path
