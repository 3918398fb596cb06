"""JSON exporter writing subjects in their canonical RWPM form."""

import json
import logging
from pathlib import Path

from ..models import Subject
from ..parsers import encode_subjects

logger = logging.getLogger(__name__)


def export_subjects_json(subjects_by_manifest: dict[str, list[Subject]], output_path: Path) -> Path:
    """
    Export subjects as JSON, keyed by manifest location.

    Args:
        subjects_by_manifest: Subjects by manifest location
        output_path: Path to output JSON file

    Returns:
        Path to the created JSON file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    document = {location: encode_subjects(subjects) for location, subjects in subjects_by_manifest.items()}
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)

    logger.info(f"Canonical subjects saved to: {output_path}")
    return output_path
