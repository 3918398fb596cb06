"""Web publication manifest loader.

Reads manifest files and extracts the subjects of their metadata. The loading
pipeline has two testable layers:
1. extract_subjects() - manifest dict to subjects (testable with dict literals)
2. load_manifest() / load_subjects() - file I/O orchestration
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from tqdm import tqdm

from ..metrics import get_metrics
from ..models import JsonKind, Subject, SubjectRecord, json_kind, make_subject_record
from ..parse_warnings import JsonWarning, LoggingWarningLogger, WarningLogger
from ..parsers import HrefNormalizer, decode_subjects, href_normalizer_for_base, identity_href_normalizer
from ..parsers.href import is_absolute_href

logger = logging.getLogger(__name__)


class ManifestLoadError(Exception):
    """A manifest couldn't be read or isn't a JSON object."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"Cannot load manifest {location}: {reason}")
        self.location = location
        self.reason = reason


def load_manifest(path: Union[str, Path]) -> dict:
    """
    Read a manifest file.

    Args:
        path: Path of the manifest file

    Returns:
        Parsed manifest

    Raises:
        ManifestLoadError: If the file can't be read, isn't valid JSON, or
            isn't a JSON object
    """
    try:
        with open(path, encoding="utf-8") as f:
            manifest = json.load(f)
    except OSError as e:
        raise ManifestLoadError(str(path), str(e)) from e
    except ValueError as e:
        raise ManifestLoadError(str(path), f"invalid JSON ({e})") from e

    if json_kind(manifest) is not JsonKind.OBJECT:
        raise ManifestLoadError(str(path), "manifest is not a JSON object")
    return manifest


def manifest_base_url(manifest: dict) -> Optional[str]:
    """
    Find the URL relative hrefs of a manifest resolve against.

    Returns:
        The absolute href of the link with rel "self", or None
    """
    links = manifest.get("links")
    if json_kind(links) is not JsonKind.ARRAY:
        return None
    for link in links:
        if json_kind(link) is not JsonKind.OBJECT:
            continue
        rel = link.get("rel")
        rels = rel if isinstance(rel, list) else [rel]
        href = link.get("href")
        if "self" in rels and isinstance(href, str) and is_absolute_href(href):
            return href
    return None


def extract_subjects(
    manifest: dict,
    normalize_href: HrefNormalizer = identity_href_normalizer,
    warnings: Optional[WarningLogger] = None,
) -> list[Subject]:
    """
    Extract the subjects of a manifest's metadata.

    Returns:
        Subjects in manifest order; empty if there is no metadata or subject
    """
    metadata = manifest.get("metadata")
    if json_kind(metadata) is not JsonKind.OBJECT:
        return []
    return decode_subjects(metadata.get("subject"), normalize_href, warnings)


class _ManifestWarnings:
    """Logs, counts, and forwards the warnings of one manifest."""

    def __init__(self, location: str, forward: Optional[WarningLogger]) -> None:
        self.logged = LoggingWarningLogger(logger, context=location)
        self.forward = forward

    def log(self, warning: JsonWarning) -> None:
        get_metrics().record_warning(warning)
        self.logged.log(warning)
        if self.forward is not None:
            self.forward.log(warning)


def load_subjects(
    locations: Iterable[str],
    base_url: Optional[str] = None,
    warnings: Optional[WarningLogger] = None,
) -> dict[str, list[Subject]]:
    """
    Load subjects from several manifests.

    Manifests that can't be loaded are logged and skipped.

    Args:
        locations: File paths of manifests
        base_url: Base URL for relative link hrefs; defaults to each
            manifest's self link (see manifest_base_url)
        warnings: Optional sink receiving every parsing warning

    Returns:
        Subjects by manifest location, in input order
    """
    locations = list(locations)
    metrics = get_metrics()
    subjects_by_manifest: dict[str, list[Subject]] = {}

    for location in tqdm(locations, desc="Manifests", unit="manifest"):
        try:
            manifest = load_manifest(location)
        except ManifestLoadError as e:
            logger.error(str(e))
            metrics.record_manifest_failure()
            continue

        normalize_href = href_normalizer_for_base(base_url or manifest_base_url(manifest))
        subjects = extract_subjects(manifest, normalize_href, _ManifestWarnings(location, warnings))
        metrics.record_manifest(len(subjects))
        logger.debug(f"  {location}: {len(subjects)} subject(s)")
        subjects_by_manifest[location] = subjects

    logger.info(f"Loaded {sum(len(s) for s in subjects_by_manifest.values()):,} subjects from {len(subjects_by_manifest):,} manifest(s)")
    return subjects_by_manifest


def make_subject_records(subjects_by_manifest: dict[str, list[Subject]]) -> list[SubjectRecord]:
    """Flatten loaded subjects into records for tabular export."""
    return [
        make_subject_record(location, position, subject)
        for location, subjects in subjects_by_manifest.items()
        for position, subject in enumerate(subjects)
    ]
