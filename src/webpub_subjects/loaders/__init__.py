"""
Manifest loaders.

The loading pipeline has two testable layers:
1. extract_subjects() - manifest transformation (testable with dict literals)
2. load_manifest() / load_subjects() - file I/O orchestration
"""

from .manifest import (
    ManifestLoadError,
    extract_subjects,
    load_manifest,
    load_subjects,
    make_subject_records,
    manifest_base_url,
)

__all__ = [
    "ManifestLoadError",
    # Loaders
    "load_manifest",
    "load_subjects",
    # Manifest processors (testable with dict literals)
    "extract_subjects",
    "manifest_base_url",
    "make_subject_records",
]
