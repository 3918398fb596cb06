"""
Webpub Subjects

Tolerant conversion between Readium Web Publication Manifest subjects and
immutable Python values.

Public API:
- Models: Subject, Link, LocalizedString, JsonKind
- Parsers: decode_subject(), decode_subjects(), encode_subject() and their
  localized string / link collaborators
- Warnings: JsonWarning, WarningLogger, ListWarningLogger, LoggingWarningLogger
- Loaders: load_manifest(), load_subjects(), extract_subjects()
- Exporters, metrics and stats for batch extraction
"""

__version__ = "0.1.0"

# Export config constants
from .config import DEFAULT_OUTPUT_DIR, UNDEFINED_LANGUAGE

# Export exporters
from .exporters import export_csv, export_subjects_json, export_summary_json, subjects_dataframe

# Export loaders
from .loaders import ManifestLoadError, extract_subjects, load_manifest, load_subjects, make_subject_records, manifest_base_url

# Export metrics
from .metrics import ParseMetrics, get_metrics, reset_metrics

# Export models
from .models import JsonKind, Link, LocalizedString, Subject, SubjectRecord, json_kind, serialize_subject

# Export warnings
from .parse_warnings import JsonWarning, ListWarningLogger, LoggingWarningLogger, Severity, WarningKind, WarningLogger

# Export all parsers
from .parsers import (
    HrefNormalizer,
    decode_link,
    decode_links,
    decode_localized_string,
    decode_subject,
    decode_subjects,
    encode_link,
    encode_links,
    encode_localized_string,
    encode_subject,
    encode_subjects,
    href_normalizer_for_base,
    identity_href_normalizer,
)

# Export stats
from .stats import print_stats

__all__ = [
    # Version
    "__version__",
    # Config
    "DEFAULT_OUTPUT_DIR",
    "UNDEFINED_LANGUAGE",
    # Models
    "JsonKind",
    "json_kind",
    "LocalizedString",
    "Link",
    "Subject",
    "SubjectRecord",
    "serialize_subject",
    # Warnings
    "WarningKind",
    "Severity",
    "JsonWarning",
    "WarningLogger",
    "ListWarningLogger",
    "LoggingWarningLogger",
    # Parsers
    "HrefNormalizer",
    "identity_href_normalizer",
    "href_normalizer_for_base",
    "decode_localized_string",
    "encode_localized_string",
    "decode_link",
    "decode_links",
    "encode_link",
    "encode_links",
    "decode_subject",
    "decode_subjects",
    "encode_subject",
    "encode_subjects",
    # Loaders
    "ManifestLoadError",
    "load_manifest",
    "load_subjects",
    "extract_subjects",
    "manifest_base_url",
    "make_subject_records",
    # Metrics
    "ParseMetrics",
    "get_metrics",
    "reset_metrics",
    # Stats
    "print_stats",
    # Exporters
    "subjects_dataframe",
    "export_csv",
    "export_subjects_json",
    "export_summary_json",
]
