"""Parse quality metrics collection during manifest processing."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from .config import MAX_WARNING_SAMPLES
from .parse_warnings import JsonWarning

logger = logging.getLogger(__name__)


@dataclass
class ParseMetrics:
    """Collects parse quality metrics while extracting subjects."""

    # Manifests
    manifests_total: int = 0
    manifests_failed: int = 0

    # Subjects
    subjects_total: int = 0
    manifests_without_subjects: int = 0

    # Warnings per kind, with a sample of messages for debugging
    warnings: Counter = field(default_factory=Counter)
    warning_samples: list = field(default_factory=list)

    def record_manifest(self, subject_count: int) -> None:
        """Record a successfully parsed manifest."""
        self.manifests_total += 1
        self.subjects_total += subject_count
        if subject_count == 0:
            self.manifests_without_subjects += 1

    def record_manifest_failure(self) -> None:
        """Record a manifest that couldn't be loaded."""
        self.manifests_total += 1
        self.manifests_failed += 1

    def record_warning(self, warning: JsonWarning) -> None:
        """Record a parsing warning."""
        self.warnings[warning.kind.value] += 1
        if len(self.warning_samples) < MAX_WARNING_SAMPLES:
            self.warning_samples.append(str(warning))

    @property
    def warnings_total(self) -> int:
        return sum(self.warnings.values())

    def report(self) -> dict:
        """Generate parse quality report."""
        loaded = self.manifests_total - self.manifests_failed
        return {
            "manifests": {
                "total": self.manifests_total,
                "failed": self.manifests_failed,
                "without_subjects": self.manifests_without_subjects,
                "load_rate": (f"{loaded / self.manifests_total * 100:.1f}%" if self.manifests_total > 0 else "N/A"),
            },
            "subjects": self.subjects_total,
            "warnings": dict(self.warnings),
        }

    def print_report(self) -> None:
        """Print parse quality metrics to logger."""
        logger.info("=" * 60)
        logger.info("Parse Quality Metrics")
        logger.info("=" * 60)

        logger.info("")
        logger.info("Manifests:")
        logger.info(f"  Total processed: {self.manifests_total:,}")
        if self.manifests_failed > 0:
            logger.info(f"  Failed to load: {self.manifests_failed:,}")
        if self.manifests_without_subjects > 0:
            logger.info(f"  Without subjects: {self.manifests_without_subjects:,}")
        logger.info(f"Subjects extracted: {self.subjects_total:,}")

        if self.warnings:
            logger.info("")
            logger.info(f"Warnings: {self.warnings_total:,}")
            for kind, count in self.warnings.most_common():
                logger.info(f"  {kind}: {count:,}")
            if self.warning_samples:
                logger.info("  Samples:")
                for sample in self.warning_samples:
                    logger.info(f"    {sample}")

    def reset(self) -> None:
        """Reset all metrics."""
        self.manifests_total = 0
        self.manifests_failed = 0
        self.subjects_total = 0
        self.manifests_without_subjects = 0
        self.warnings.clear()
        self.warning_samples.clear()


# Global metrics instance
_metrics: Optional[ParseMetrics] = None


def get_metrics() -> ParseMetrics:
    """Get the global metrics instance, creating if needed."""
    global _metrics
    if _metrics is None:
        _metrics = ParseMetrics()
    return _metrics


def reset_metrics() -> None:
    """Reset global metrics."""
    global _metrics
    if _metrics is not None:
        _metrics.reset()
