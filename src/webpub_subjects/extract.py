"""The extract command: manifests in, subject tables and summaries out."""

import argparse
import logging
from pathlib import Path

from .config import DEFAULT_OUTPUT_DIR, DEFAULT_OUTPUT_FILE
from .exporters import export_csv, export_subjects_json, export_summary_json, subjects_dataframe
from .loaders import load_subjects, make_subject_records
from .metrics import get_metrics, reset_metrics
from .parse_warnings import ListWarningLogger
from .stats import print_stats

logger = logging.getLogger(__name__)

EPILOG = """
Examples:
  %(prog)s manifest.json                                  # Use default output directory
  %(prog)s a.json b.json --output-file subjects.csv       # Custom output filename
  %(prog)s manifest.json --base-url https://example.com/  # Resolve relative link hrefs
  %(prog)s manifest.json --strict                         # Fail on any parsing warning
"""


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the extract options on a (sub)parser."""
    parser.add_argument(
        "sources",
        nargs="+",
        type=Path,
        help="Manifest files",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--output-file",
        type=str,
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output CSV filename (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        help="Base URL for relative link hrefs (default: the manifest's self link)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error if any parsing warning was logged",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose/debug logging",
    )


def run(args: argparse.Namespace) -> int:
    """Extract subjects from args.sources and write the outputs."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    reset_metrics()
    metrics = get_metrics()

    logger.info(f"Extracting subjects from {len(args.sources):,} manifest(s) into {args.output_dir}")

    warnings = ListWarningLogger()
    subjects_by_manifest = load_subjects([str(source) for source in args.sources], base_url=args.base_url, warnings=warnings)
    if not subjects_by_manifest:
        logger.error("No manifest could be loaded!")
        return 1

    args.output_dir.mkdir(parents=True, exist_ok=True)
    df = subjects_dataframe(make_subject_records(subjects_by_manifest))
    stats = print_stats(df, output_path=args.output_dir / "summary.txt")

    export_csv(df, args.output_dir / args.output_file)
    export_subjects_json(subjects_by_manifest, args.output_dir / "subjects.json")
    export_summary_json(stats, args.output_dir / "summary.json", metrics=metrics)
    metrics.print_report()

    if args.strict and len(warnings) > 0:
        logger.error(f"{len(warnings):,} parsing warning(s) logged (--strict)")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="webpub_subjects extract",
        description="Extract subjects from web publication manifests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    add_arguments(parser)
    return run(parser.parse_args(argv))
