"""Entry point for ``python -m webpub_subjects <command>``."""

import argparse
import sys

from . import __version__, extract


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webpub_subjects",
        description="Tools for web publication manifest subjects",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    extract_parser = commands.add_parser(
        "extract",
        help="Extract subjects from manifest files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=extract.EPILOG,
    )
    extract.add_arguments(extract_parser)
    extract_parser.set_defaults(handler=extract.run)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
