"""CLI entry point."""
import argparse
import sys

import yaml

from .converter import SVGToJSXConverter
from .utils.logger import get_logger, set_verbosity

logger = get_logger("svgjsx.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg-to-jsx",
        usage="%(prog)s <source_path> <output_path> [options]",
        description="Convert a directory of SVG files into React JSX icon components",
    )

    parser.add_argument("source_path", nargs="?", help="Directory containing .svg files")
    parser.add_argument("output_path", nargs="?", help="Directory to write the generated .js files to")

    parser.add_argument(
        "-r",
        "--recursive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Whether to search for files inside subfolders or not",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to custom YAML config file",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Convert N files concurrently (default: 1, sequential)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    set_verbosity(args.verbose)

    # Build config overrides from CLI args
    overrides = {}

    if args.recursive is not None:
        overrides.setdefault("discovery", {})["recursive"] = args.recursive
    if args.workers:
        overrides.setdefault("processing", {})["workers"] = args.workers

    error = SVGToJSXConverter.check_arguments(args.source_path, args.output_path)
    if error:
        logger.error(error)
        sys.exit(1)

    # Config must load before setup() creates the output directory
    try:
        converter = SVGToJSXConverter(
            config=overrides if overrides else None,
            config_path=args.config,
        )
    except (OSError, LookupError, yaml.YAMLError) as e:
        logger.error(f"Could not load config: {e}")
        sys.exit(1)

    setup = converter.setup(args.source_path, args.output_path)
    if not setup.ok:
        logger.error(setup.error)
        sys.exit(1)

    try:
        results = converter.convert_directory(setup.source, setup.output)
        logger.debug(f"Converted {len(results)} files into {setup.output}")

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
