import argparse
import logging
import sys
from typing import List, Optional

from fieldcase_generator.ast_codegen import generate_accessors_module
from fieldcase_generator.colored_logging import (
    setup_colored_logging,
    get_colored_logger,
    log_success,
    log_progress,
    log_section,
)
from fieldcase_generator.config_validation import load_config
from fieldcase_generator.domain import render_name, split_identifier
from fieldcase_generator.exceptions import FieldcaseGeneratorError


logger = get_colored_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fieldcase-generator",
        description="Render struct field and enum variant names with transform expressions "
        "and generate static accessor modules.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose DEBUG logging.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output (useful for CI/CD environments).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render a single identifier.")
    render_parser.add_argument("ident", help="Field or variant identifier.")
    render_parser.add_argument("--name", dest="override_name", help="Replacement name.")
    render_parser.add_argument(
        "-t", "--transform", dest="transform_expr", help="Transform expression, e.g. 'c Cc|_'."
    )

    split_parser = subparsers.add_parser("split", help="Show the words an identifier splits into.")
    split_parser.add_argument("ident", help="Field or variant identifier.")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate an accessors module from a YAML definition file."
    )
    generate_parser.add_argument(
        "-c", "--config", required=True, help="Path to the YAML definition file."
    )
    generate_parser.add_argument(
        "-o",
        "--output-file",
        dest="output_file",
        help="Path of the generated module. Overrides the definition file setting.",
    )
    generate_parser.add_argument(
        "--no-format",
        dest="format_code",
        action="store_const",
        const=False,
        default=None,
        help="Do not format the generated module with Black.",
    )
    return parser


def _run_render(args: argparse.Namespace) -> None:
    print(render_name(args.ident, args.override_name, args.transform_expr))


def _run_split(args: argparse.Namespace) -> None:
    for word in split_identifier(args.ident):
        print(f"{word.text}\t{word.kind.value}")


def _run_generate(args: argparse.Namespace) -> None:
    log_section(logger, "Accessor Generation")
    log_progress(logger, "Loading definition file...")
    config = load_config(args.config, args)
    logger.debug(f"Effective configuration loaded: {config}")

    log_progress(logger, "Rendering names and generating accessors module...")
    output_path = generate_accessors_module(config)
    log_success(logger, f"Accessors module written to {output_path}")


COMMANDS = {
    "render": _run_render,
    "split": _run_split,
    "generate": _run_generate,
}


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    # --- Logging Setup ---
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_colored_logging(level=log_level, use_colors=not args.no_color)

    if args.verbose:
        logger.debug("Verbose mode enabled. DEBUG level logging activated.")

    # --- Error Handling ---
    try:
        COMMANDS[args.command](args)
    except FieldcaseGeneratorError as e:
        logger.error(str(e), exc_info=args.verbose)
        sys.exit(1)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}", exc_info=True)
        sys.exit(1)


# --- Script Entry Point ---
if __name__ == "__main__":
    main()
