"""
Entry point for the bundler command-line interface (exposed as `bundler`).

The bundler collects the source files of the selected languages under the
current directory and concatenates them into a single output file.  A
second subcommand asks the bundle options interactively and saves them as
a response file that can be replayed later.

Usage examples::

    # Bundle every C# and TypeScript file, sorted by name
    bundler bundle -l csharp,ts -o bundle.txt

    # Annotate sources, strip blank lines, sort by extension
    bundler bundle -l all -n -e -s type -a "Ann" -o out/all.txt

    # Create response.rsp interactively, then reuse it
    bundler create-rsp
    bundler bundle @response.rsp

During development the CLI can also be run with ``python -m bundler``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import BundleConfig, BundlerSettings, SortMode, default_log_level
from .discovery import discover
from .errors import BundlerError, NoMatchingFiles
from .languages import supported_languages
from .ordering import order
from .response_file import InteractivePromptCollector, serialize, write_response_file
from .writer import BundleWriter

logger = logging.getLogger("bundler.cli")

TRUE_TOKENS = ("true", "yes", "y", "1", "on")
FALSE_TOKENS = ("false", "no", "n", "0", "off")


class ResponseFileArgumentParser(argparse.ArgumentParser):
    """Argument parser that reads ``@file`` arguments one option per line.

    Each non-blank line is split once on whitespace, so ``--author Ann Lee``
    yields the option and the value ``Ann Lee``.
    """

    def convert_arg_line_to_args(self, arg_line: str) -> List[str]:
        line = arg_line.strip()
        if not line:
            return []
        return line.split(None, 1)


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_TOKENS:
        return True
    if lowered in FALSE_TOKENS:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = ResponseFileArgumentParser(
        prog="bundler",
        description="Bundle source files of selected languages into a single file.",
        fromfile_prefix_chars="@",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=default_log_level(),
        help="Logging verbosity (default from env BUNDLER_LOGLEVEL or WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="{bundle,create-rsp}")

    bundle = subparsers.add_parser("bundle", help="Bundle code files into a single file.")
    bundle.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="File path and name of the bundle (default: bundle.txt).",
    )
    bundle.add_argument(
        "-l", "--language",
        required=True,
        help=f"Languages of code to include, comma separated or 'all'. One of: {', '.join(supported_languages())}.",
    )
    bundle.add_argument(
        "-n", "--note",
        type=parse_bool,
        nargs="?",
        const=True,
        default=False,
        help="Add a source file comment for every bundled file.",
    )
    bundle.add_argument(
        "-s", "--sort",
        choices=[m.value for m in SortMode],
        default=SortMode.BY_NAME.value,
        help="Sort files by name (abc) or by extension (type). Default: abc.",
    )
    bundle.add_argument(
        "-e", "--remove-empty-lines",
        type=parse_bool,
        nargs="?",
        const=True,
        default=False,
        help="Remove empty lines from the code.",
    )
    bundle.add_argument(
        "-a", "--author",
        default=None,
        help="Name of the bundle author.",
    )
    bundle.set_defaults(handler=run_bundle)

    create_rsp = subparsers.add_parser(
        "create-rsp", help="Generate a response file for the bundle command."
    )
    create_rsp.set_defaults(handler=run_create_rsp)
    return parser


def run_bundle(args: argparse.Namespace, settings: BundlerSettings, root: Path) -> int:
    """Validate, discover, order and write.  Returns an exit code."""
    try:
        config = BundleConfig.from_args(
            output=args.output,
            language=args.language,
            note=args.note,
            sort=args.sort,
            remove_empty_lines=args.remove_empty_lines,
            author=args.author,
            encoding=settings.encoding,
        )
        logger.info(
            "Bundle request: root=%s | languages=%s | output=%s | sort=%s",
            root, ",".join(sorted(config.languages)), config.output, config.sort.value,
        )
        files = discover(root, config.extensions, settings.exclude_markers, skip=[config.output])
        if not files:
            raise NoMatchingFiles("No files found matching the specified language.")
        output = BundleWriter(config).write(order(files, config.sort))
    except BundlerError as exc:
        logger.debug("bundle failed", exc_info=True)
        print(f"Error: {exc}")
        return 1
    print(f"Files bundled successfully into {output}")
    return 0


def run_create_rsp(
    args: argparse.Namespace,
    settings: BundlerSettings,
    root: Path,
    collector: Optional[InteractivePromptCollector] = None,
) -> int:
    """Ask for the bundle options and save them as a response file."""
    collector = collector or InteractivePromptCollector()
    target = root / settings.response_file
    try:
        lines = serialize(collector.collect())
        if target.exists():
            print("Warning: The response file already exists. It will be overwritten.")
        write_response_file(lines, target, encoding=settings.encoding)
    except BundlerError as exc:
        print(f"Error: {exc}")
        return 1
    except (OSError, UnicodeError, LookupError) as exc:
        print(f"Error: Failed to write response file {target}: {exc}")
        return 1
    print(f"Response file created: {target}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Primary CLI entry point.  Returns an exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = getattr(logging, args.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(asctime)s %(name)s:%(lineno)d - %(message)s",
    )
    logging.getLogger("bundler").setLevel(level)

    if args.command is None:
        parser.print_help()
        return 2

    root = Path.cwd()
    settings = BundlerSettings.load(root)
    logger.info("Loaded settings from %s", settings.config_path or "defaults")
    return args.handler(args, settings, root)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
