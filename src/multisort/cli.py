#!/usr/bin/env python3
"""
multisort CLI — sort JSON records by one or more field keys.
Uses the same core engine as the library: first key decides, later keys break ties.
The input file is never modified; results go to stdout or to --output.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, List, NoReturn

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from multisort.aliases import EPILOG_TEXT, KEY_HELP_TEXT
from multisort.commands import SortCommand
from multisort.core.params import SortParams
from multisort.services.record_service import STDIO_PATH


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows / non-UTF-8 consoles to prevent UnicodeEncodeError
        sys.stdout.reconfigure(encoding='utf-8')
        sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="multisort",
            description="multisort — sort JSON records by multiple keys",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="JSON file with an array of records ('-' for stdin)"
        )
        parser.add_argument(
            "--key", "-k",
            action="append",
            required=True,
            type=str,
            dest="keys",
            metavar="KEY",
            help=KEY_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--output", "-o",
            default=STDIO_PATH,
            type=str,
            metavar='',
            help="Where to write sorted records ('-' for stdout). Default: stdout"
        )
        parser.add_argument(
            "--indent",
            default=2,
            type=int,
            metavar='',
            help="JSON indentation of the output. Default: 2"
        )
        parser.add_argument(
            "--compact",
            action="store_true",
            help="Write the output on a single line (overrides --indent)"
        )
        parser.add_argument(
            "--strict-keys",
            action="store_true",
            dest="strict_keys",
            help="Fail if a record lacks one of the keys instead of sorting it last"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and timing"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        if args.input != STDIO_PATH:
            input_path = Path(args.input).expanduser()
            if not input_path.exists():
                self.error_exit(f"File not found: {args.input}")
            if not input_path.is_file():
                self.error_exit(f"Path is not a file: {args.input}")

        if args.output != STDIO_PATH:
            output_dir = Path(args.output).expanduser().resolve().parent
            if not output_dir.is_dir():
                self.error_exit(f"Output directory not found: {output_dir}")
            if Path(args.output).expanduser().resolve() == Path(args.input).expanduser().resolve():
                self.warning("Output path equals input path; the input file will be overwritten")

        if args.indent < 0:
            self.error_exit("Indent cannot be negative")

    def create_params(self, args: argparse.Namespace) -> SortParams:
        """Create SortParams from CLI arguments."""
        try:
            return SortParams.from_key_specs(
                input_path=args.input,
                key_specs=args.keys,
                output_path=args.output,
                strict_keys=args.strict_keys,
                indent=None if args.compact else args.indent,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_sort(self, params: SortParams) -> List[Any]:
        """Execute sorting workflow and write the result."""
        command = SortCommand()
        if self.verbose:
            keys_display = ", ".join(
                f"{key.field} ({key.direction.display_name})" for key in params.keys
            )
            print(f"Sorting by: {keys_display}", file=sys.stderr)

        try:
            records = command.execute(params)
            command.write(params)
        except KeyError as e:
            self.error_exit(f"Missing sort key: {e.args[0] if e.args else e}")
        except TypeError as e:
            self.error_exit(f"Values cannot be compared: {e}")
        except (OSError, ValueError) as e:
            self.error_exit(f"Sorting failed: {e}")

        return records

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        records = self.run_sort(params)

        if not self.quiet and params.output_path != STDIO_PATH:
            print(f"✅ Sorted {len(records)} records → {params.output_path}", file=sys.stderr)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"Completed in {elapsed:.3f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
