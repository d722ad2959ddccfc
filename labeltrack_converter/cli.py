"""
Command-line interface for the Label Track Converter.

This module provides the CLI for converting a bookmark export (XML) into
one label track per referenced media file, bundled as a zip archive.
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from labeltrack_converter import __version__
from labeltrack_converter.config.configuration import Configuration
from labeltrack_converter.config.pydantic_config import ConfigurationManager
from labeltrack_converter.core.converter import BookmarkConverter
from labeltrack_converter.core.data_models import DEFAULT_ARCHIVE_NAME
from labeltrack_converter.core.exporters.base import ExportError
from labeltrack_converter.utils.error_handler import (
    ConfigurationError,
    LabelTrackConverterError,
    ValidationError,
    get_user_message,
)
from labeltrack_converter.utils.logging_setup import setup_logging
from labeltrack_converter.utils.progress import (
    ReadProgressReporter,
    print_conversion_summary,
)
from labeltrack_converter.utils.validation import (
    validate_config_file,
    validate_conflicting_arguments,
    validate_input_file,
    validate_output_file,
)


class CLIInterface:
    """Command line interface for bookmark to label track conversion."""

    def __init__(self, console: Console = None):
        self.parser = self._create_parser()
        self.console = console or Console(stderr=True)

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="labeltrack-converter",
            description=(
                "Label Track Converter - "
                "Convert bookmark exports into zipped label tracks"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=f"""
Examples:
  labeltrack-converter --input bookmarks.xml
  labeltrack-converter --input bookmarks.xml --output exports/
  labeltrack-converter --input bookmarks.xml --output session.zip --verbose
  labeltrack-converter --input bookmarks.xml --encoding latin-1 --no-progress
  labeltrack-converter --create-config labeltrack_config.toml

Output:
  One entry per referenced media file, named <fileName>_labelTrack.txt.
  Each entry starts with "0<TAB>0<TAB><fileName>" followed by one
  "<position><TAB><position><TAB><index>" line per bookmark.
  Without --output the archive is written to ./{DEFAULT_ARCHIVE_NAME}.

Configuration:
  Settings can be provided in a TOML or JSON file via --config.
  Environment variables: LABELTRACK_ENCODING, LABELTRACK_LOG_LEVEL
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--create-config",
            metavar="PATH",
            help="Write a sample configuration file (.toml or .json) and exit",
        )
        parser.add_argument(
            "--input",
            "-i",
            help="Bookmark export file (XML)",
        )
        parser.add_argument(
            "--output",
            "-o",
            help=f"Output archive (.zip) or directory (default: ./{DEFAULT_ARCHIVE_NAME})",
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Custom configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--encoding",
            "-e",
            help="Text encoding of the input file (default: utf-8)",
        )
        parser.add_argument(
            "--no-progress",
            action="store_true",
            help="Do not show the progress bar",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable debug logging, including every skipped bookmark",
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Only log warnings and errors",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate all arguments and return processed values.

        Args:
            args: Parsed arguments from argparse

        Returns:
            Dictionary of validated and processed arguments

        Raises:
            ValidationError: If any validation fails
        """
        validate_conflicting_arguments(args.verbose, args.quiet)

        return {
            "input_path": validate_input_file(args.input),
            "output": args.output,
            "config_path": validate_config_file(args.config),
            "encoding": args.encoding,
            "no_progress": args.no_progress,
            "verbose": args.verbose,
            "quiet": args.quiet,
        }

    def process_arguments(self, validated_args: dict) -> Configuration:
        """
        Process validated arguments and set up configuration.

        Args:
            validated_args: Dictionary of validated arguments

        Returns:
            Configured Configuration object

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        config = Configuration(validated_args["config_path"])
        config.update_from_args(validated_args)

        setup_logging(config)

        return config

    def resolve_paths(self, validated_args: dict, config: Configuration) -> None:
        """
        Apply configured limits and names to the input and output paths.

        Without --output, or with a directory, the archive takes the
        configured archive name.

        Raises:
            ValidationError: If the input is too large or the output unusable
        """
        validated_args["input_path"] = validate_input_file(
            validated_args["input_path"], max_bytes=config.max_file_size_bytes
        )
        validated_args["output_path"] = validate_output_file(
            validated_args["output"], default_name=config.archive_name
        )

    def _handle_create_config(self, output: str) -> int:
        """Handle creation of a sample configuration file."""
        path = Path(output)
        format = "json" if path.suffix.lower() == ".json" else "toml"

        if path.exists():
            self.console.print(f"[red]Configuration file already exists: {path}[/red]")
            return 1

        try:
            ConfigurationManager.create_sample_config(path, format)
        except OSError as e:
            self.console.print(f"[red]Error creating configuration file: {e}[/red]")
            return 1

        self.console.print(f"[green]Created configuration file: {path}[/green]")
        self.console.print(
            f"Use with: labeltrack-converter --config {path} --input bookmarks.xml"
        )
        return 0

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._handle_create_config(parsed_args.create_config)

            validated_args = self.validate_args(parsed_args)
            config = self.process_arguments(validated_args)
            self.resolve_paths(validated_args, config)

            logger = logging.getLogger(__name__)
            logger.info("Label Track Converter CLI starting")
            logger.info(f"Input file: {validated_args['input_path']}")
            logger.info(f"Output file: {validated_args['output_path']}")
            logger.debug(f"Configuration: {config.to_dict()}")

            converter = BookmarkConverter(config.config)
            with ReadProgressReporter(
                self.console, enabled=config.show_progress
            ) as reporter:
                result = converter.convert_file(
                    validated_args["input_path"],
                    validated_args["output_path"],
                    progress=reporter,
                )

            print_conversion_summary(
                self.console,
                result.output_path,
                [entry.name for entry in result.entries],
                result.get_statistics(),
                result.warning_message,
            )
            return 0

        except ValidationError as e:
            self.console.print(f"Validation Error: {e}", markup=False, style="red")
            return 1
        except ConfigurationError as e:
            self.console.print(str(e), markup=False, style="red")
            return 1
        except (LabelTrackConverterError, ExportError) as e:
            self.console.print(get_user_message(e), markup=False, style="red")
            logging.getLogger(__name__).error(f"Conversion failed: {e}")
            return 1
        except Exception as e:
            self.console.print(f"Error: {e}", markup=False, style="red")
            logging.getLogger(__name__).exception("Unexpected error in CLI")
            return 1


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
