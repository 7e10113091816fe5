"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from beatlist.config.config import Config
from beatlist.features.legacy.domain.models import ImageEncoding
from beatlist.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from beatlist.ui.cli.args.options import CLIArgs, ConvertArgs, ValidateArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="beatlist - Convert legacy playlists and validate playlist containers.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)
        common = ArgumentParser._common_flags()

        convert_parser = subparsers.add_parser(
            "convert",
            parents=[common],
            help="Convert legacy playlists matching a glob pattern",
        )
        _ = convert_parser.add_argument(
            "pattern",
            type=str,
            help="Glob pattern of files to convert (use ** for recursion)",
            metavar="GLOB",
        )
        _ = convert_parser.add_argument(
            "--no-custom-data",
            action="store_true",
            help="Skip custom data when converting playlists",
        )
        _ = convert_parser.add_argument(
            "--exit-on-error",
            action="store_true",
            help="Stop and exit with an error status when a conversion fails",
        )
        _ = convert_parser.add_argument(
            "--delete-converted",
            action="store_true",
            help="Delete source files after a successful conversion",
        )
        _ = convert_parser.add_argument(
            "--image-encoding",
            type=str,
            default=None,
            metavar="ENCODING",
            help="Encoding of the legacy cover image (auto, base64, data-uri)",
        )
        _ = convert_parser.add_argument(
            "--workers",
            type=int,
            default=None,
            help="Number of parallel conversions",
        )

        validate_parser = subparsers.add_parser(
            "validate",
            parents=[common],
            help="Check that playlist containers are well formed",
        )
        _ = validate_parser.add_argument(
            "paths",
            type=str,
            nargs="+",
            help="Playlist containers to check",
            metavar="PATH",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Parse ``args_list``, configure logging and resolve config defaults.

        Raises:
            SystemExit: If option values are invalid.
        """
        parsed_args = ArgumentParser.create_parser().parse_args(args_list)

        configuration = Config.load()
        _ = setup_logger(
            log_file=configuration.log_file or DEFAULT_LOG_FILE,
            console_level=ArgumentParser._console_level(parsed_args),
        )

        command: str = parsed_args.command
        if command == "convert":
            return ArgumentParser._process_convert(parsed_args, configuration)
        if command == "validate":
            return ArgumentParser._process_validate(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _common_flags() -> argparse.ArgumentParser:
        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Print verbose information",
        )
        _ = common.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return common

    @staticmethod
    def _console_level(parsed_args: argparse.Namespace) -> int:
        # --quiet wins over --verbose
        if parsed_args.quiet:
            return logging.ERROR
        return logging.DEBUG if parsed_args.verbose else logging.INFO

    @staticmethod
    def _process_convert(parsed_args: argparse.Namespace, configuration: Config) -> ConvertArgs:
        raw_encoding: str = parsed_args.image_encoding or configuration.legacy_image_encoding
        try:
            image_encoding = ImageEncoding.from_user_input(raw_encoding)
        except ValueError as e:
            logger.error("%s", e)
            sys.exit(1)

        workers = parsed_args.workers if parsed_args.workers is not None else configuration.workers
        if workers is not None and workers <= 0:
            logger.error("Workers must be a positive integer; received %s", workers)
            sys.exit(1)

        return ConvertArgs(
            command="convert",
            pattern=parsed_args.pattern,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            preserve_custom_data=configuration.preserve_custom_data and not parsed_args.no_custom_data,
            exit_on_error=parsed_args.exit_on_error,
            delete_converted=parsed_args.delete_converted,
            image_encoding=image_encoding,
            workers=workers,
        )

    @staticmethod
    def _process_validate(parsed_args: argparse.Namespace) -> ValidateArgs:
        return ValidateArgs(
            command="validate",
            paths=[Path(raw) for raw in parsed_args.paths],
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
