"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from beatlist.features.legacy import ImageEncoding
from beatlist.platform.logging import DEFAULT_LOG_FILE
from beatlist.ui.cli.args import ArgumentParser, ConvertArgs, ValidateArgs


@pytest.fixture
def mock_config(mocker: MockerFixture) -> MagicMock:
    """Patch configuration loading with defaults."""

    config_class = mocker.patch("beatlist.ui.cli.args.parser.Config")
    loaded = config_class.load.return_value
    loaded.log_file = None
    loaded.preserve_custom_data = True
    loaded.legacy_image_encoding = "auto"
    loaded.workers = None
    return config_class


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep tests from attaching real log files."""

    return mocker.patch("beatlist.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    convert_args: Namespace = parser.parse_args(["convert", "lists/*.bplist"])
    assert convert_args.command == "convert"
    assert convert_args.pattern == "lists/*.bplist"
    assert convert_args.image_encoding is None
    assert convert_args.workers is None

    validate_args: Namespace = parser.parse_args(["validate", "a.blist", "b.blist"])
    assert validate_args.command == "validate"
    assert validate_args.paths == ["a.blist", "b.blist"]

    all_flags = parser.parse_args(
        [
            "convert",
            "**/*.bplist",
            "--verbose",
            "--no-custom-data",
            "--exit-on-error",
            "--delete-converted",
            "--image-encoding",
            "data-uri",
            "--workers",
            "4",
        ]
    )
    assert all_flags.verbose and all_flags.no_custom_data
    assert all_flags.exit_on_error and all_flags.delete_converted
    assert all_flags.image_encoding == "data-uri"
    assert all_flags.workers == 4


def test_parser_requires_a_command() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args([])


def test_process_args_convert_defaults(mock_config: MagicMock, mock_setup_logger: MagicMock) -> None:
    """Process convert arguments with configuration defaults."""

    args = ArgumentParser.process_args(["convert", "*.bplist"])

    assert isinstance(args, ConvertArgs)
    assert args.pattern == "*.bplist"
    assert args.preserve_custom_data
    assert not args.exit_on_error and not args.delete_converted
    assert args.image_encoding is ImageEncoding.AUTO
    assert args.workers is None
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


def test_process_args_convert_flags(mock_config: MagicMock, mock_setup_logger: MagicMock) -> None:
    custom_log_path = Path("/tmp/custom.log")
    mock_config.load.return_value.log_file = custom_log_path

    args = ArgumentParser.process_args(
        [
            "convert",
            "*.bplist",
            "--quiet",
            "--no-custom-data",
            "--exit-on-error",
            "--delete-converted",
            "--image-encoding",
            "BASE64",
            "--workers",
            "2",
        ]
    )

    assert isinstance(args, ConvertArgs)
    assert not args.preserve_custom_data
    assert args.exit_on_error and args.delete_converted and args.quiet
    assert args.image_encoding is ImageEncoding.BASE64
    assert args.workers == 2
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR
    assert mock_setup_logger.call_args.kwargs["log_file"] == custom_log_path


def test_configuration_supplies_convert_defaults(
    mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    _ = mock_setup_logger
    loaded = mock_config.load.return_value
    loaded.preserve_custom_data = False
    loaded.legacy_image_encoding = "data_uri"
    loaded.workers = 6

    args = ArgumentParser.process_args(["convert", "*.bplist", "-v"])

    assert isinstance(args, ConvertArgs)
    assert not args.preserve_custom_data
    assert args.image_encoding is ImageEncoding.DATA_URI
    assert args.workers == 6
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_process_args_validate(mock_config: MagicMock, mock_setup_logger: MagicMock) -> None:
    _ = (mock_config, mock_setup_logger)

    args = ArgumentParser.process_args(["validate", "a.blist", "dir/b.blist"])

    assert isinstance(args, ValidateArgs)
    assert args.paths == [Path("a.blist"), Path("dir/b.blist")]


def test_process_args_invalid_encoding(mock_config: MagicMock, mock_setup_logger: MagicMock) -> None:
    """Unknown image encodings should terminate parsing."""

    _ = (mock_config, mock_setup_logger)
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["convert", "*.bplist", "--image-encoding", "hex"])
    assert excinfo.value.code == 1


@pytest.mark.parametrize("workers", ["0", "-3"])
def test_process_args_invalid_workers(
    workers: str, mock_config: MagicMock, mock_setup_logger: MagicMock
) -> None:
    """Non-positive worker counts should terminate parsing."""

    _ = (mock_config, mock_setup_logger)
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["convert", "*.bplist", "--workers", workers])
    assert excinfo.value.code == 1
