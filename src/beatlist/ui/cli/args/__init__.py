"""Command line argument handling package."""

from beatlist.ui.cli.args.parser import ArgumentParser
from beatlist.ui.cli.args.options import CLIArgs, ConvertArgs, ValidateArgs

__all__ = ["ArgumentParser", "CLIArgs", "ConvertArgs", "ValidateArgs"]
