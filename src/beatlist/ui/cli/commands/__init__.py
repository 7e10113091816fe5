"""Command execution package for CLI."""

from beatlist.ui.cli.commands.executor import CommandExecutor
from beatlist.ui.cli.commands.convert import ConvertCommand
from beatlist.ui.cli.commands.validate import ValidateCommand

__all__ = ["CommandExecutor", "ConvertCommand", "ValidateCommand"]
