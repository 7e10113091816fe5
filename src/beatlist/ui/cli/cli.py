"""Command line interface for beatlist."""

import sys
from typing import Final, final

from beatlist.platform.logging import logger
from beatlist.ui.cli.args import ArgumentParser
from beatlist.ui.cli.args.options import CLIArgs, ConvertArgs, ValidateArgs
from beatlist.ui.cli.commands import ConvertCommand, ValidateCommand

EXIT_FAILURE: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130


@final
class CommandProcessor:
    """Dispatch parsed arguments to a command and map the outcome to an exit status."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Parse ``args_list`` (``sys.argv`` when ``None``) and run the command.

        Raises:
            SystemExit: ``1`` when the command reports failure or crashes,
                ``130`` when interrupted.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            if not CommandProcessor._run(args):
                sys.exit(EXIT_FAILURE)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", e)
            sys.exit(EXIT_FAILURE)

    @staticmethod
    def _run(args: CLIArgs) -> bool:
        """Execute the command for ``args``; ``False`` means exit with an error status."""

        if isinstance(args, ConvertArgs):
            convert = ConvertCommand(args)
            return not convert.failed(convert.execute())

        assert isinstance(args, ValidateArgs)
        validate = ValidateCommand(args)
        return not validate.failed(validate.execute())


def main() -> int:
    """Console script entry point.

    Returns:
        int: ``0``; failures leave through ``sys.exit`` inside
        :meth:`CommandProcessor.process_command`.
    """
    CommandProcessor.process_command()
    return 0
