"""Base for the CLI subcommands."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from beatlist.ui.cli.args.options import CLIArgs
from beatlist.ui.cli.display.progress import ProgressDisplay
from beatlist.ui.cli.display.result import ResultDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)
ResultT = TypeVar("ResultT")


class CommandExecutor(ABC, Generic[ArgsT, ResultT]):
    """A subcommand: runs once over its arguments, then judges the outcome.

    Subclasses print their own output through ``result_display`` and
    decide via :meth:`failed` whether the process exits non-zero.
    """

    def __init__(self, args: ArgsT) -> None:
        self.args: ArgsT = args
        self.progress_display: ProgressDisplay = ProgressDisplay()
        self.result_display: ResultDisplay = ResultDisplay()

    @abstractmethod
    def execute(self) -> list[ResultT]:
        """Run the command and return one result per input file."""

    @abstractmethod
    def failed(self, results: list[ResultT]) -> bool:
        """Whether ``results`` should end the process with an error status."""
