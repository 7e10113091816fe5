"""src/beatlist/ui/cli/commands/validate.py
What: Check playlist containers via the CLI.
Why: Surface the nested error location of broken containers without converting anything.
"""

from typing import override

from beatlist.features.conversion import ValidationResult, validate_containers
from beatlist.ui.cli.args.options import ValidateArgs
from beatlist.ui.cli.commands.executor import CommandExecutor


class ValidateCommand(CommandExecutor[ValidateArgs, ValidationResult]):
    """Command validating one or more playlist containers."""

    @override
    def execute(self) -> list[ValidationResult]:
        results = validate_containers(self.args.paths)
        self.result_display.show_validation_results(results, quiet=self.args.quiet)
        return results

    @override
    def failed(self, results: list[ValidationResult]) -> bool:
        return any(not result.valid for result in results)
