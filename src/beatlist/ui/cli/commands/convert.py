"""src/beatlist/ui/cli/commands/convert.py
What: Execute batch conversions of legacy playlists via the CLI.
Why: Bridge parsed arguments with the batch converter and its summary output.
"""

import time
from typing import override

from beatlist.features.conversion import BatchConverter, ConversionRequest, ConversionResult
from beatlist.ui.cli.args.options import ConvertArgs
from beatlist.ui.cli.commands.executor import CommandExecutor


class ConvertCommand(CommandExecutor[ConvertArgs, ConversionResult]):
    """Command converting every legacy playlist matching a glob."""

    converter: BatchConverter
    request: ConversionRequest

    def __init__(self, args: ConvertArgs) -> None:
        super().__init__(args)
        self.converter = BatchConverter()
        self.request = ConversionRequest(
            pattern=args.pattern,
            preserve_custom_data=args.preserve_custom_data,
            image_encoding=args.image_encoding,
            exit_on_error=args.exit_on_error,
            delete_converted=args.delete_converted,
            workers=args.workers,
        )

    @override
    def execute(self) -> list[ConversionResult]:
        """Execute the batch conversion and print the summary.

        Returns:
            List of conversion results.
        """
        started = time.perf_counter()
        if self.args.quiet:
            results = self.converter.convert(self.request)
        else:
            results = self.progress_display.run_with_converter(self.converter, self.request)
        elapsed = time.perf_counter() - started

        self.result_display.show_conversion_results(results, elapsed, quiet=self.args.quiet)
        return results

    @override
    def failed(self, results: list[ConversionResult]) -> bool:
        return self.args.exit_on_error and any(not result.success for result in results)
