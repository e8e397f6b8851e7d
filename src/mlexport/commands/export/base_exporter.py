"""
Base exporter for export commands.

Resolves export options from flags and stored settings, opens the client
and destination, drives the progress bar and turns export errors into a
clean CLI exit.
"""

from typing import Callable, Optional

import typer
from tqdm import tqdm

from mlexport.api import MarketplaceClient
from mlexport.constants import DEFAULT_BASE_URL, DEFAULT_FORMAT, DEFAULT_LIMIT
from mlexport.export import ExportError, ExportOptions, ExportResult, Position
from mlexport.export.sink import Destination
from mlexport.logging import get_logger
from mlexport.utils.config_store import ConfigStore
from mlexport.utils.console import error, success

ExportCall = Callable[[MarketplaceClient, Destination, Callable], ExportResult]


class BaseExporter:
    """Shared plumbing for the search and orders export commands"""

    def __init__(self):
        self.config_store = ConfigStore()
        self.logger = get_logger(self.__class__.__module__)

    def resolve_options(
        self,
        output_format: Optional[str],
        include_extra_column: bool,
        offset: int,
        limit: Optional[int],
    ) -> ExportOptions:
        """Build export options: flag > stored setting > default"""
        settings = self.config_store.get_settings()
        try:
            return ExportOptions(
                output_format=output_format or settings.get("format", DEFAULT_FORMAT),
                include_extra_column=include_extra_column,
                offset=offset,
                limit=limit if limit is not None else int(settings.get("limit", DEFAULT_LIMIT)),
            )
        except ValueError as e:
            error(str(e))
            raise typer.Exit(1)

    def resolve_base_url(self, base_url: Optional[str]) -> str:
        return base_url or self.config_store.get_setting("base_url", DEFAULT_BASE_URL)

    def open_destination(self, output: str) -> Destination:
        """'-' means standard output, anything else is a file path"""
        if output == "-":
            return typer.get_binary_stream("stdout")
        return output

    def export(
        self,
        name: str,
        export_call: ExportCall,
        output: str,
        base_url: Optional[str] = None,
        offset: int = 0,
        show_progress: bool = True,
    ) -> ExportResult:
        """
        Run one export with progress reporting.

        Args:
            name: Export name for messages and logs
            export_call: Callable running the export with (client, destination, on_page)
            output: Output path, or '-' for standard output
            base_url: API base URL override
            offset: Offset the export starts at, for the progress total
            show_progress: Whether to draw a progress bar

        Returns:
            ExportResult of the finished export
        """
        destination = self.open_destination(output)
        self.logger.info(f"Starting export operation: {name} -> {output}")

        with tqdm(
            desc=f"Exporting {name}",
            unit="items",
            disable=not show_progress,
            leave=False,
        ) as pbar:

            def on_page(position: Position, count: int, total: int) -> None:
                expected = max(total - offset, 0)
                if pbar.total != expected:
                    pbar.total = expected
                    pbar.refresh()
                pbar.update(count)

            try:
                with MarketplaceClient(base_url=self.resolve_base_url(base_url)) as client:
                    result = export_call(client, destination, on_page)
            except ExportError as e:
                self.logger.error(f"Export failed for {name}: {e.message}")
                error(f"Export failed: {e.message}")
                raise typer.Exit(1)

        if output != "-":
            success(f"Exported {result.items} {name} results to {output}")
        self.logger.info(f"Export operation completed successfully: {name}")
        return result
