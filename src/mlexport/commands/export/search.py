"""
Search export command.

Exports the item search results of a site, optionally resolving seller
nicknames into an extra CSV column.
"""

from typing import Optional

import typer

from mlexport.constants import DEFAULT_OFFSET
from mlexport.export import export_search
from mlexport.utils.console import error
from .base_exporter import BaseExporter


def create_search_export_command():
    """Create the search export command function"""

    def export_search_results(
        site: str = typer.Option(
            None, "--site", help="Site ID, e.g. MLA (default: stored site_id)"
        ),
        q: str = typer.Option(None, "--q", help="Free text query"),
        category: str = typer.Option(None, "--category", help="Category ID"),
        nickname: str = typer.Option(None, "--nickname", help="Seller nickname"),
        seller_id: str = typer.Option(None, "--seller-id", help="Seller ID"),
        output_format: str = typer.Option(
            None, "--format", help="Output format: json|csv (default: json)"
        ),
        include_nickname: bool = typer.Option(
            False,
            "--include-nickname",
            help="Add the seller nickname column (CSV only)",
        ),
        offset: int = typer.Option(DEFAULT_OFFSET, "--offset", help="First result to export"),
        limit: Optional[int] = typer.Option(
            None, "--limit", help="Results per page (default: 50)"
        ),
        output: str = typer.Option(
            "-", "--output", "-o", help="Output file, '-' for standard output"
        ),
        base_url: str = typer.Option(None, "--base-url", help="API base URL"),
        no_progress: bool = typer.Option(
            False, "--no-progress", help="Do not show a progress bar"
        ),
    ):
        """Export item search results"""
        exporter = BaseExporter()

        site_id = site or exporter.config_store.get_setting("site_id")
        if not site_id:
            error("No site given. Use --site or 'mlexport config set site_id <SITE>'")
            raise typer.Exit(1)

        options = exporter.resolve_options(output_format, include_nickname, offset, limit)
        args = {"q": q, "category": category, "nickname": nickname, "seller_id": seller_id}

        exporter.export(
            "search",
            lambda client, destination, on_page: export_search(
                destination, site_id, args, options, client, on_page=on_page
            ),
            output=output,
            base_url=base_url,
            offset=options.offset,
            show_progress=not no_progress,
        )

    return export_search_results
