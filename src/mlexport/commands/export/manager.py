"""
Export commands manager.

Registers the export commands on the export CLI application.
"""

import typer

from .orders import create_orders_export_command
from .search import create_search_export_command

app = typer.Typer(help="Export paginated results to JSON or CSV")

app.command("orders")(create_orders_export_command())
app.command("search")(create_search_export_command())
