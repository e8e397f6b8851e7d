"""
Orders export command.

Exports the orders of the seller owning the access token.
"""

from typing import Optional

import typer

from mlexport.constants import DEFAULT_OFFSET
from mlexport.export import export_orders
from mlexport.utils.console import error
from .base_exporter import BaseExporter


def create_orders_export_command():
    """Create the orders export command function"""

    def export_seller_orders(
        seller: str = typer.Option(None, "--seller", help="Seller ID"),
        feedback_status: str = typer.Option(
            None, "--feedback-status", help="Feedback status filter"
        ),
        payment_status: str = typer.Option(
            None, "--payment-status", help="Payment status filter"
        ),
        shipping_status: str = typer.Option(
            None, "--shipping-status", help="Shipping status filter"
        ),
        sort: str = typer.Option(None, "--sort", help="Sort order, e.g. date_desc"),
        access_token: str = typer.Option(
            None,
            "--access-token",
            help="Access token (default: token stored with 'config set-token')",
        ),
        output_format: str = typer.Option(
            None, "--format", help="Output format: json|csv (default: json)"
        ),
        offset: int = typer.Option(DEFAULT_OFFSET, "--offset", help="First order to export"),
        limit: Optional[int] = typer.Option(
            None, "--limit", help="Orders per page (default: 50)"
        ),
        output: str = typer.Option(
            "-", "--output", "-o", help="Output file, '-' for standard output"
        ),
        base_url: str = typer.Option(None, "--base-url", help="API base URL"),
        no_progress: bool = typer.Option(
            False, "--no-progress", help="Do not show a progress bar"
        ),
    ):
        """Export seller orders"""
        exporter = BaseExporter()

        token = access_token or exporter.config_store.get_access_token()
        if not token:
            error("No access token. Use --access-token or 'mlexport config set-token'")
            raise typer.Exit(1)

        options = exporter.resolve_options(output_format, False, offset, limit)
        args = {
            "seller": seller,
            "feedback_status": feedback_status,
            "payment_status": payment_status,
            "shipping_status": shipping_status,
            "sort": sort,
            "access_token": token,
        }

        exporter.export(
            "orders",
            lambda client, destination, on_page: export_orders(
                destination, args, options, client, on_page=on_page
            ),
            output=output,
            base_url=base_url,
            offset=options.offset,
            show_progress=not no_progress,
        )

    return export_seller_orders
