"""
Configuration commands for mlexport.

Stored settings provide defaults for export flags; the orders access
token lives in the OS keyring, never in the settings file.
"""

from typing import Any

import typer
from keyring.errors import KeyringError

from mlexport.constants import SETTINGS_KEYS
from mlexport.export import OutputFormat
from mlexport.logging import LogLevel, get_logger
from mlexport.utils.config_store import ConfigStore
from mlexport.utils.console import console, create_table, error, info, success, warning

app = typer.Typer(help="Manage mlexport settings")


def validate_setting(key: str, value: str) -> Any:
    """
    Validate a setting and convert it to its stored type.

    Raises:
        ValueError: If the key is unknown or the value invalid
    """
    if key not in SETTINGS_KEYS:
        raise ValueError(f"Unknown setting '{key}'. Valid keys: {', '.join(SETTINGS_KEYS)}")

    if key == "format":
        if value not in [fmt.value for fmt in OutputFormat]:
            raise ValueError("format must be json or csv")
    elif key == "limit":
        if not value.isdigit() or int(value) < 1:
            raise ValueError("limit must be a positive integer")
        return int(value)
    elif key == "log_level":
        value = value.upper()
        if value not in [lev.value for lev in LogLevel]:
            raise ValueError("log_level must be DEBUG, INFO, WARNING or ERROR")
    elif key == "base_url":
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        value = value.rstrip("/")
    return value


@app.command("show")
def show_config() -> None:
    """Show stored settings"""
    store = ConfigStore()
    settings = store.get_settings()

    table = create_table("mlexport settings", ["Setting", "Value"])
    for key in SETTINGS_KEYS:
        table.add_row(key, str(settings.get(key, "-")))
    token_stored = store.get_access_token() is not None
    table.add_row("access_token", "stored in keyring" if token_stored else "-")
    console.print(table)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help=f"Setting: {', '.join(SETTINGS_KEYS)}"),
    value: str = typer.Argument(..., help="Value"),
) -> None:
    """Store a default setting"""
    try:
        stored = validate_setting(key, value)
    except ValueError as e:
        error(str(e))
        raise typer.Exit(1)

    ConfigStore().set_setting(key, stored)
    get_logger("mlexport.commands.config").info(f"Setting updated: {key}")
    success(f"{key} set to {stored}")


@app.command("unset")
def unset_config(key: str = typer.Argument(..., help="Setting to remove")) -> None:
    """Remove a stored setting"""
    if ConfigStore().unset_setting(key):
        success(f"{key} removed")
    else:
        warning(f"{key} was not set")


@app.command("set-token")
def set_token(
    token: str = typer.Option(
        ..., "--token", prompt=True, hide_input=True, help="Orders access token"
    ),
) -> None:
    """Store the orders access token in the OS keyring"""
    try:
        ConfigStore().store_access_token(token)
    except KeyringError as e:
        get_logger("mlexport.commands.config").error(f"Failed to store token: {str(e)}")
        error(f"Failed to store token: {str(e)}")
        raise typer.Exit(1)
    success("Access token stored in keyring")


@app.command("clear-token")
def clear_token() -> None:
    """Remove the stored access token"""
    if ConfigStore().delete_access_token():
        success("Access token removed")
    else:
        info("No access token stored")
