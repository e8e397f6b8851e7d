"""
Log commands for the mlexport CLI.
"""

from typing import Optional

import typer
from rich.syntax import Syntax

from mlexport.constants import LOG_APP_NAME, LOG_LINES_TO_SHOW
from mlexport.logging import get_logger, setup_logging
from mlexport.logging.config import get_log_file_path
from mlexport.utils.console import console, error, info, warning

app = typer.Typer(help="Inspect mlexport logs")


@app.command("show")
def show_logs(
    lines: int = typer.Option(
        LOG_LINES_TO_SHOW, "--lines", "-n", help="Number of lines to show"
    ),
    level: Optional[str] = typer.Option(
        None, "--level", help="Filter by log level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """Show recent log entries"""
    setup_logging()
    logger = get_logger("mlexport.commands.logs")

    try:
        log_file = get_log_file_path()

        if not log_file.exists():
            warning(f"No log file found. Run some {LOG_APP_NAME} commands to generate logs.")
            return

        with open(log_file, "r", encoding="utf-8") as f:
            all_lines = f.readlines()

        if level:
            level_upper = level.upper()
            all_lines = [line for line in all_lines if level_upper in line]
        display_lines = all_lines[-lines:]

        if not display_lines:
            info("No log entries found matching the criteria.")
            return

        console.print(Syntax("".join(display_lines), "log", theme="monokai", line_numbers=False))

    except OSError as e:
        logger.error(f"Failed to show logs: {str(e)}")
        error(f"Failed to show logs: {str(e)}")
        raise typer.Exit(1)


@app.command("path")
def log_path() -> None:
    """Print the log file path"""
    typer.echo(str(get_log_file_path()))
