import typer
from mlexport.commands import config, logs
from mlexport.commands.export import app as export_app
from mlexport.logging import setup_logging, get_logger

app = typer.Typer(
    help="[bold blue]mlexport[/bold blue] - Stream paginated marketplace "
    "results to JSON or CSV",
    rich_markup_mode="rich",
)

app.add_typer(export_app, name="export")
app.add_typer(config.app, name="config")
app.add_typer(logs.app, name="logs")


@app.callback()
def callback():
    """
    [bold blue]mlexport[/bold blue] - Stream paginated marketplace results to JSON or CSV.

    Pages are fetched one at a time and written as they arrive, so exports
    of any size run in constant memory.
    """


def main():
    setup_logging()
    logger = get_logger("mlexport.main")
    logger.info("mlexport CLI started")

    try:
        app()
    except Exception as e:
        logger.error(f"Unhandled exception in main: {str(e)}")
        raise
    finally:
        logger.info("mlexport CLI finished")


if __name__ == "__main__":
    main()
