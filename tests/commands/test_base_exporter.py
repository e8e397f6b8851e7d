import pytest
import typer

from mlexport.commands.export.base_exporter import BaseExporter
from mlexport.constants import DEFAULT_BASE_URL
from mlexport.export import ExportResult, FetchFailedError, OutputFormat, Position


@pytest.fixture
def exporter(mocker):
    be = BaseExporter()
    be.config_store = mocker.Mock()
    be.config_store.get_settings.return_value = {}
    be.config_store.get_setting.side_effect = lambda key, default=None: default
    be.logger = mocker.Mock()

    client = mocker.MagicMock()
    client.__enter__.return_value = client
    mocker.patch(
        "mlexport.commands.export.base_exporter.MarketplaceClient", return_value=client
    )
    mocker.patch("mlexport.commands.export.base_exporter.success")
    mocker.patch("mlexport.commands.export.base_exporter.error")
    be.client = client
    return be


def test_resolve_options_defaults(exporter):
    options = exporter.resolve_options(None, False, 0, None)

    assert options.output_format is OutputFormat.JSON
    assert options.limit == 50


def test_resolve_options_prefers_flags_over_settings(exporter):
    exporter.config_store.get_settings.return_value = {"format": "csv", "limit": 10}

    from_settings = exporter.resolve_options(None, False, 0, None)
    from_flags = exporter.resolve_options("json", False, 5, 20)

    assert (from_settings.output_format, from_settings.limit) == (OutputFormat.CSV, 10)
    assert (from_flags.output_format, from_flags.limit, from_flags.offset) == (
        OutputFormat.JSON, 20, 5,
    )


def test_resolve_options_invalid_exits(exporter):
    with pytest.raises(typer.Exit):
        exporter.resolve_options("xml", False, 0, None)


def test_resolve_base_url(exporter):
    assert exporter.resolve_base_url(None) == DEFAULT_BASE_URL
    assert exporter.resolve_base_url("https://api.test") == "https://api.test"


def test_open_destination(exporter):
    assert exporter.open_destination("out.json") == "out.json"
    assert hasattr(exporter.open_destination("-"), "write")


def test_export_passes_client_and_destination(exporter, tmp_path):
    output = str(tmp_path / "out.json")
    calls = []

    def export_call(client, destination, on_page):
        calls.append((client, destination))
        on_page(Position.FIRST_AND_LAST, 3, 3)
        return ExportResult(pages=1, items=3, total=3)

    result = exporter.export("search", export_call, output, show_progress=False)

    assert result.items == 3
    assert calls == [(exporter.client, output)]


def test_export_error_exits(exporter, tmp_path):
    def export_call(client, destination, on_page):
        raise FetchFailedError("500 - boom", status_code=500)

    with pytest.raises(typer.Exit):
        exporter.export("search", export_call, str(tmp_path / "x.json"), show_progress=False)

    exporter.logger.error.assert_called_once()
