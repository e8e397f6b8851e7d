import pytest
import typer

from mlexport.commands.logs import log_path, show_logs


def test_show_logs_no_log_file(mocker):
    mocker.patch("mlexport.commands.logs.setup_logging")
    log_file = mocker.Mock()
    log_file.exists.return_value = False
    mocker.patch("mlexport.commands.logs.get_log_file_path", return_value=log_file)
    warning = mocker.patch("mlexport.commands.logs.warning")

    show_logs(lines=10, level=None)

    warning.assert_called_once()


def test_show_logs_with_lines(mocker, tmp_path):
    mocker.patch("mlexport.commands.logs.setup_logging")
    log_file = tmp_path / "mlexport.log"
    log_file.write_text("INFO one\nERROR two\nDEBUG three\n", encoding="utf-8")
    mocker.patch("mlexport.commands.logs.get_log_file_path", return_value=log_file)
    console = mocker.patch("mlexport.commands.logs.console")

    show_logs(lines=2, level=None)

    console.print.assert_called_once()
    syntax = console.print.call_args[0][0]
    assert syntax.code == "ERROR two\nDEBUG three\n"


def test_show_logs_level_filter_no_match(mocker, tmp_path):
    mocker.patch("mlexport.commands.logs.setup_logging")
    log_file = tmp_path / "mlexport.log"
    log_file.write_text("INFO one\nDEBUG two\n", encoding="utf-8")
    mocker.patch("mlexport.commands.logs.get_log_file_path", return_value=log_file)
    info = mocker.patch("mlexport.commands.logs.info")

    show_logs(lines=10, level="error")

    info.assert_called_once()


def test_show_logs_read_error(mocker):
    mocker.patch("mlexport.commands.logs.setup_logging")
    mocker.patch("mlexport.commands.logs.get_log_file_path", side_effect=OSError("denied"))
    error = mocker.patch("mlexport.commands.logs.error")

    with pytest.raises(typer.Exit):
        show_logs(lines=10, level=None)

    error.assert_called_once()


def test_log_path(mocker, tmp_path, capsys):
    mocker.patch("mlexport.commands.logs.get_log_file_path", return_value=tmp_path / "mlexport.log")

    log_path()

    assert capsys.readouterr().out.strip() == str(tmp_path / "mlexport.log")
