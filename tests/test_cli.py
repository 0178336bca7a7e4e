import logging

from typer.testing import CliRunner

from model_defaults.cli import app

runner = CliRunner()


def test_set_model_and_effort(home, read_config):
    result = runner.invoke(app, ["set-model", "gpt-5", "--home", str(home)])
    assert result.exit_code == 0, result.output
    result = runner.invoke(app, ["set-effort", "high", "--home", str(home)])
    assert result.exit_code == 0, result.output

    assert read_config() == 'model = "gpt-5"\nmodel_reasoning_effort = "high"\n'


def test_set_model_for_profile(home, read_config):
    result = runner.invoke(app, ["set-model", "o3", "--profile", "team", "--home", str(home)])
    assert result.exit_code == 0, result.output
    assert read_config() == '[profiles.team]\nmodel = "o3"\n'


def test_invalid_effort_is_rejected(home, read_config):
    result = runner.invoke(app, ["set-effort", "extreme", "--home", str(home)])
    assert result.exit_code != 0
    assert read_config() == ""


def test_parse_error_exits_nonzero(home, write_config, read_config):
    write_config("invalid = [unclosed")
    result = runner.invoke(app, ["set-model", "gpt-5", "--home", str(home)])
    assert result.exit_code == 1
    assert read_config() == "invalid = [unclosed"


def test_show_reports_active_profile(home, write_config):
    write_config('profile = "p1"\n\n[profiles.p1]\nmodel = "o3"\n')
    result = runner.invoke(app, ["show", "--home", str(home)])
    assert result.exit_code == 0, result.output
    assert "p1" in result.output
    assert "o3" in result.output


def test_unencodable_model_prints_error(home, read_config):
    result = runner.invoke(app, ["set-model", "bad\udcff", "--home", str(home)])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert read_config() == ""


def test_verbose_enables_debug_logging(home, caplog):
    package_logger = logging.getLogger("model_defaults")
    try:
        result = runner.invoke(app, ["--verbose", "set-model", "gpt-5", "--home", str(home)])
        assert result.exit_code == 0, result.output
        assert package_logger.level == logging.DEBUG
        assert "Persisting overrides" in caplog.text
    finally:
        package_logger.setLevel(logging.NOTSET)
