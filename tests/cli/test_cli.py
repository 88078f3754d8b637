from click.testing import CliRunner

from hybrid_bar.cli._main import cli

CONFIG = {
    "hybrid": {"update_rate": 3, "title": "Hi %user%", "log_level": "warning"},
    "variables": {"%user%": "alice"},
    "broken": {"count": "ten"},
}


def _invoke(path, *args):
    runner = CliRunner()
    return runner.invoke(cli, ["--config-file", str(path), *args])


def test_get_string_with_variables(write_config):
    result = _invoke(write_config(CONFIG), "get", "hybrid", "title")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Hi alice"


def test_get_raw_string(write_config):
    result = _invoke(write_config(CONFIG), "get", "hybrid", "title", "--raw")
    assert result.exit_code == 0
    assert result.output.strip() == "Hi %user%"


def test_get_int(write_config):
    result = _invoke(write_config(CONFIG), "get", "hybrid", "update_rate", "--int")
    assert result.exit_code == 0
    assert result.output.strip() == "3"


def test_get_missing_exits_2(write_config):
    result = _invoke(write_config(CONFIG), "get", "hybrid", "nope")
    assert result.exit_code == 2


def test_get_bad_int_is_fatal(write_config):
    result = _invoke(write_config(CONFIG), "get", "broken", "count", "--int")
    assert result.exit_code == 1


def test_update_rate(write_config):
    result = _invoke(write_config(CONFIG), "update-rate")
    assert result.exit_code == 0
    assert result.output.strip() == "5"


def test_variables_listing(write_config):
    result = _invoke(write_config(CONFIG), "variables")
    assert result.exit_code == 0
    assert "%user% = alice" in result.output


def test_too_many_variables_is_fatal(write_config):
    data = {"variables": {f"v{i}": "x" for i in range(65)}}
    result = _invoke(write_config(data), "variables")
    assert result.exit_code == 1


def test_config_summary(write_config):
    path = write_config(CONFIG)
    result = _invoke(path, "config")
    assert result.exit_code == 0
    assert str(path) in result.output
    assert "update_rate    = 5 ms" in result.output
    assert "variables      = 1 / 64" in result.output


def test_missing_config_file_is_fatal(tmp_path):
    result = _invoke(tmp_path / "missing.json", "update-rate")
    assert result.exit_code == 1


def test_invalid_json_is_fatal(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{")
    result = _invoke(path, "update-rate")
    assert result.exit_code == 1
