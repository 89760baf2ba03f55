import json

import pytest
from typer.testing import CliRunner

from utilkit.cli import app
from utilkit.core.timezones import LOCAL_TZ_ENV


@pytest.fixture
def runner():
    return CliRunner()


def test_no_subcommand_shows_help(runner):
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "tz" in result.output
    assert "array" in result.output


def test_tz_list(runner):
    result = runner.invoke(app, ["tz", "list"])

    assert result.exit_code == 0
    assert "CEST" in result.output
    assert "UTC+02:00" in result.output
    assert "UTC+05:30" in result.output


def test_tz_get(runner):
    result = runner.invoke(app, ["tz", "get", "CEST"])

    assert result.exit_code == 0
    assert result.output.startswith("CEST\tUTC+02:00\t")


def test_tz_get_unknown_uses_local(runner, monkeypatch):
    monkeypatch.setenv(LOCAL_TZ_ENV, "UTC+03:00")
    result = runner.invoke(app, ["tz", "get", "XYZ"])

    assert result.exit_code == 0
    assert "UTC+03:00\tUTC+03:00\tLocal Time" in result.output


def test_tz_get_unknown_strict(runner):
    result = runner.invoke(app, ["tz", "get", "XYZ", "--strict"])

    assert result.exit_code == 1


def test_tz_now(runner):
    result = runner.invoke(app, ["tz", "now", "JST"])

    assert result.exit_code == 0
    assert result.output.strip().endswith("+09:00")


def test_array_flat(runner):
    result = runner.invoke(app, ["array", "flat", "[1, [2, [3, [4]]]]", "--depth", "2"])

    assert result.exit_code == 0
    assert json.loads(result.output) == [1, 2, 3, [4]]


def test_array_flat_negative_depth(runner):
    result = runner.invoke(app, ["array", "flat", "[1]", "-d", "-1"])

    assert result.exit_code != 0


def test_array_join(runner):
    result = runner.invoke(app, ["array", "join", '["a", "b", 3]', "--sep", "-"])

    assert result.exit_code == 0
    assert result.output.strip() == "a-b-3"


def test_array_sort(runner):
    result = runner.invoke(app, ["array", "sort", "[3, 1, 2]"])
    assert json.loads(result.output) == [1, 2, 3]

    result = runner.invoke(app, ["array", "sort", "[3, 1, 2]", "-r"])
    assert json.loads(result.output) == [3, 2, 1]


def test_array_sort_not_comparable(runner):
    result = runner.invoke(app, ["array", "sort", '[1, "a"]'])

    assert result.exit_code == 1


@pytest.mark.parametrize("values", ["[1, 2", '{"a": 1}'])
def test_array_invalid_input(runner, values):
    result = runner.invoke(app, ["array", "join", values])

    assert result.exit_code == 1
