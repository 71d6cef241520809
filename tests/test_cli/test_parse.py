"""Tests for CLI parse command."""

import pytest
from click.testing import CliRunner

from human_time.cli.main import cli

NOW = "2015-05-14T12:00:00Z"


@pytest.fixture
def runner():
    return CliRunner()


class TestParseHelp:
    def test_help_output(self, runner):
        result = runner.invoke(cli, ["parse", "--help"])
        assert result.exit_code == 0
        assert "--now" in result.output
        assert "--format" in result.output
        assert "--anchored" in result.output
        assert "--explain" in result.output


class TestParse:
    """Tests for `htime parse`."""

    def test_single_expression(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "3 days ago"])
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-11T00:00:00+00:00"

    def test_multiple_expressions(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "this week", "now + 2 d"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "2015-05-11T00:00:00+00:00",
            "2015-05-16T12:00:00+00:00",
        ]

    def test_rfc3339_format(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "-f", "rfc3339", "now - 90m"])
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-14T10:30:00Z"

    def test_epoch_format(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "--format", "epoch", "now"])
        assert result.exit_code == 0
        assert result.output.strip() == "1431604800"

    def test_tz_option(self, runner, isolated, zone):
        zone("Asia/Tokyo")
        result = runner.invoke(cli, ["--tz", "Asia/Tokyo", "parse", "--now", NOW, "today"])
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-14T00:00:00+09:00"

    def test_zoneless_now_uses_tz_option(self, runner, isolated, zone):
        zone("Asia/Tokyo")
        result = runner.invoke(
            cli, ["--tz", "Asia/Tokyo", "parse", "--now", "2015-05-14 12:00:00", "now"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-14T12:00:00+09:00"

    def test_zoneless_now_uses_env_timezone(self, runner, isolated, zone, monkeypatch):
        zone("Asia/Tokyo")
        monkeypatch.setenv("HUMAN_TIME_TZ", "Asia/Tokyo")
        result = runner.invoke(cli, ["parse", "--now", "2015-05-14 23:30:00", "today"])
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-14T00:00:00+09:00"

    def test_env_timezone(self, runner, isolated, zone, monkeypatch):
        zone("Asia/Tokyo")
        monkeypatch.setenv("HUMAN_TIME_TZ", "Asia/Tokyo")
        result = runner.invoke(cli, ["parse", "--now", NOW, "01:02:03"])
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-14T01:02:03+09:00"

    def test_unknown_tz(self, runner, isolated):
        result = runner.invoke(cli, ["--tz", "Nowhere/Atlantis", "parse", "today"])
        assert result.exit_code != 0
        assert "Unknown time zone" in result.output

    def test_unparsable_expression(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "gibberish"])
        assert result.exit_code == 1
        assert "cannot parse" in result.output

    def test_partial_failure_still_prints_results(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "today", "nonsense"])
        assert result.exit_code == 1
        assert "2015-05-14T00:00:00+00:00" in result.output
        assert "nonsense" in result.output

    def test_bad_duration(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "now + 3y"])
        assert result.exit_code == 1
        assert "invalid duration" in result.output

    def test_bad_now(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", "whenever", "today"])
        assert result.exit_code == 2
        assert "cannot parse" in result.output

    def test_anchored(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "--anchored", "since yesterday"])
        assert result.exit_code == 1

    def test_explain(self, runner, isolated):
        result = runner.invoke(cli, ["parse", "--now", NOW, "--explain", "3 days ago", "today"])
        assert result.exit_code == 0
        assert "days-ago" in result.output
        assert "today" in result.output
        assert "2015-05-11T00:00:00+00:00" in result.output

    def test_verbose_logging(self, runner, isolated):
        result = runner.invoke(cli, ["-v", "parse", "--now", NOW, "yesterday"])
        assert result.exit_code == 0
        assert "2015-05-13T00:00:00+00:00" in result.output


class TestParseWithConfig:
    """Tests for `htime parse` picking up configuration."""

    def test_config_file(self, runner, isolated, sample_config, zone):
        zone("Asia/Tokyo")
        result = runner.invoke(
            cli, ["--config", str(sample_config), "parse", "--now", NOW, "today"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-14T00:00:00+09:00"

    def test_config_anchored(self, runner, isolated, sample_config, zone):
        zone("Asia/Tokyo")
        result = runner.invoke(
            cli, ["--config", str(sample_config), "parse", "--now", NOW, "since today"]
        )
        assert result.exit_code == 1

    def test_discovered_config(self, runner, isolated):
        (isolated / "human-time.toml").write_text('format = "epoch"\n')
        result = runner.invoke(cli, ["parse", "--now", NOW, "today"])
        assert result.exit_code == 0
        assert result.output.strip() == "1431561600"

    def test_format_option_overrides_config(self, runner, isolated):
        (isolated / "human-time.toml").write_text('format = "epoch"\n')
        result = runner.invoke(cli, ["parse", "--now", NOW, "-f", "iso", "today"])
        assert result.output.strip() == "2015-05-14T00:00:00+00:00"

    def test_broken_config(self, runner, isolated):
        (isolated / "human-time.toml").write_text('format = "yaml"\n')
        result = runner.invoke(cli, ["parse", "--now", NOW, "today"])
        assert result.exit_code != 0
        assert "Unknown output format" in result.output
