"""Tests for the HUMAN_TIME click parameter type."""

from datetime import datetime, timezone

import click
import pytest
from click.testing import CliRunner

from human_time.cli.params import HUMAN_TIME, HumanTimeParamType
from human_time.core.clock import FixedClock


def _command(param_type):
    @click.command()
    @click.option("--since", type=param_type)
    def history(since):
        click.echo(since.isoformat() if since else "none")

    return history


@pytest.fixture
def runner():
    return CliRunner()


class TestHumanTimeParamType:
    def test_converts_expression(self, runner, clock):
        result = runner.invoke(_command(HumanTimeParamType(clock)), ["--since", "2 days ago"])
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-12T00:00:00+00:00"

    def test_rejects_garbage(self, runner, clock):
        result = runner.invoke(_command(HumanTimeParamType(clock)), ["--since", "whenever"])
        assert result.exit_code == 2
        assert "cannot parse" in result.output

    def test_anchored(self, runner, clock):
        param_type = HumanTimeParamType(clock, anchored=True)
        result = runner.invoke(_command(param_type), ["--since", "since yesterday"])
        assert result.exit_code == 2

    def test_default_instance(self, runner):
        result = runner.invoke(_command(HUMAN_TIME), ["--since", "2015-05-14T01:02:33Z"])
        assert result.exit_code == 0
        assert result.output.strip() == "2015-05-14T01:02:33+00:00"

    def test_passes_datetimes_through(self):
        value = datetime(2015, 5, 14, tzinfo=timezone.utc)
        assert HUMAN_TIME.convert(value, None, None) is value

    def test_convert_directly(self):
        clock = FixedClock(datetime(2015, 5, 14, 12, tzinfo=timezone.utc))
        assert HumanTimeParamType(clock).convert("today", None, None) == datetime(
            2015, 5, 14, tzinfo=timezone.utc
        )
