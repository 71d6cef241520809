"""Pytest configuration and fixtures."""

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from human_time.core.clock import FixedClock
from human_time.core.parser import Parser

# Thursday, the reference instant used throughout the tests
REFERENCE = datetime(2015, 5, 14, 12, 0, 0, tzinfo=timezone.utc)


def _zone_or_skip(name: str) -> ZoneInfo:
    """Load an IANA zone, skipping the test when tz data is unavailable."""
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        pytest.skip(f"time zone data for {name} not available")


@pytest.fixture
def clock():
    """Clock pinned at 2015-05-14T12:00:00Z with UTC as the local zone."""
    return FixedClock(REFERENCE)


@pytest.fixture
def parser(clock):
    return Parser(clock)


@pytest.fixture
def zone():
    """Factory loading IANA zones by name, skipping when tz data is missing."""
    return _zone_or_skip


@pytest.fixture
def new_york():
    return _zone_or_skip("America/New_York")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated(temp_dir, monkeypatch, clean_env):
    """Run in an empty directory with an empty home so no config is found."""
    home = temp_dir / "home"
    work = temp_dir / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample configuration file."""
    config_content = '''
timezone = "Asia/Tokyo"
anchored = true
format = "rfc3339"
'''
    config_file = temp_dir / "human-time.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def clean_env():
    """Clean environment variables that might affect tests."""
    env_vars = ["HUMAN_TIME_TZ"]
    old_values = {var: os.environ.get(var) for var in env_vars}

    for var in env_vars:
        if var in os.environ:
            del os.environ[var]

    yield

    for var, value in old_values.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]
