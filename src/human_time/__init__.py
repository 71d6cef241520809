"""human-time: parse human-friendly date and time expressions."""

__version__ = "0.1.0"

from human_time.core.clock import Clock, FixedClock, SystemClock
from human_time.core.config import HumanTimeConfig, get_config, load_config, reload_config
from human_time.core.duration import parse_duration
from human_time.core.exceptions import (
    ConfigError,
    DurationError,
    HumanTimeError,
    MalformedSubfieldError,
    ParseError,
    UnrecognizedInputError,
)
from human_time.core.parser import EPOCH, Match, Parser, explain, parse, try_parse

__all__ = [
    # Version
    "__version__",
    # Parsing
    "parse",
    "try_parse",
    "explain",
    "Parser",
    "Match",
    "EPOCH",
    "parse_duration",
    # Clocks
    "Clock",
    "SystemClock",
    "FixedClock",
    # Config
    "load_config",
    "get_config",
    "reload_config",
    "HumanTimeConfig",
    # Exceptions
    "HumanTimeError",
    "ParseError",
    "UnrecognizedInputError",
    "MalformedSubfieldError",
    "DurationError",
    "ConfigError",
]
