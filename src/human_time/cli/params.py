"""Click parameter type for options that take a human-friendly time."""

from datetime import datetime
from typing import Any, Optional

import click

from human_time.core.clock import Clock
from human_time.core.exceptions import ParseError
from human_time.core.parser import Parser


class HumanTimeParamType(click.ParamType):
    """Converts option values like ``"2 days ago"`` into datetimes.

    Example:
        @click.option("--since", type=HUMAN_TIME)
        def history(since: datetime | None) -> None: ...
    """

    name = "time"

    def __init__(self, clock: Optional[Clock] = None, anchored: bool = False) -> None:
        self.clock = clock
        self.anchored = anchored

    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> datetime:
        if isinstance(value, datetime):
            return value

        try:
            return Parser(self.clock, anchored=self.anchored).parse(value)
        except ParseError as e:
            self.fail(str(e), param, ctx)

    def __repr__(self) -> str:
        return "HUMAN_TIME"


HUMAN_TIME = HumanTimeParamType()
