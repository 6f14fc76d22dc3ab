"""
Output sinks for the result lines of an encounter.
"""

import logging

from skirmish.core.utils import cprint


class ConsoleSink:
    """Prints every line to the rich console."""

    def __init__(self, style: str | None = None) -> None:
        self.style = style

    def emit(self, line: str) -> None:
        # Names may contain brackets, so markup is disabled.
        cprint(line, style=self.style, markup=False, highlight=False)


class RecordingSink:
    """Keeps every line in memory, in the order it was emitted."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()


class LoggingSink:
    """Forwards every line to a logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger("skirmish.battle")
        self.level = level

    def emit(self, line: str) -> None:
        self.logger.log(self.level, line)
