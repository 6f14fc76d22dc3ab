"""
Terminal helpers shared by the command-line front end.

All output goes through one Rich console so battle lines, tables and rules
share the same width and color handling.
"""

from typing import Any

from rich.console import Console
from rich.rule import Rule

# Shared by every helper below.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Prints to the shared console.

    Strings are parsed as Rich markup unless ``markup=False`` is passed, so
    text coming from a roster file must be escaped first.

    Args:
        *args: Renderables or strings to print.
        **kwargs: Forwarded to ``Console.print``.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Draws a horizontal rule, used to separate battle phases and rounds.

    Args:
        *args: Forwarded to ``Rule``, usually the title.
        **kwargs: Forwarded to ``Rule``, e.g. ``style``.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Renders a table or other renderable to an ANSI string.

    The prompt session cannot print Rich objects itself, so choice menus are
    rendered here and handed over as text.

    Args:
        content (Any): The renderable to draw.

    Returns:
        str: The rendered text, with color codes and no trailing newline.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    # Health can drop below zero.
    current = max(0, min(current, maximum))
    filled = int((current / maximum) * length) if maximum > 0 else 0
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
