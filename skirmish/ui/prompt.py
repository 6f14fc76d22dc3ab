"""
Choice prompts for the player.

A ChoicePrompt holds a question and an ordered list of option labels, and
delegates the actual selection to a provider. The interactive provider shows
a Rich table and reads the answer through prompt_toolkit; tests and other
hosts can inject any callable with the same signature.
"""

from prompt_toolkit import ANSI, PromptSession
from rich.markup import escape
from rich.table import Table

from skirmish.core.utils import ccapture
from skirmish.interfaces import ChoiceProvider

# One session keeps history, created on first use.
_session: PromptSession | None = None


def get_session() -> PromptSession:
    global _session
    if _session is None:
        _session = PromptSession(erase_when_done=True)
    return _session


def get_digit_choice(answer: str) -> int:
    """
    Convert a numeric string input to its integer value.

    Args:
        answer (str): User input string to parse.

    Returns:
        int: The integer value of the input, or -1 if invalid input.

    """
    answer = answer.strip() if isinstance(answer, str) else ""
    if answer.isdigit():
        return int(answer)
    return -1


def cli_choice(prompt: str, options: list[str]) -> int:
    """
    Ask the user to pick one of the options from the terminal.

    Keeps asking until the user types the number of an existing option.

    Args:
        prompt (str): The question shown as the title of the table.
        options (list[str]): The labels of the options.

    Returns:
        int: The 1-based index of the chosen option.

    """
    table = Table(title=escape(prompt), pad_edge=False)
    table.add_column("#", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    for i, option in enumerate(options, 1):
        table.add_row(str(i), escape(option))
    message = "\n" + ccapture(table) + "\n> "
    while True:
        answer = get_session().prompt(ANSI(message))
        index = get_digit_choice(answer)
        if 1 <= index <= len(options):
            return index


class ChoicePrompt:
    """A question with an ordered list of options."""

    def __init__(
        self,
        prompt: str,
        options: list[str] | None = None,
        provider: ChoiceProvider | None = None,
    ) -> None:
        """
        Args:
            prompt (str): The question to ask.
            options (list[str] | None): The initial option labels.
            provider (ChoiceProvider | None): Where selections come from.
                Defaults to the interactive terminal prompt.

        """
        self.prompt: str = prompt
        self.options: list[str] = list(options or [])
        self.provider: ChoiceProvider = provider or cli_choice

    def __len__(self) -> int:
        return len(self.options)

    def add_choice(self, label: str) -> None:
        """Appends an option after the existing ones."""
        self.options.append(label)

    def activate(self) -> int:
        """
        Blocks until the provider returns a selection.

        The value is returned as-is: interpreting a selection that matches
        no option is left to the caller.

        Returns:
            int: The 1-based index of the chosen option.

        """
        return self.provider(self.prompt, list(self.options))
