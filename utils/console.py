"""
utils/console.py
----------------
Keyboard input and screen output for the interactive menus.
Handlers talk to a Console instead of calling input()/print() directly,
so tests can script a whole session.
"""

from typing import Callable, Iterable, Optional

import pandas as pd

from db.executor import QueryResult

INVALID_CHOICE_MESSAGE = "Your input is invalid!"
NO_RESULTS_MESSAGE = "\tNo results found."


class Console:
    """Prompt-and-print wrapper around an input and an output function."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._input = input_fn
        self._output = output_fn

    def prompt(self, label: str) -> str:
        """Show ``label`` and return the line typed by the user."""
        return self._input(f"\t{label}: ")

    def say(self, text: str = "") -> None:
        self._output(text)

    def show_menu(self, title: str, options: Iterable[tuple[int, str]], footer: Optional[tuple[int, str]] = None) -> None:
        self.say(title)
        self.say("-" * len(title))
        for number, label in options:
            self.say(f"{number}. {label}")
        if footer is not None:
            self.say(".........................")
            self.say(f"{footer[0]}. {footer[1]}")

    def read_choice(self) -> int:
        """Keep asking until the user types a whole number."""
        while True:
            raw = self._input("Please make your choice: ")
            try:
                return int(raw.strip())
            except (ValueError, AttributeError):
                self.say(INVALID_CHOICE_MESSAGE)

    def print_table(self, result: QueryResult, empty_message: str = NO_RESULTS_MESSAGE) -> int:
        """
        Render a query result as an aligned text table.

        Returns:
            Number of rows printed.
        """
        if result.is_empty():
            self.say(empty_message)
            return 0
        df = pd.DataFrame(result.rows, columns=result.columns)
        self.say(df.to_string(index=False))
        return len(result)
