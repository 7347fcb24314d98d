"""Interactive prompts: line input with a cancel sentinel, numbered menus.

`Terminal.ask` never exits the process. Typing the sentinel returns a
`Cancel` value and every caller hands it back up until the entry point
decides the exit code, which keeps scripted input usable in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence

from rich.console import Console
from rich.text import Text

CANCEL_SENTINEL = "0"
DEFAULT_PROMPT = "Select Option:"
INVALID_OPTION_MESSAGE = "Invalid option selected, try again."
BANNER_RULE = "=" * 36


@dataclass(frozen=True)
class Answer:
    """A line typed by the user, already stripped."""

    text: str


@dataclass(frozen=True)
class Cancel:
    """The user asked to leave the program."""


PromptResult = Answer | Cancel


@dataclass
class Terminal:
    """Console output plus a line reader (builtin `input` by default)."""

    console: Console = field(default_factory=Console)
    read_line: Callable[[], str] = input

    def say(self, message: str | Text, *, style: str | None = None) -> None:
        self.console.print(message, style=style, markup=False, highlight=False)

    def ask(self, message: str | Text) -> PromptResult:
        self.say(message)
        self.say(f"Press {CANCEL_SENTINEL} to exit", style="dim")
        try:
            raw = self.read_line()
        except EOFError:
            return Cancel()

        text = raw.strip()
        if text == CANCEL_SENTINEL:
            return Cancel()
        return Answer(text)


def render_menu(options: Sequence[object], prompt: str | None = None) -> Text:
    """Banner with the prompt, followed by `1: option` lines."""

    menu = Text()
    menu.append(f"\n{BANNER_RULE}\n", style="cyan")
    menu.append(prompt or DEFAULT_PROMPT, style="bold")
    menu.append(f"\n{BANNER_RULE}\n", style="cyan")
    for idx, option in enumerate(options, start=1):
        menu.append(f"\n{idx}: {option}")
    return menu


def parse_choice(text: str, option_count: int) -> int | None:
    """Zero-based index for a 1-based answer, or None when out of range."""

    try:
        number = int(text)
    except ValueError:
        return None
    if 1 <= number <= option_count:
        return number - 1
    return None


def select_option(
    terminal: Terminal,
    options: Sequence[object],
    prompt: str | None = None,
) -> int | Cancel:
    """Ask until the user picks a listed option or cancels."""

    menu = render_menu(options, prompt)
    while True:
        result = terminal.ask(menu)
        if isinstance(result, Cancel):
            return result

        index = parse_choice(result.text, len(options))
        if index is not None:
            return index
        terminal.say(INVALID_OPTION_MESSAGE, style="yellow")
