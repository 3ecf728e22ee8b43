from rich.console import Console

from .engine import LineReader
from .models import PromptSpec, prompt

YES_ANSWERS = frozenset({"y", "yes"})
NO_ANSWERS = frozenset({"n", "no"})

DEFAULT_CONFIRM_MESSAGE = "Please answer yes or no."


def parse_yes_no(text: str) -> bool:
    answer = text.strip().lower()
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    raise ValueError(f"expected yes or no, got '{text}'")


def _hint(default: bool | None) -> str:
    if default is None:
        return " [y/n] "
    return " [Y/n] " if default else " [y/N] "


def confirm_spec(text: str, error_message: str = DEFAULT_CONFIRM_MESSAGE, default: bool | None = None) -> PromptSpec[bool]:
    # error_message covers parse and validation failures alike.
    spec = (
        prompt(text, bool, parser=parse_yes_no)
        .suffix(_hint(default))
        .type_error_message(error_message)
        .validator_error_message(error_message)
    )
    if default is not None:
        spec = spec.default(default)
    return spec


def confirm(
    text: str,
    *,
    default: bool | None = None,
    read_line: LineReader | None = None,
    console: Console | None = None,
) -> bool:
    """Ask a yes/no question until the answer is one of y, yes, n or no."""
    return confirm_spec(text, default=default).get(read_line=read_line, console=console)


def confirm_with_message(
    text: str,
    error_message: str,
    *,
    default: bool | None = None,
    read_line: LineReader | None = None,
    console: Console | None = None,
) -> bool:
    return confirm_spec(text, error_message, default).get(read_line=read_line, console=console)
