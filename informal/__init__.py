"""Prompt for typed, validated input on the terminal.

    age = prompt("Please enter your age: ", UnsignedInt).matches(lambda x: x < 120).get()
    if confirm("Are you sure you want to continue?"):
        ...
"""

from .confirm import DEFAULT_CONFIRM_MESSAGE, confirm, confirm_with_message, parse_yes_no
from .engine import DEFAULT_VALIDATOR_MESSAGE, AcquisitionResult, PromptEngine, read_stdin_line
from .errors import InputStreamClosed, ParseFailure, ValidationFailure
from .models import PromptSpec, prompt
from .parsers import UnsignedInt, resolve_parser

__all__ = [
    "AcquisitionResult",
    "DEFAULT_CONFIRM_MESSAGE",
    "DEFAULT_VALIDATOR_MESSAGE",
    "InputStreamClosed",
    "ParseFailure",
    "PromptEngine",
    "PromptSpec",
    "UnsignedInt",
    "ValidationFailure",
    "confirm",
    "confirm_with_message",
    "parse_yes_no",
    "prompt",
    "read_stdin_line",
    "resolve_parser",
]
